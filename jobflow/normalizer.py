"""Turn scraped markup fragments into plain display text."""
from __future__ import annotations

import re

_TAG_RE = re.compile(r"<[^>]+>")
_WS_RE = re.compile(r"\s+")

# Order matters: &amp; is decoded first, exactly as the stored records expect.
_ENTITIES: tuple[tuple[str, str], ...] = (
    ("&amp;", "&"),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&#39;", "'"),
    ("&nbsp;", " "),
)


def clean_html(fragment: str) -> str:
    """Strip tags, decode the common entities and collapse whitespace.

    This is a textual pass, not a parse: anything between angle brackets
    goes, and entities outside the short list above are left alone.
    """
    if not fragment:
        return ""
    text = _TAG_RE.sub("", fragment)
    for entity, char in _ENTITIES:
        text = text.replace(entity, char)
    return _WS_RE.sub(" ", text.strip()).strip()
