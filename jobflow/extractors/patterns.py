"""Marker patterns for each supported job board.

Each pattern captures the inner markup of one field in group 1. They target
the server-rendered markup of the named site as last checked; when a board
changes its class names, update the constant here rather than the extractor.
``.`` deliberately does not cross newlines.
"""
from __future__ import annotations

import re

# LinkedIn public job view (top-card layout, guest markup)
LINKEDIN_TITLE = re.compile(r'<h1[^>]*class="[^"]*top-card-layout__title[^"]*"[^>]*>(.*?)</h1>')
LINKEDIN_COMPANY = re.compile(r'<a[^>]*class="[^"]*topcard__org-name-link[^"]*"[^>]*>(.*?)</a>')
LINKEDIN_LOCATION = re.compile(r'<span[^>]*class="[^"]*topcard__flavor[^"]*"[^>]*>(.*?)</span>')
LINKEDIN_DESCRIPTION = re.compile(r'<div[^>]*class="[^"]*description__text[^"]*"[^>]*>(.*?)</div>')
# Job id segment in /jobs/view/<id>
LINKEDIN_VIEW_SEGMENT = "view"

# Indeed job page (jobsearch-* view component classes)
INDEED_TITLE = re.compile(r'<h1[^>]*class="[^"]*jobsearch-JobInfoHeader-title[^"]*"[^>]*>(.*?)</h1>')
INDEED_COMPANY = re.compile(r'<div[^>]*class="[^"]*jobsearch-InlineCompanyRating[^"]*"[^>]*>.*?<a[^>]*>(.*?)</a>')
INDEED_LOCATION = re.compile(r'<div[^>]*class="[^"]*jobsearch-JobInfoHeader-subtitle[^"]*"[^>]*>.*?<div[^>]*>(.*?)</div>')
INDEED_SALARY = re.compile(r'<div[^>]*class="[^"]*salary-snippet[^"]*"[^>]*>(.*?)</div>')

# Glassdoor job listing (camelCase class names)
GLASSDOOR_TITLE = re.compile(r'<div[^>]*class="[^"]*jobTitle[^"]*"[^>]*>(.*?)</div>')
GLASSDOOR_COMPANY = re.compile(r'<div[^>]*class="[^"]*employerName[^"]*"[^>]*>(.*?)</div>')
GLASSDOOR_SALARY = re.compile(r'<span[^>]*class="[^"]*salary[^"]*"[^>]*>(.*?)</span>')

# Government of Canada Job Bank posting
JOBBANK_TITLE = re.compile(r'<h1[^>]*id="jb-jobtitle"[^>]*>(.*?)</h1>')
JOBBANK_COMPANY = re.compile(r'<span[^>]*class="[^"]*noc-no-wrap[^"]*"[^>]*>(.*?)</span>')
JOBBANK_LOCATION = "Canada"

# Greenhouse hosted board (classic app-title layout)
GREENHOUSE_TITLE = re.compile(r'<h1[^>]*class="[^"]*app-title[^"]*"[^>]*>(.*?)</h1>')

# Lever hosted posting
LEVER_TITLE = re.compile(r'<h2[^>]*class="[^"]*posting-headline[^"]*"[^>]*>(.*?)</h2>')

# Workday candidate experience (data-automation-id attributes)
WORKDAY_TITLE = re.compile(r'<h1[^>]*data-automation-id="jobPostingHeader"[^>]*>(.*?)</h1>')

# Shared "location" div used by Glassdoor, Greenhouse and Lever
LOCATION_DIV = re.compile(r'<div[^>]*class="[^"]*location[^"]*"[^>]*>(.*?)</div>')

# Generic fallbacks, tried in this order
GENERIC_H1 = re.compile(r"<h1[^>]*>(.*?)</h1>")
GENERIC_TITLE = re.compile(r"<title>(.*?)</title>")
GENERIC_OG_TITLE = re.compile(r'<meta[^>]*property="og:title"[^>]*content="([^"]*)"')
GENERIC_TITLE_PATTERNS: tuple[re.Pattern[str], ...] = (GENERIC_H1, GENERIC_TITLE, GENERIC_OG_TITLE)
GENERIC_MIN_TITLE_LENGTH = 5

LINKEDIN_DESCRIPTION_LIMIT = 500
