"""Cheap, network-free signals computed from a fetched careers page."""

from careerprobe.ats.models import IndicatorTally

# Each keyword counts once per page no matter how often it appears.
INDICATOR_KEYWORDS: dict[str, list[str]] = {
    "greenhouse": ["greenhouse.io", "boards.greenhouse", "grnhse", "gh-", "data-gh"],
    "lever": [
        "lever.co",
        "jobs.lever",
        "api.lever",
        "data-lever",
        "lever-application",
        "lever ats",
        "levercareers",
    ],
    "ashby": ["ashbyhq", "jobs.ashbyhq", "ashby.com"],
    "workday": ["myworkdayjobs", "wd1.", "wd5.", "workday.com/careers"],
}

CAREER_URL_HINTS = ["career", "job", "hiring", "join", "positions"]
CAREER_CONTENT_HINTS = [
    "open position",
    "job opening",
    "join our team",
    "we're hiring",
    "apply now",
    "view all jobs",
    "current opening",
]


def score_indicators(html: str) -> IndicatorTally:
    text = (html or "").lower()
    tally = IndicatorTally()
    for field, keywords in INDICATOR_KEYWORDS.items():
        setattr(tally, field, sum(1 for k in keywords if k in text))
    return tally


def is_likely_careers_page(url: str, html: str) -> bool:
    """
    Gate for probing a page that carries no vendor keywords at all.
    Not evidence of any particular vendor.
    """
    url_lower = (url or "").lower()
    if any(h in url_lower for h in CAREER_URL_HINTS):
        return True
    text = (html or "").lower()
    return any(h in text for h in CAREER_CONTENT_HINTS)
