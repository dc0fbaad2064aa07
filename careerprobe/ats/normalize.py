"""
Turn job-specific ATS links into board roots that can be fetched again.

    https://acme.wd1.myworkdayjobs.com/Careers/job/123456  -> .../Careers/
    https://jobs.ashbyhq.com/acme/<uuid>                    -> .../acme/
    https://boards.greenhouse.io/acme/jobs/42               -> .../acme
    https://jobs.lever.co/acme/<uuid>/apply                 -> .../acme
"""

import re
from typing import NamedTuple
from urllib.parse import urlparse

from careerprobe.ats.vendors import ATSVendor, is_workday_url

UUID_RE = re.compile(r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}", re.I)

# First marker found wins; everything from it onwards is job-specific.
WORKDAY_JOB_MARKERS = ("/job/", "/details/", "/apply")


class WorkdayConfig(NamedTuple):
    company: str
    instance: str
    site_name: str

    @property
    def host(self) -> str:
        return f"{self.company}.{self.instance}.myworkdayjobs.com"


def is_uuid(value: str) -> bool:
    return bool(UUID_RE.fullmatch(value or ""))


def _path_parts(path: str) -> list[str]:
    return [p for p in (path or "").split("/") if p]


def _origin(parsed) -> str:
    return f"{parsed.scheme or 'https'}://{parsed.netloc}"


def company_slug(url: str) -> str:
    """
    Guess the company's board slug from the second-to-last host label
    (careers.acme.com -> acme). Wrong for hosts like jobs.acme.co.uk.
    """
    host = urlparse(url or "").hostname or ""
    parts = host.split(".")
    if len(parts) >= 2:
        return parts[-2].lower()
    return "company"


def normalize_workday_url(url: str) -> str:
    parsed = urlparse(url)
    if not parsed.netloc:
        return url
    path = parsed.path
    base = path
    for marker in WORKDAY_JOB_MARKERS:
        idx = path.find(marker)
        if idx != -1:
            base = path[:idx]
            break
    if not base.endswith("/"):
        base += "/"
    return _origin(parsed) + base


def parse_workday_url(url: str) -> WorkdayConfig | None:
    """Split a Workday URL into (company, instance, site_name); None if not Workday-shaped."""
    if not is_workday_url(url):
        return None
    labels = urlparse(url).hostname.split(".")
    site_name = urlparse(normalize_workday_url(url)).path.strip("/") or "careers"
    return WorkdayConfig(company=labels[0], instance=labels[1], site_name=site_name)


def normalize_ashby_url(url: str) -> str:
    """Drop a trailing posting UUID; board roots and slug pages come back unchanged."""
    parsed = urlparse(url)
    parts = _path_parts(parsed.path)
    if len(parts) > 1 and is_uuid(parts[-1]):
        return _origin(parsed) + "/" + "/".join(parts[:-1]) + "/"
    return url


def normalize_greenhouse_url(url: str) -> str:
    """Strip a trailing job id, then a trailing 'jobs' segment, from a Greenhouse job URL."""
    parsed = urlparse(url)
    parts = _path_parts(parsed.path)
    stripped = False
    if parts and parts[-1].isdigit():
        parts.pop()
        stripped = True
    if parts and parts[-1] == "jobs":
        parts.pop()
        stripped = True
    if not stripped:
        return url
    return _origin(parsed) + "/" + "/".join(parts)


def normalize_lever_url(url: str) -> str:
    """Keep only the company segment: jobs.lever.co/acme/<id>/apply -> jobs.lever.co/acme."""
    parsed = urlparse(url)
    parts = _path_parts(parsed.path)
    if not parsed.netloc or not parts:
        return url
    # https://api.lever.co/v0/postings/<company>
    if parts[:2] == ["v0", "postings"] and len(parts) > 2:
        return f"https://jobs.lever.co/{parts[2]}"
    return _origin(parsed) + "/" + parts[0]


def normalize_url(url: str, vendor: ATSVendor | None) -> str:
    if vendor == ATSVendor.WORKDAY:
        return normalize_workday_url(url)
    if vendor == ATSVendor.ASHBY:
        return normalize_ashby_url(url)
    if vendor == ATSVendor.GREENHOUSE:
        return normalize_greenhouse_url(url)
    if vendor == ATSVendor.LEVER:
        return normalize_lever_url(url)
    return url


def board_slug(vendor: ATSVendor | None, url: str | None) -> str | None:
    """
    Board token/slug a job fetcher needs for this board URL:
    Greenhouse board token, Lever company, Ashby client name, Workday site name.
    """
    if not url or vendor is None:
        return None
    parsed = urlparse(url)
    host = (parsed.hostname or "").lower()
    parts = _path_parts(parsed.path)
    if vendor == ATSVendor.WORKDAY:
        config = parse_workday_url(url)
        return config.site_name if config else None
    if vendor == ATSVendor.GREENHOUSE:
        # https://boards-api.greenhouse.io/v1/boards/<token>/jobs
        if host.startswith("boards-api.") and "boards" in parts:
            i = parts.index("boards")
            return parts[i + 1] if i + 1 < len(parts) else None
        if host.startswith(("boards.", "job-boards.")):
            return parts[0] if parts else None
        # https://acme.greenhouse.io/jobs
        if host.endswith("greenhouse.io"):
            return host.split(".")[0]
        return parts[0] if parts else None
    if vendor in (ATSVendor.LEVER, ATSVendor.ASHBY):
        return parts[0] if parts else None
    return None
