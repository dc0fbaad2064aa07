"""Find ATS links, redirects and client-side rendering hints inside raw page HTML."""

import logging
import re
from urllib.parse import urljoin

from bs4 import BeautifulSoup

from careerprobe.ats.models import Confidence, DetectionResult
from careerprobe.ats.normalize import company_slug, normalize_url, parse_workday_url
from careerprobe.ats.vendors import ATSVendor, match_vendor

logger = logging.getLogger(__name__)

_U = r"[^\"'\s<>]"

# Evaluated in order over the whole document; the first entry with any match wins,
# even when a later entry matches earlier in the page.
EMBEDDED_URL_PATTERNS: list[tuple[re.Pattern, ATSVendor]] = [
    (re.compile(rf"https?://{_U}*\.wd[0-9]+\.myworkdayjobs\.com/{_U}*", re.I), ATSVendor.WORKDAY),
    (re.compile(rf"https?://{_U}*\.myworkdayjobs\.com/{_U}*", re.I), ATSVendor.WORKDAY),
    (re.compile(rf"https?://{_U}*\.greenhouse\.io/{_U}*", re.I), ATSVendor.GREENHOUSE),
    (re.compile(rf"https?://boards-api\.greenhouse\.io/{_U}*", re.I), ATSVendor.GREENHOUSE),
    (re.compile(rf"https?://job-boards\.greenhouse\.io/{_U}*", re.I), ATSVendor.GREENHOUSE),
    (re.compile(rf"https?://jobs\.lever\.co/{_U}*", re.I), ATSVendor.LEVER),
    (re.compile(rf"https?://{_U}*\.lever\.co{_U}*", re.I), ATSVendor.LEVER),
    (re.compile(rf"https?://jobs\.ashbyhq\.com/{_U}*", re.I), ATSVendor.ASHBY),
    (re.compile(rf"https?://{_U}*\.workable\.com/{_U}*", re.I), ATSVendor.WORKABLE),
    (re.compile(rf"https?://{_U}*\.smartrecruiters\.com/{_U}*", re.I), ATSVendor.SMARTRECRUITERS),
    (re.compile(rf"https?://{_U}*\.jobvite\.com/{_U}*", re.I), ATSVendor.JOBVITE),
]

# Quoted URL literals as they appear in inline <script> JSON.
_J = r"[^\"'\s\\<>]"
JSON_URL_PATTERNS: list[tuple[re.Pattern, ATSVendor]] = [
    (re.compile(rf"[\"'](https?://(?:[\w-]+\.)?greenhouse\.io/{_J}+)", re.I), ATSVendor.GREENHOUSE),
    (re.compile(rf"[\"'](https?://jobs\.lever\.co/{_J}+)", re.I), ATSVendor.LEVER),
    (re.compile(rf"[\"'](https?://jobs\.ashbyhq\.com/{_J}+)", re.I), ATSVendor.ASHBY),
    (re.compile(rf"[\"'](https?://{_J}*\.myworkdayjobs\.com/{_J}+)", re.I), ATSVendor.WORKDAY),
]

_META_REFRESH_URL = re.compile(r"url\s*=\s*['\"]?([^'\"\s;]+)", re.I)

JS_REDIRECT_PATTERNS = [
    re.compile(r"window\.location\.href\s*=\s*[\"']([^\"']+)[\"']", re.I),
    re.compile(r"window\.location\.replace\([\"']([^\"']+)[\"']\)", re.I),
    re.compile(r"location\.href\s*=\s*[\"']([^\"']+)[\"']", re.I),
]

DYNAMIC_LOADING_MARKERS = [
    "graphql",
    "apollo",
    "__APOLLO",
    "careersPageQuery",
    "jobsQuery",
    "window.__INITIAL_STATE__",
    "window.__data",
    "react-root",
    "ng-app",
    "vue-app",
]

# (raw substrings, vendor, guessed board root); case-sensitive on purpose
_DYNAMIC_VENDOR_HINTS = [
    (("greenhouse", "gh-"), ATSVendor.GREENHOUSE, "https://boards.greenhouse.io/{slug}"),
    (("lever",), ATSVendor.LEVER, "https://jobs.lever.co/{slug}"),
    (("ashby",), ATSVendor.ASHBY, "https://jobs.ashbyhq.com/{slug}"),
]


def _literal_url_result(vendor: ATSVendor, found_url: str, where: str) -> DetectionResult:
    board_url = normalize_url(found_url, vendor)
    if vendor == ATSVendor.WORKDAY:
        wd = parse_workday_url(found_url)
        if wd is not None:
            return DetectionResult(
                vendor=vendor,
                confidence=Confidence.CERTAIN,
                canonical_url=board_url,
                message=f"Found Workday ATS: {wd.host}/{wd.site_name}",
            )
    return DetectionResult(
        vendor=vendor,
        confidence=Confidence.CERTAIN,
        canonical_url=board_url,
        message=f"Found {vendor.display_name} ATS {where}: {board_url}",
    )


def _redirect_result(page_url: str, target: str, kind: str) -> DetectionResult | None:
    try:
        target = urljoin(page_url, target)
    except ValueError:
        logger.debug("[Embedded Search] unparseable %s redirect target %r", kind, target)
        return None
    vendor = match_vendor(target)
    if vendor is None:
        logger.debug("[Embedded Search] %s redirect to %s is not a known ATS", kind, target)
        return None
    return DetectionResult(
        vendor=vendor,
        confidence=Confidence.LIKELY,
        canonical_url=normalize_url(target, vendor),
        message=f"Found {kind} redirect to {vendor.display_name}: {target}",
    )


def find_meta_redirect(html: str) -> str | None:
    """Target of the first <meta http-equiv="refresh"> tag, if any."""
    soup = BeautifulSoup(html or "", "html.parser")
    for meta in soup.find_all("meta"):
        if (meta.get("http-equiv") or "").strip().lower() != "refresh":
            continue
        m = _META_REFRESH_URL.search(meta.get("content") or "")
        if m:
            return m.group(1)
    return None


def find_javascript_redirect(html: str) -> str | None:
    for pattern in JS_REDIRECT_PATTERNS:
        m = pattern.search(html or "")
        if m:
            return m.group(1)
    return None


def find_embedded_ats_url(html: str, page_url: str) -> DetectionResult | None:
    """
    Look for a literal ATS URL in the page (CERTAIN), then for a meta-refresh or
    JavaScript redirect to one (LIKELY). Case is preserved in returned URLs.
    """
    html = html or ""
    for pattern, vendor in EMBEDDED_URL_PATTERNS:
        m = pattern.search(html)
        if m:
            found = m.group(0).strip("\"'")
            logger.debug("[Embedded Search] found %s URL: %s", vendor.display_name, found)
            return _literal_url_result(vendor, found, "embedded in page")

    target = find_meta_redirect(html)
    if target:
        result = _redirect_result(page_url, target, "meta refresh")
        if result is not None:
            return result

    target = find_javascript_redirect(html)
    if target:
        result = _redirect_result(page_url, target, "JS")
        if result is not None:
            return result
    return None


def find_ats_urls_in_json(html: str) -> DetectionResult | None:
    """Second pass for ATS URLs inside script JSON, where slashes are often escaped."""
    text = (html or "").replace("\\/", "/").replace("\\u002F", "/").replace("\\u002f", "/")
    for pattern, vendor in JSON_URL_PATTERNS:
        m = pattern.search(text)
        if m:
            return _literal_url_result(vendor, m.group(1), "URL in page data")
    return None


def find_dynamic_loading_hint(html: str, page_url: str) -> DetectionResult:
    """
    Last resort for client-rendered career pages: with at least two framework
    markers and a vendor name in the source, suggest that vendor as UNCERTAIN.
    """
    html = html or ""
    lowered = html.lower()
    found = [m for m in DYNAMIC_LOADING_MARKERS if m.lower() in lowered]
    if len(found) < 2:
        return DetectionResult.not_detected()

    logger.debug("[Dynamic] loading markers: %s", found)
    intro = "This page loads jobs dynamically via JavaScript. "
    slug = company_slug(page_url)
    for needles, vendor, template in _DYNAMIC_VENDOR_HINTS:
        if any(n in html for n in needles):
            guess = template.format(slug=slug)
            return DetectionResult(
                vendor=vendor,
                confidence=Confidence.UNCERTAIN,
                message=f"{intro}It appears to use {vendor.display_name}. Try: {guess}",
            )
    return DetectionResult.not_detected(
        intro + "Try finding a direct link to a specific job posting from this page."
    )
