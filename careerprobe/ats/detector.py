"""
Map a careers URL to the ATS serving it, a board URL and a confidence.

Stages, cheapest first; the first one that produces a result wins:

1. URL pattern / Workday host shape (no network)
2. fetch the page once; an HTTP redirect to a known ATS
3. keyword indicators + careers-page heuristic -> live API probes
4. literal ATS URLs, meta-refresh and JS redirects in the HTML
5. ATS URLs inside script JSON
6. client-side rendering markers (UNCERTAIN hint) or NOT_DETECTED
"""

import asyncio
import logging
from urllib.parse import urlparse

import httpx

from careerprobe import config
from careerprobe.ats.errors import InvalidURL, NetworkError
from careerprobe.ats.extract import (
    find_ats_urls_in_json,
    find_dynamic_loading_hint,
    find_embedded_ats_url,
)
from careerprobe.ats.indicators import is_likely_careers_page, score_indicators
from careerprobe.ats.models import Confidence, DetectionResult
from careerprobe.ats.normalize import normalize_url, parse_workday_url
from careerprobe.ats.probes import probe_ats
from careerprobe.ats.vendors import ATSVendor, match_vendor, vendor_from_url

logger = logging.getLogger(__name__)


def _validate_url(url: str) -> str:
    candidate = (url or "").strip()
    try:
        parsed = urlparse(candidate)
    except ValueError as e:
        raise InvalidURL(url) from e
    if parsed.scheme not in ("http", "https") or not parsed.hostname:
        raise InvalidURL(url)
    return candidate


def detect_from_url(url: str) -> DetectionResult | None:
    """Fast path: decide from the URL alone, or return None."""
    vendor = vendor_from_url(url)
    if vendor is not None:
        return DetectionResult(
            vendor=vendor,
            confidence=Confidence.CERTAIN,
            canonical_url=normalize_url(url, vendor),
            message=f"Detected {vendor.display_name} from URL pattern",
        )
    wd = parse_workday_url(url)
    if wd is not None:
        return DetectionResult(
            vendor=ATSVendor.WORKDAY,
            confidence=Confidence.CERTAIN,
            canonical_url=normalize_url(url, ATSVendor.WORKDAY),
            message=f"Detected Workday from URL: {wd.host}/{wd.site_name}",
        )
    return None


async def _fetch_page(client: httpx.AsyncClient, url: str) -> httpx.Response:
    try:
        r = await client.get(
            url,
            headers=config.default_headers(),
            timeout=config.PAGE_TIMEOUT,
            follow_redirects=True,
        )
    except httpx.InvalidURL as e:
        raise InvalidURL(url) from e
    except httpx.RequestError as e:
        raise NetworkError(f"Could not fetch {url}: {e}") from e
    if not r.is_success:
        logger.info("[ATS Detector] %s returned HTTP %s, analysing body anyway", url, r.status_code)
    return r


async def _detect(client: httpx.AsyncClient, url: str) -> DetectionResult:
    logger.debug("[ATS Detector] starting detection for %s", url)
    quick = detect_from_url(url)
    if quick is not None:
        logger.debug("[ATS Detector] quick match: %s", quick.vendor.display_name)
        return quick

    r = await _fetch_page(client, url)
    html = r.text
    logger.debug("[ATS Detector] fetched HTML, %d characters", len(html))

    if r.history:
        final_url = str(r.url)
        vendor = match_vendor(final_url)
        if vendor is not None:
            return DetectionResult(
                vendor=vendor,
                confidence=Confidence.LIKELY,
                canonical_url=normalize_url(final_url, vendor),
                message=f"Page redirects to {vendor.display_name}: {final_url}",
            )

    is_careers = is_likely_careers_page(url, html)
    tally = score_indicators(html)
    logger.debug("[ATS Detector] indicators %s, careers page: %s", tally, is_careers)

    result = await probe_ats(client, tally, url, is_careers)
    if result is not None:
        return result

    logger.debug("[ATS Detector] searching for embedded ATS URLs")
    result = find_embedded_ats_url(html, url)
    if result is not None:
        return result

    logger.debug("[ATS Detector] searching JSON/script data")
    result = find_ats_urls_in_json(html)
    if result is not None:
        return result

    return find_dynamic_loading_hint(html, url)


async def detect_ats(url: str, client: httpx.AsyncClient | None = None) -> DetectionResult:
    """
    Detect the ATS behind a careers URL.

    Pass a shared httpx.AsyncClient to reuse connections across calls; otherwise
    one is opened for this call. Raises InvalidURL for malformed input and
    NetworkError if the page itself cannot be fetched. Failed probes and an
    undetectable page are not errors: the result says NOT_DETECTED.
    """
    url = _validate_url(url)
    if client is None:
        async with httpx.AsyncClient() as owned:
            result = await _detect(owned, url)
    else:
        result = await _detect(client, url)
    logger.info(
        "[ATS Detector] %s -> %s (%s) %s",
        url,
        result.vendor.display_name if result.vendor else "none",
        result.confidence,
        result.canonical_url or "",
    )
    return result


async def detect_many(
    urls: list[str],
    client: httpx.AsyncClient | None = None,
    concurrency: int | None = None,
) -> list[DetectionResult | Exception]:
    """
    Run independent detections concurrently. Results come back in input order;
    a failed detection yields its exception in place instead of raising.
    """
    semaphore = asyncio.Semaphore(concurrency or config.DETECT_CONCURRENCY)

    async def _one(c: httpx.AsyncClient, u: str) -> DetectionResult:
        async with semaphore:
            return await detect_ats(u, c)

    if client is None:
        async with httpx.AsyncClient() as owned:
            return await asyncio.gather(*(_one(owned, u) for u in urls), return_exceptions=True)
    return await asyncio.gather(*(_one(client, u) for u in urls), return_exceptions=True)
