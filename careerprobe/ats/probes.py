"""
Confirm a vendor guess by calling its public board API.

A probe either returns a CERTAIN DetectionResult or None. Network, HTTP and
schema failures mean "not this vendor" and never escape a probe.
"""

import logging
from typing import Awaitable, Callable

import httpx

from careerprobe import config
from careerprobe.ats.errors import DetectionError, HTTPError, InvalidResponse, ParsingFailed
from careerprobe.ats.models import Confidence, DetectionResult, IndicatorTally
from careerprobe.ats.normalize import company_slug, normalize_greenhouse_url
from careerprobe.ats.vendors import ATSVendor

logger = logging.getLogger(__name__)

Probe = Callable[[httpx.AsyncClient, str], Awaitable[DetectionResult | None]]


async def _get(client: httpx.AsyncClient, url: str) -> httpx.Response:
    r = await client.get(url, headers=config.default_headers(), timeout=config.PROBE_TIMEOUT)
    if not r.is_success:
        raise HTTPError(r.status_code)
    return r


async def _confirm_greenhouse(client: httpx.AsyncClient, slug: str) -> DetectionResult:
    api_url = f"https://boards-api.greenhouse.io/v1/boards/{slug}/jobs?content=true"
    r = await _get(client, api_url)
    try:
        data = r.json()
    except ValueError as e:
        raise ParsingFailed(f"greenhouse: {e}") from e
    jobs = data.get("jobs") if isinstance(data, dict) else None
    if not isinstance(jobs, list) or not jobs:
        raise InvalidResponse("greenhouse: no jobs on board")
    first = jobs[0]
    absolute_url = first.get("absolute_url") if isinstance(first, dict) else None
    if not isinstance(absolute_url, str):
        raise ParsingFailed("greenhouse: first job has no absolute_url")
    board_url = normalize_greenhouse_url(absolute_url)
    return DetectionResult(
        vendor=ATSVendor.GREENHOUSE,
        confidence=Confidence.CERTAIN,
        api_endpoint=api_url,
        canonical_url=board_url,
        message=f"Found Greenhouse via API: {board_url}",
    )


async def _confirm_lever(client: httpx.AsyncClient, slug: str) -> DetectionResult:
    api_url = f"https://api.lever.co/v0/postings/{slug}?mode=json"
    r = await _get(client, api_url)
    try:
        data = r.json()
    except ValueError as e:
        raise ParsingFailed(f"lever: {e}") from e
    if not isinstance(data, list) or not data:
        raise InvalidResponse("lever: no postings")
    board_url = f"https://jobs.lever.co/{slug}"
    return DetectionResult(
        vendor=ATSVendor.LEVER,
        confidence=Confidence.CERTAIN,
        api_endpoint=api_url,
        canonical_url=board_url,
        message=f"Found Lever via API: {board_url}",
    )


async def _confirm_ashby(client: httpx.AsyncClient, slug: str) -> DetectionResult:
    board_url = f"https://jobs.ashbyhq.com/{slug}/"
    r = await _get(client, board_url)
    html = r.text
    if "ashbyhq" not in html and "Ashby" not in html:
        raise InvalidResponse("ashby: page is not an Ashby board")
    return DetectionResult(
        vendor=ATSVendor.ASHBY,
        confidence=Confidence.CERTAIN,
        canonical_url=board_url,
        message=f"Found Ashby job board: {board_url}",
    )


def _absorbing(vendor: ATSVendor, confirm) -> Probe:
    async def probe(client: httpx.AsyncClient, slug: str) -> DetectionResult | None:
        logger.debug("[%s probe] testing slug %r", vendor.display_name, slug)
        try:
            result = await confirm(client, slug)
        except (DetectionError, httpx.HTTPError) as e:
            logger.debug("[%s probe] failed: %s", vendor.display_name, e)
            return None
        logger.debug("[%s probe] success: %s", vendor.display_name, result.canonical_url)
        return result

    probe.__name__ = f"probe_{vendor.value}"
    return probe


probe_greenhouse = _absorbing(ATSVendor.GREENHOUSE, _confirm_greenhouse)
probe_lever = _absorbing(ATSVendor.LEVER, _confirm_lever)
probe_ashby = _absorbing(ATSVendor.ASHBY, _confirm_ashby)

# Popularity order; also the tie-break when indicator counts are equal.
PROBES: list[tuple[ATSVendor, Probe]] = [
    (ATSVendor.GREENHOUSE, probe_greenhouse),
    (ATSVendor.LEVER, probe_lever),
    (ATSVendor.ASHBY, probe_ashby),
]


def probe_order(tally: IndicatorTally, is_careers_page: bool) -> list[tuple[ATSVendor, Probe]]:
    """
    Which probes to run, in order.
    Vendors with keyword hits go first, strongest first (stable on ties).
    A keyword-free page is probed in popularity order only when it looks like a
    careers page. Anything else is not probed at all.
    """
    if not tally.is_empty:
        hits = [(v, p) for v, p in PROBES if tally.count_for(v) > 0]
        return sorted(hits, key=lambda vp: tally.count_for(vp[0]), reverse=True)
    if is_careers_page:
        return list(PROBES)
    return []


async def probe_ats(
    client: httpx.AsyncClient,
    tally: IndicatorTally,
    url: str,
    is_careers_page: bool,
) -> DetectionResult | None:
    """Run probes one at a time; the first success wins."""
    order = probe_order(tally, is_careers_page)
    if not order:
        return None
    slug = company_slug(url)
    if tally.is_empty:
        logger.debug("[Probe] no indicators but page looks like careers, trying fallback probes")
    for vendor, probe in order:
        result = await probe(client, slug)
        if result is not None:
            return result
    logger.debug("[Probe] no probe confirmed a vendor for slug %r", slug)
    return None
