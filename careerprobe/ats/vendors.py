"""Known ATS vendors and the no-network URL pattern matcher."""

import re
from enum import Enum
from urllib.parse import urlparse


class ATSVendor(str, Enum):
    MICROSOFT = "microsoft"
    TIKTOK = "tiktok"
    APPLE = "apple"
    SNAP = "snap"
    GREENHOUSE = "greenhouse"
    WORKABLE = "workable"
    JOBVITE = "jobvite"
    LEVER = "lever"
    BAMBOOHR = "bamboohr"
    SMARTRECRUITERS = "smartrecruiters"
    ASHBY = "ashby"
    JAZZHR = "jazzhr"
    RECRUITEE = "recruitee"
    BREEZYHR = "breezyhr"
    WORKDAY = "workday"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @property
    def is_probed(self) -> bool:
        """True for vendors the active prober can confirm over their public API."""
        return self in (ATSVendor.GREENHOUSE, ATSVendor.LEVER, ATSVendor.ASHBY)

    @property
    def is_supported(self) -> bool:
        """True for vendors a job fetcher exists for."""
        return self in _SUPPORTED

    def __str__(self) -> str:
        return self.value


_DISPLAY_NAMES = {
    ATSVendor.MICROSOFT: "Microsoft",
    ATSVendor.TIKTOK: "TikTok",
    ATSVendor.APPLE: "Apple",
    ATSVendor.SNAP: "Snap",
    ATSVendor.GREENHOUSE: "Greenhouse",
    ATSVendor.WORKABLE: "Workable",
    ATSVendor.JOBVITE: "Jobvite",
    ATSVendor.LEVER: "Lever",
    ATSVendor.BAMBOOHR: "BambooHR",
    ATSVendor.SMARTRECRUITERS: "SmartRecruiters",
    ATSVendor.ASHBY: "Ashby",
    ATSVendor.JAZZHR: "JazzHR",
    ATSVendor.RECRUITEE: "Recruitee",
    ATSVendor.BREEZYHR: "Breezy HR",
    ATSVendor.WORKDAY: "Workday",
}

_SUPPORTED = frozenset({
    ATSVendor.MICROSOFT,
    ATSVendor.TIKTOK,
    ATSVendor.APPLE,
    ATSVendor.SNAP,
    ATSVendor.GREENHOUSE,
    ATSVendor.LEVER,
    ATSVendor.ASHBY,
    ATSVendor.WORKDAY,
})

# Checked top to bottom, first hit wins. Marketing pages sometimes mention a
# competitor's domain, so this order is part of the contract.
URL_PATTERNS: list[tuple[tuple[str, ...], ATSVendor]] = [
    (("careers.microsoft.com",), ATSVendor.MICROSOFT),
    (("lifeattiktok.com", "tiktok.com"), ATSVendor.TIKTOK),
    (("jobs.apple.com",), ATSVendor.APPLE),
    (("careers.snap.com", "snap.com/careers"), ATSVendor.SNAP),
    (("greenhouse.io",), ATSVendor.GREENHOUSE),
    (("workable.com",), ATSVendor.WORKABLE),
    (("jobvite.com",), ATSVendor.JOBVITE),
    (("lever.co",), ATSVendor.LEVER),
    (("bamboohr.com",), ATSVendor.BAMBOOHR),
    (("smartrecruiters.com",), ATSVendor.SMARTRECRUITERS),
    (("ashbyhq.com",), ATSVendor.ASHBY),
    (("jazz.co", "jazzhr.com"), ATSVendor.JAZZHR),
    (("recruitee.com",), ATSVendor.RECRUITEE),
    (("breezy.hr",), ATSVendor.BREEZYHR),
]

_WORKDAY_INSTANCE = re.compile(r"^wd[0-9]+$")


def vendor_from_url(url: str) -> ATSVendor | None:
    """Return the vendor whose domain appears in url, or None. Case-insensitive, no I/O."""
    lowered = (url or "").lower()
    for needles, vendor in URL_PATTERNS:
        if any(n in lowered for n in needles):
            return vendor
    return None


def is_workday_url(url: str) -> bool:
    """
    Workday tenants live on <company>.wd<N>.myworkdayjobs.com, so they are
    recognised by host shape rather than by a fixed domain.
    """
    host = (urlparse(url or "").hostname or "").lower()
    labels = host.split(".")
    return (
        len(labels) >= 3
        and bool(_WORKDAY_INSTANCE.match(labels[1]))
        and labels[2] == "myworkdayjobs"
    )


def match_vendor(url: str) -> ATSVendor | None:
    """Pattern matcher first, then the Workday host-shape test."""
    vendor = vendor_from_url(url)
    if vendor is not None:
        return vendor
    if is_workday_url(url):
        return ATSVendor.WORKDAY
    return None
