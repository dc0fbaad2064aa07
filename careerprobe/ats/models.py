"""Result types for ATS detection."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any

from careerprobe.ats.normalize import board_slug
from careerprobe.ats.vendors import ATSVendor


class Confidence(IntEnum):
    """Ordered: CERTAIN > LIKELY > UNCERTAIN > NOT_DETECTED."""

    NOT_DETECTED = 0
    # Dynamic-loading markers plus a vendor keyword, never confirmed.
    UNCERTAIN = 1
    # A redirect pointed at a known vendor; nobody fetched it.
    LIKELY = 2
    # URL pattern, Workday host shape, literal embedded ATS URL, or a valid API answer.
    CERTAIN = 3

    def __str__(self) -> str:
        return self.name.lower()


@dataclass(frozen=True)
class DetectionResult:
    vendor: ATSVendor | None
    confidence: Confidence
    api_endpoint: str | None = None
    canonical_url: str | None = None
    message: str = ""

    def __post_init__(self) -> None:
        if (self.vendor is None) != (self.confidence == Confidence.NOT_DETECTED):
            raise ValueError(
                f"vendor={self.vendor!r} is inconsistent with confidence={self.confidence!r}"
            )

    @classmethod
    def not_detected(cls, message: str = "Could not detect ATS system from this page") -> "DetectionResult":
        return cls(vendor=None, confidence=Confidence.NOT_DETECTED, message=message)

    @property
    def detected(self) -> bool:
        return self.vendor is not None

    @property
    def board_id(self) -> str | None:
        """Board token/slug for the job fetchers, derived from canonical_url."""
        return board_slug(self.vendor, self.canonical_url)

    def to_dict(self) -> dict[str, Any]:
        return {
            "ats_type": self.vendor.value if self.vendor else None,
            "confidence": str(self.confidence),
            "api_endpoint": self.api_endpoint,
            "board_url": self.canonical_url,
            "board_id": self.board_id,
            "message": self.message,
        }


@dataclass
class IndicatorTally:
    """Per-vendor keyword hits for one page. Lives for one detection call only."""

    greenhouse: int = 0
    lever: int = 0
    ashby: int = 0
    workday: int = 0

    @property
    def is_empty(self) -> bool:
        return not (self.greenhouse or self.lever or self.ashby or self.workday)

    def count_for(self, vendor: ATSVendor) -> int:
        return getattr(self, vendor.value, 0)
