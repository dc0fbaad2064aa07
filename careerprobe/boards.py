"""Board configuration records: what a caller stores once an ATS is confirmed."""

from dataclasses import dataclass
from typing import Any

from careerprobe.ats.detector import detect_from_url
from careerprobe.ats.models import DetectionResult
from careerprobe.ats.normalize import board_slug
from careerprobe.ats.vendors import ATSVendor


@dataclass
class BoardConfig:
    name: str
    url: str
    vendor: ATSVendor
    enabled: bool = True

    @property
    def display_name(self) -> str:
        if not self.name.strip():
            return f"{self.vendor.display_name} Board"
        return self.name

    @property
    def is_supported(self) -> bool:
        return self.vendor.is_supported

    @property
    def board_id(self) -> str | None:
        return board_slug(self.vendor, self.url)

    @classmethod
    def from_url(cls, name: str, url: str, enabled: bool = True) -> "BoardConfig | None":
        """Build a board from a URL that is already recognisably an ATS URL; None otherwise."""
        quick = detect_from_url(url or "")
        if quick is None:
            return None
        return cls(name=name, url=quick.canonical_url, vendor=quick.vendor, enabled=enabled)

    @classmethod
    def from_detection(cls, name: str, result: DetectionResult) -> "BoardConfig | None":
        """Only detections that carry a board URL can become a board."""
        if not result.detected or not result.canonical_url:
            return None
        return cls(name=name, url=result.canonical_url, vendor=result.vendor)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "careers_url": self.url,
            "ats_type": self.vendor.value,
            "board_id": self.board_id,
            "enabled": self.enabled,
        }
