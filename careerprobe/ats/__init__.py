# ATS detection: vendor patterns, probes, extractors and URL normalization

from careerprobe.ats.detector import detect_ats, detect_from_url, detect_many
from careerprobe.ats.errors import DetectionError, InvalidURL, NetworkError
from careerprobe.ats.models import Confidence, DetectionResult
from careerprobe.ats.normalize import board_slug, normalize_url, parse_workday_url
from careerprobe.ats.vendors import ATSVendor, match_vendor, vendor_from_url

__all__ = [
    "ATSVendor",
    "Confidence",
    "DetectionError",
    "DetectionResult",
    "InvalidURL",
    "NetworkError",
    "board_slug",
    "detect_ats",
    "detect_from_url",
    "detect_many",
    "match_vendor",
    "normalize_url",
    "parse_workday_url",
    "vendor_from_url",
]
