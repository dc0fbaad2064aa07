"""Errors raised while detecting an ATS.

Only InvalidURL and NetworkError ever reach the caller of detect_ats. The rest
are raised inside a probe and turned into "this vendor is not it" there.
"""

import httpx


class DetectionError(Exception):
    """Base class for everything the detector raises."""


class InvalidURL(DetectionError):
    def __init__(self, url: str):
        self.url = url
        super().__init__(f"Invalid URL: {url!r}")


class NetworkError(DetectionError):
    """The careers page itself could not be fetched."""


class InvalidResponse(DetectionError):
    def __init__(self, message: str = "Invalid server response"):
        super().__init__(message)


class HTTPError(InvalidResponse):
    def __init__(self, status_code: int):
        self.status_code = status_code
        reason = httpx.codes.get_reason_phrase(status_code) or "Unknown Error"
        super().__init__(f"HTTP error {status_code}: {reason}")


class ParsingFailed(DetectionError):
    def __init__(self, details: str):
        self.details = details
        super().__init__(f"Parsing error: {details}")
