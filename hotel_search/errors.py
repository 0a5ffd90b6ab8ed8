"""Error taxonomy for the hotel search pipeline."""

from __future__ import annotations

MISSING_PARAMETERS = "missing or invalid required parameters"
INVALID_CITY = "invalid city selected"
FETCH_FAILED = "failed to fetch hotels"


class HotelSearchError(RuntimeError):
    """Base class for failures that map onto a caller-facing error."""

    status_code: int | None = 500

    @property
    def public_message(self) -> str:
        return FETCH_FAILED


class SearchValidationError(HotelSearchError):
    """Raised when query parameters are missing, malformed or unknown."""

    status_code = 400

    def __init__(self, message: str = MISSING_PARAMETERS) -> None:
        super().__init__(message)
        self.message = message

    @property
    def public_message(self) -> str:
        return self.message


class UpstreamError(HotelSearchError):
    """Raised when the upstream hotel API fails or breaks its contract."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


__all__ = [
    "FETCH_FAILED",
    "HotelSearchError",
    "INVALID_CITY",
    "MISSING_PARAMETERS",
    "SearchValidationError",
    "UpstreamError",
]
