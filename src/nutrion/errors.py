"""Error codes and the single exception type raised across package boundaries."""

from __future__ import annotations

from enum import StrEnum


class ErrorCode(StrEnum):
    INVALID_INPUT = "INVALID_INPUT"
    FOOD_NOT_FOUND = "FOOD_NOT_FOUND"
    PROVIDER_UNAVAILABLE = "PROVIDER_UNAVAILABLE"


class NutrionError(Exception):
    """Raised by the catalog and the external provider.

    ``recoverable`` tells the caller whether retrying the same call later
    can succeed (network trouble) or not (bad input, unknown food).
    """

    def __init__(self, code: ErrorCode, message: str, recoverable: bool = False) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.recoverable = recoverable
