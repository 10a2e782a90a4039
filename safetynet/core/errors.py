# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Error hierarchy — typed exceptions raised by the store, resolver and services.
The HTTP layer maps them to status codes through a single handler.
"""

from datetime import datetime, timezone
from typing import Any, Iterable, Optional


class SafetyNetError(Exception):
    """Base exception for all SafetyNet errors."""

    def __init__(
        self,
        message: str,
        code: str,
        http_status: int = 500,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.http_status = http_status
        self.details = details or {}

    def to_response(self, request_id: Optional[str] = None) -> dict[str, Any]:
        """Convert to the REST error envelope."""
        return {
            "status": self.http_status,
            "error": self.code,
            "message": self.message,
            "details": self.details,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "request_id": request_id,
        }


# ── Domain errors ──

class NotFoundError(SafetyNetError):
    """A required record or mapping does not exist."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None) -> None:
        super().__init__(message, "NOT_FOUND", 404, details)

    @classmethod
    def stations(cls, station_numbers: Iterable[int]) -> "NotFoundError":
        unknown = [str(s) for s in station_numbers]
        if len(unknown) == 1:
            message = f"Fire station {unknown[0]} does not exist"
        else:
            message = f"The following fire stations do not exist: {', '.join(unknown)}"
        return cls(message, {"stations": unknown})

    @classmethod
    def medical_profile(cls, first_name: str, last_name: str) -> "NotFoundError":
        return cls(
            f"No medical record found for {first_name} {last_name}",
            {"firstName": first_name, "lastName": last_name},
        )

    @classmethod
    def person(cls, first_name: str, last_name: str) -> "NotFoundError":
        return cls(
            f"No person found named {first_name} {last_name}",
            {"firstName": first_name, "lastName": last_name},
        )

    @classmethod
    def address(cls, address: str) -> "NotFoundError":
        return cls(f"No fire station mapping for address '{address}'", {"address": address})


class ConflictError(SafetyNetError):
    """A write would break a uniqueness rule of the store."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None) -> None:
        super().__init__(message, "CONFLICT", 409, details)


class ValidationError(SafetyNetError):
    """Malformed query parameters detected at the HTTP boundary."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None) -> None:
        super().__init__(message, "VALIDATION_ERROR", 400, details)


# ── Infrastructure errors ──

class DataLoadError(SafetyNetError):
    """The data file exists but could not be read or parsed."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(
            f"Failed to load data from {path}: {reason}",
            "DATA_LOAD_ERROR",
            500,
            {"path": path},
        )
        self.path = path
