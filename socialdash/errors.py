"""
Domain errors raised by the post store, lifecycle rules and platform catalog.

The HTTP layer maps these to responses in ``responses.py``; nothing in here
knows about FastAPI.
"""
from typing import Any, Dict, Optional


class SocialDashError(Exception):
    """Base class for all domain errors."""

    error_code = "ERROR"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class NotFoundError(SocialDashError):
    """An id was not found in the resolved owner partition."""

    error_code = "NOT_FOUND"

    def __init__(self, resource: str, id: str, owner: Optional[str] = None):
        super().__init__(f"{resource} '{id}' not found", {"resource": resource, "id": id})
        self.resource = resource
        self.id = id
        self.owner = owner


class ValidationError(SocialDashError):
    """A candidate post breaks a lifecycle rule. Nothing was committed."""

    error_code = "VALIDATION_ERROR"
    field: Optional[str] = None

    def __init__(self, message: str, **details):
        if self.field and "field" not in details:
            details["field"] = self.field
        super().__init__(message, details)


class EmptyContentError(ValidationError):
    error_code = "EMPTY_CONTENT"
    field = "content"


class MissingScheduleError(ValidationError):
    error_code = "MISSING_SCHEDULE"
    field = "scheduled_at"


class UnknownPlatformError(ValidationError):
    error_code = "UNKNOWN_PLATFORM"
    field = "platform"


class UnknownStatusError(ValidationError):
    error_code = "UNKNOWN_STATUS"
    field = "status"


class InvalidStatsError(ValidationError):
    error_code = "INVALID_STATS"
    field = "stats"


class TransientFetchError(SocialDashError):
    """The storage backend could not be reached. Safe for the caller to retry."""

    error_code = "TRANSIENT_FETCH_ERROR"
