"""
Application exceptions.

Services raise these instead of bare HTTPException so that the submission
lifecycle can be exercised without a request. A single handler registered in
``app.main`` renders them as::

    {"success": false, "error": ..., "code": ..., "message": ..., "details": ...}
"""
from datetime import datetime
from typing import Any, Dict, List, Optional

from fastapi import status


class SurveyAPIError(Exception):
    """Base exception for all API errors."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    code: str = "INTERNAL_ERROR"
    error: str = "Internal server error"

    def __init__(self, message: Optional[str] = None, details: Optional[Any] = None):
        self.message = message or self.error
        self.details = details
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        body = {
            "success": False,
            "error": self.error,
            "code": self.code,
            "message": self.message,
        }
        if self.details is not None:
            body["details"] = self.details
        return body

    @property
    def headers(self) -> Optional[Dict[str, str]]:
        return None


class ValidationError(SurveyAPIError):
    """Payload failed schema checks. ``details`` lists field-level violations."""

    status_code = status.HTTP_400_BAD_REQUEST
    code = "VALIDATION_ERROR"
    error = "Invalid request data"

    def __init__(self, violations: List[Dict[str, Any]], message: Optional[str] = None):
        self.violations = violations
        super().__init__(message or "Invalid request data", details=violations)


class SurveyUnavailable(SurveyAPIError):
    """The survey window does not accept submissions right now."""

    status_code = status.HTTP_403_FORBIDDEN
    code = "SURVEY_UNAVAILABLE"

    MESSAGES = {
        "inactive": (
            "Survey is currently inactive",
            "The survey is not currently accepting responses. Please contact the administrator.",
        ),
        "not_started": ("Survey has not started yet", "The survey will start on {start}."),
        "ended": ("Survey has ended", "The survey ended on {end}."),
    }

    def __init__(
        self,
        reason: str,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
    ):
        self.reason = reason
        self.start_date = start_date
        self.end_date = end_date
        error, template = self.MESSAGES[reason]
        self.error = error
        message = template.format(
            start=start_date.isoformat() if start_date else "",
            end=end_date.isoformat() if end_date else "",
        )
        super().__init__(
            message,
            details={
                "reason": reason,
                "startDate": start_date.isoformat() if start_date else None,
                "endDate": end_date.isoformat() if end_date else None,
            },
        )


class RateLimited(SurveyAPIError):
    status_code = status.HTTP_429_TOO_MANY_REQUESTS
    code = "RATE_LIMITED"
    error = "Too many requests. Please try again later."

    def __init__(self, retry_after: int):
        self.retry_after = retry_after
        super().__init__(
            f"Submission limit reached. Retry in {retry_after} seconds.",
            details={"retryAfter": retry_after},
        )

    @property
    def headers(self) -> Optional[Dict[str, str]]:
        return {"Retry-After": str(self.retry_after)}


class Unauthorized(SurveyAPIError):
    status_code = status.HTTP_401_UNAUTHORIZED
    code = "UNAUTHORIZED"
    error = "Authentication required"

    @property
    def headers(self) -> Optional[Dict[str, str]]:
        return {"WWW-Authenticate": "Bearer"}


class Forbidden(Unauthorized):
    """Role checks collapse to 401."""

    code = "FORBIDDEN"
    error = "Admin access required"


class NotFound(SurveyAPIError):
    status_code = status.HTTP_404_NOT_FOUND
    code = "NOT_FOUND"
    error = "Not found"


class BadRequest(SurveyAPIError):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "BAD_REQUEST"
    error = "Bad request"


class StorageUnavailable(SurveyAPIError):
    """Raised on admin write paths when the database cannot be reached."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    code = "STORAGE_UNAVAILABLE"
    error = "Database unavailable"
