"""
Custom exceptions and error handling for the intake endpoints.

Defines application-specific exceptions with error codes for consistent
error handling across Lambda functions and client communication.

Usage:
    from core.errors import StoreError, ErrorCode

    raise StoreError("duplicate key value", hint=None, sqlstate="23505")
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Error codes for client-facing error messages."""

    # Request errors
    INVALID_JSON = "INVALID_JSON"
    MISSING_FIELDS = "MISSING_FIELDS"

    # Persistence errors
    BOOKING_SAVE_FAILED = "BOOKING_SAVE_FAILED"
    INQUIRY_SAVE_FAILED = "INQUIRY_SAVE_FAILED"

    # Side integrations
    PHOTO_UPLOAD_FAILED = "PHOTO_UPLOAD_FAILED"
    CALENDAR_UNAVAILABLE = "CALENDAR_UNAVAILABLE"
    NOTIFICATION_FAILED = "NOTIFICATION_FAILED"

    # System errors
    BOOKING_FAILED = "BOOKING_FAILED"
    INTERNAL_ERROR = "INTERNAL_ERROR"


USER_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.INVALID_JSON: "Invalid JSON in request body",
    ErrorCode.MISSING_FIELDS: "Missing required fields",
    ErrorCode.BOOKING_SAVE_FAILED: "Failed to save booking to database",
    ErrorCode.INQUIRY_SAVE_FAILED: "Failed to save inquiry",
    ErrorCode.PHOTO_UPLOAD_FAILED: "Photo upload failed",
    ErrorCode.CALENDAR_UNAVAILABLE: "Calendar event creation is not available",
    ErrorCode.NOTIFICATION_FAILED: "Notification email could not be sent",
    ErrorCode.BOOKING_FAILED: "Something went wrong while processing your booking. Please try again.",
    ErrorCode.INTERNAL_ERROR: "Internal server error",
}


class IntakeError(Exception):
    """Base exception for all intake errors."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INTERNAL_ERROR):
        self.message = message
        self.code = code
        super().__init__(message)

    @property
    def user_message(self) -> str:
        return USER_MESSAGES.get(self.code, USER_MESSAGES[ErrorCode.INTERNAL_ERROR])


class StoreError(IntakeError):
    """The database rejected a write or could not be reached.

    Carries the server's diagnostics so callers can pass them through.
    """

    def __init__(
        self,
        message: str,
        hint: str | None = None,
        sqlstate: str | None = None,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
    ):
        super().__init__(message, code=code)
        self.hint = hint
        self.sqlstate = sqlstate


class StorageError(IntakeError):
    """Object storage upload failed."""

    pass


class CalendarError(IntakeError):
    """Calendar event creation failed."""

    pass


class NotificationError(IntakeError):
    """Notification email could not be delivered."""

    pass
