"""Domain error taxonomy.

Every failure the booking core can report is one of the classes below. The
HTTP layer maps them to responses in ``app.main``; services never raise
``HTTPException`` directly.
"""

from typing import Optional


class BookingAPIError(Exception):
    """Base class for all typed domain errors"""

    status_code = 500
    code = "error"

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code

    def to_dict(self) -> dict:
        return {"message": self.message, "code": self.code}


class ValidationError(BookingAPIError):
    """Malformed input: schema violation or bad identifier format"""

    status_code = 400
    code = "validation_error"

    def __init__(self, message: str, errors: Optional[list[dict]] = None):
        super().__init__(message)
        self.errors = errors or []

    @classmethod
    def for_field(cls, field: str, message: str) -> "ValidationError":
        return cls(message, errors=[{"path": [field], "message": message}])

    def to_dict(self) -> dict:
        payload = super().to_dict()
        payload["errors"] = self.errors
        return payload


class NotFoundError(BookingAPIError):
    status_code = 404
    code = "not_found"


class ConflictError(BookingAPIError):
    """An active reschedule request already exists for the booking"""

    status_code = 409
    code = "conflict"


class InvalidArgumentError(BookingAPIError):
    status_code = 400
    code = "invalid_argument"


class ConsistencyError(BookingAPIError):
    """Booking mutation and request removal did not complete together"""

    status_code = 500
    code = "consistency_error"

    def __init__(self, message: str, booking_id: Optional[str] = None):
        super().__init__(message)
        self.booking_id = booking_id

    def to_dict(self) -> dict:
        payload = super().to_dict()
        payload["bookingId"] = self.booking_id
        return payload


class InternalError(BookingAPIError):
    """Storage or unexpected failure. Message is always generic."""

    status_code = 500
    code = "internal_error"

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message)
