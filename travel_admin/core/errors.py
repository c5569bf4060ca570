"""
Application exceptions.

Each exception carries the HTTP status the API layer answers with, so services
can raise them without importing FastAPI.

Usage:
    from travel_admin.core.errors import InvalidMediaType

    raise InvalidMediaType("Invalid file type. Only images are allowed.")
"""


class TravelAdminError(Exception):
    """Base exception for all travel admin errors."""

    status_code: int = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class UploadRejected(TravelAdminError):
    """An uploaded asset failed a policy check. Not retried."""

    status_code = 400


class InvalidMediaType(UploadRejected):
    """The upload is not one of the allowed image types."""

    status_code = 400


class PayloadTooLarge(UploadRejected):
    """The upload exceeds the configured size limit."""

    status_code = 413
