"""Ledger exceptions. Each carries a stable error code and an HTTP status."""


class AppError(Exception):
    """Base exception for ledger errors."""

    status_code: int = 400

    def __init__(self, message: str, code: str = "APP_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)

    def to_dict(self) -> dict[str, str]:
        """Error body returned by the API."""
        return {"error": self.code, "message": self.message}


class ValidationError(AppError):
    """Raised when a request parameter or seed record is malformed."""

    def __init__(self, message: str):
        super().__init__(message, code="VALIDATION_ERROR")


class NotFoundError(AppError):
    """Raised when a user (or other resource) does not exist."""

    status_code = 404

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}", code="NOT_FOUND")


class InvalidTimestampError(AppError):
    """Raised when a transaction timestamp is not valid ISO-8601."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Invalid timestamp: {value!r}", code="INVALID_TIMESTAMP")
