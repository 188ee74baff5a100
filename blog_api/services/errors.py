"""Domain errors raised by services and mapped to HTTP responses in main."""


class ApiError(Exception):
    """Base error carrying the HTTP status and a short client-facing message."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(ApiError):
    """Missing, empty or out-of-range input."""

    status_code = 400


class NotFound(ApiError):
    status_code = 404


class Conflict(ApiError):
    """Uniqueness violation."""

    status_code = 409
