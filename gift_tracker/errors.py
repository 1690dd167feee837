"""Application errors mapped to HTTP responses at the request boundary."""

from fastapi import status


class AppError(Exception):
    """Base class for errors that carry a client-facing status and message."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Internal server error"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ValidationError(AppError):
    """Request is well-formed JSON but semantically invalid."""

    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid request"


class EmailTaken(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Email already registered"


class InvalidCredentials(AppError):
    """Unknown email or wrong password; the two are never distinguished."""

    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Invalid email or password"


class Unauthorized(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Authentication required"


class InvalidToken(Unauthorized):
    message = "Invalid or expired token"


class NotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Not found"


class DuplicateEmail(Exception):
    """Raised by the credential store when the email uniqueness constraint fires."""
