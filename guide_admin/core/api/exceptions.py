"""
REST backend exceptions.

Every failed backend call surfaces as an ApiError whose message is safe
to show to the admin user.
"""

DEFAULT_ERROR_MESSAGE = "Serviço não disponível"


class ApiError(Exception):
    """Base exception for all backend errors."""

    def __init__(self, message: str = DEFAULT_ERROR_MESSAGE, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ServiceUnavailableError(ApiError):
    """Backend could not be reached (connection error or timeout)."""

    def __init__(self) -> None:
        super().__init__(DEFAULT_ERROR_MESSAGE, status_code=None)


class NotFoundError(ApiError):
    """Requested record does not exist."""

    pass
