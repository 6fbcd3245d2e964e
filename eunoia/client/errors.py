"""Errors raised by the backend API clients."""


class ApiError(Exception):
    """Raised when a backend call fails.

    Covers transport failures, non-success statuses and bodies that do not
    match the expected schema.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class AuthenticationRequired(ApiError):
    """Raised when the stored token is missing, expired or rejected.

    The stored token has already been cleared when this is raised. Sending the
    user to the login page is up to the caller.
    """


class LoginError(ApiError):
    """Raised when the backend rejects a login attempt."""
