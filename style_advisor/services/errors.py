"""Domain errors raised by the stores and translated to HTTP responses."""

from __future__ import annotations


class StyleAdvisorError(Exception):
    """Base class for expected failures carrying an HTTP status."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidInputError(StyleAdvisorError):
    """Raised when a required field is missing or empty."""

    status_code = 400


class UnauthorizedError(StyleAdvisorError):
    """Raised when credentials do not match a registered user."""

    status_code = 401


class UnauthenticatedError(StyleAdvisorError):
    """Raised when a session token is missing or unknown."""

    status_code = 401


class ConflictError(StyleAdvisorError):
    """Raised when a username is already registered."""

    status_code = 409


class NotFoundError(StyleAdvisorError):
    """Raised when a user, catalog section or history entry does not exist."""

    status_code = 404
