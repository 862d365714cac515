"""Custom exceptions for the exaroton API client."""

from __future__ import annotations


class ExarotonError(Exception):
    """Base exception for everything raised by exaclient."""


class ExarotonConnectionError(ExarotonError):
    """The request never got an HTTP response (DNS, connect, timeout)."""


class ExarotonAPIError(ExarotonError):
    """The API answered with an error status or a failed envelope."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class ExarotonAuthenticationError(ExarotonAPIError):
    """401 - Invalid or missing API key."""


class ExarotonForbiddenError(ExarotonAPIError):
    """403 - Key has no access to the resource."""


class ExarotonNotFoundError(ExarotonAPIError):
    """404 - Resource not found."""


class ExarotonRateLimitError(ExarotonAPIError):
    """429 - Rate limit exceeded."""
