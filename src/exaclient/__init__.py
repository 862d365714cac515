"""Async client for the exaroton Minecraft server hosting API."""

__version__ = "0.1.0"

from exaclient.api.exceptions import (  # noqa: E402
    ExarotonAPIError,
    ExarotonAuthenticationError,
    ExarotonConnectionError,
    ExarotonError,
    ExarotonForbiddenError,
    ExarotonNotFoundError,
    ExarotonRateLimitError,
)
from exaclient.api.models import CreditPool, Server, ServerStatus  # noqa: E402
from exaclient.exaroton import Exaroton  # noqa: E402

__all__ = [
    "Exaroton",
    "Server",
    "ServerStatus",
    "CreditPool",
    "ExarotonError",
    "ExarotonConnectionError",
    "ExarotonAPIError",
    "ExarotonAuthenticationError",
    "ExarotonForbiddenError",
    "ExarotonNotFoundError",
    "ExarotonRateLimitError",
]
