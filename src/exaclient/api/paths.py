"""Helpers for building exaroton API paths."""

from __future__ import annotations

from urllib.parse import quote

from exaclient.api.models import CreditPool, Server


def server_id(server: str | Server) -> str:
    """Accept either a server ID or a fetched Server."""
    if isinstance(server, Server):
        return server.id
    return server


def pool_id(pool: str | CreditPool) -> str:
    """Accept either a credit pool ID or a fetched CreditPool."""
    if isinstance(pool, CreditPool):
        return pool.id
    return pool


def file_path(path: str) -> str:
    """Normalize a server file path for use inside a URL.

    Strips surrounding slashes and percent-encodes each segment, keeping
    the separators. ``"/plugins/My Plugin/config.yml"`` becomes
    ``"plugins/My%20Plugin/config.yml"``.
    """
    return quote(path.strip("/"), safe="/")
