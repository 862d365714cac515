"""Log API endpoints."""

from __future__ import annotations

from exaclient.api.client import ExarotonClient
from exaclient.api.models import LogResponse, Server, UploadedLogResponse, parse_response
from exaclient.api.paths import server_id


class LogsAPI:
    def __init__(self, client: ExarotonClient) -> None:
        self._client = client

    async def get(self, server: str | Server) -> LogResponse:
        data = await self._client.get(f"servers/{server_id(server)}/logs/")
        return parse_response(LogResponse, data)

    async def share(self, server: str | Server) -> UploadedLogResponse:
        """Upload the current log to mclo.gs and return its URLs."""
        data = await self._client.get(f"servers/{server_id(server)}/logs/share/")
        return parse_response(UploadedLogResponse, data)
