"""Player list (whitelist, ops, bans) API endpoints."""

from __future__ import annotations

from exaclient.api.client import ExarotonClient
from exaclient.api.models import ListResponse, Server, parse_response
from exaclient.api.paths import server_id


class PlayerListsAPI:
    def __init__(self, client: ExarotonClient) -> None:
        self._client = client

    async def list(self, server: str | Server) -> ListResponse:
        """Names of the player lists available on the server."""
        data = await self._client.get(f"servers/{server_id(server)}/playerlists/")
        return parse_response(ListResponse, data)

    async def get_entries(self, server: str | Server, name: str) -> ListResponse:
        data = await self._client.get(
            f"servers/{server_id(server)}/playerlists/{name}/"
        )
        return parse_response(ListResponse, data)

    async def add_entries(
        self, server: str | Server, name: str, entries: list[str]
    ) -> ListResponse:
        data = await self._client.put(
            f"servers/{server_id(server)}/playerlists/{name}/",
            json={"entries": entries},
        )
        return parse_response(ListResponse, data)

    async def remove_entries(
        self, server: str | Server, name: str, entries: list[str]
    ) -> ListResponse:
        data = await self._client.delete(
            f"servers/{server_id(server)}/playerlists/{name}/",
            json={"entries": entries},
        )
        return parse_response(ListResponse, data)
