"""Server option (RAM, MOTD) API endpoints."""

from __future__ import annotations

from exaclient.api.client import ExarotonClient
from exaclient.api.models import MotdResponse, RamResponse, Server, parse_response
from exaclient.api.paths import server_id


class OptionsAPI:
    def __init__(self, client: ExarotonClient) -> None:
        self._client = client

    async def get_ram(self, server: str | Server) -> RamResponse:
        data = await self._client.get(f"servers/{server_id(server)}/options/ram/")
        return parse_response(RamResponse, data)

    async def set_ram(self, server: str | Server, ram: int) -> RamResponse:
        data = await self._client.post(
            f"servers/{server_id(server)}/options/ram/",
            json={"ram": ram},
        )
        return parse_response(RamResponse, data)

    async def get_motd(self, server: str | Server) -> MotdResponse:
        data = await self._client.get(f"servers/{server_id(server)}/options/motd/")
        return parse_response(MotdResponse, data)

    async def set_motd(self, server: str | Server, motd: str) -> MotdResponse:
        data = await self._client.post(
            f"servers/{server_id(server)}/options/motd/",
            json={"motd": motd},
        )
        return parse_response(MotdResponse, data)
