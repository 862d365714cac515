"""Server API endpoints."""

from __future__ import annotations

from exaclient.api.client import ExarotonClient
from exaclient.api.models import (
    GenericResponse,
    Server,
    ServerResponse,
    ServersResponse,
    parse_response,
)
from exaclient.api.paths import server_id


class ServersAPI:
    def __init__(self, client: ExarotonClient) -> None:
        self._client = client

    async def list(self) -> ServersResponse:
        data = await self._client.get("servers/")
        return parse_response(ServersResponse, data)

    async def get(self, server: str | Server) -> ServerResponse:
        data = await self._client.get(f"servers/{server_id(server)}/")
        return parse_response(ServerResponse, data)

    async def start(
        self, server: str | Server, *, use_own_credits: bool = False
    ) -> GenericResponse:
        """Start a server.

        Shared servers are normally paid from the owner's credits. With
        ``use_own_credits`` the caller's own balance is used instead, which
        requires a POST rather than the plain GET.
        """
        path = f"servers/{server_id(server)}/start/"
        if use_own_credits:
            data = await self._client.post(path, json={"useOwnCredits": True})
        else:
            data = await self._client.get(path)
        return parse_response(GenericResponse, data)

    async def stop(self, server: str | Server) -> GenericResponse:
        data = await self._client.get(f"servers/{server_id(server)}/stop/")
        return parse_response(GenericResponse, data)

    async def restart(self, server: str | Server) -> GenericResponse:
        data = await self._client.get(f"servers/{server_id(server)}/restart/")
        return parse_response(GenericResponse, data)

    async def execute_command(
        self, server: str | Server, command: str
    ) -> GenericResponse:
        data = await self._client.post(
            f"servers/{server_id(server)}/command/",
            json={"command": command},
        )
        return parse_response(GenericResponse, data)

    async def extend_timer(self, server: str | Server, seconds: int) -> GenericResponse:
        data = await self._client.post(
            f"servers/{server_id(server)}/extend-time/",
            json={"time": seconds},
        )
        return parse_response(GenericResponse, data)
