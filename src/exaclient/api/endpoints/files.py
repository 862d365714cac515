"""Server file API endpoints."""

from __future__ import annotations

from typing import Any

from exaclient.api.client import ExarotonClient
from exaclient.api.models import (
    ConfigOptionsResponse,
    FileInformationResponse,
    GenericResponse,
    Server,
    parse_response,
)
from exaclient.api.paths import file_path, server_id


class FilesAPI:
    def __init__(self, client: ExarotonClient) -> None:
        self._client = client

    def _path(self, server: str | Server, kind: str, path: str) -> str:
        base = f"servers/{server_id(server)}/files/{kind}/"
        normalized = file_path(path)
        # The root directory is the bare prefix, not ".../info//".
        return f"{base}{normalized}/" if normalized else base

    async def info(self, server: str | Server, path: str) -> FileInformationResponse:
        data = await self._client.get(self._path(server, "info", path))
        return parse_response(FileInformationResponse, data)

    async def read(self, server: str | Server, path: str) -> bytes:
        """Download a file. The body is the raw file, not an envelope."""
        return await self._client.get_bytes(self._path(server, "data", path))

    async def read_text(
        self, server: str | Server, path: str, encoding: str = "utf-8"
    ) -> str:
        content = await self.read(server, path)
        return content.decode(encoding)

    async def write(
        self, server: str | Server, path: str, content: bytes | str
    ) -> GenericResponse:
        if isinstance(content, str):
            content = content.encode("utf-8")
        data = await self._client.put(
            self._path(server, "data", path),
            content=content,
            headers={"Content-Type": "application/octet-stream"},
        )
        return parse_response(GenericResponse, data)

    async def create_directory(self, server: str | Server, path: str) -> GenericResponse:
        data = await self._client.put(
            self._path(server, "data", path),
            headers={"Content-Type": "inode/directory"},
        )
        return parse_response(GenericResponse, data)

    async def delete(self, server: str | Server, path: str) -> GenericResponse:
        data = await self._client.delete(self._path(server, "data", path))
        return parse_response(GenericResponse, data)

    async def get_config(
        self, server: str | Server, path: str
    ) -> ConfigOptionsResponse:
        data = await self._client.get(self._path(server, "config", path))
        return parse_response(ConfigOptionsResponse, data)

    async def update_config(
        self, server: str | Server, path: str, options: dict[str, Any]
    ) -> ConfigOptionsResponse:
        """Update config keys, e.g. ``{"max-players": 20, "pvp": False}``."""
        data = await self._client.post(self._path(server, "config", path), json=options)
        return parse_response(ConfigOptionsResponse, data)
