"""The Exaroton façade: one object exposing every API endpoint."""

from __future__ import annotations

from typing import Any

import httpx

from exaclient.api.client import BASE_URL, DEFAULT_TIMEOUT, ExarotonClient
from exaclient.api.endpoints.account import AccountAPI
from exaclient.api.endpoints.billing import BillingAPI
from exaclient.api.endpoints.files import FilesAPI
from exaclient.api.endpoints.logs import LogsAPI
from exaclient.api.endpoints.options import OptionsAPI
from exaclient.api.endpoints.player_lists import PlayerListsAPI
from exaclient.api.endpoints.servers import ServersAPI
from exaclient.api.exceptions import ExarotonError
from exaclient.api.models import (
    AccountResponse,
    ConfigOptionsResponse,
    CreditPool,
    CreditPoolMembersResponse,
    CreditPoolResponse,
    CreditPoolServersResponse,
    CreditPoolsResponse,
    FileInformationResponse,
    GenericResponse,
    ListResponse,
    LogResponse,
    MotdResponse,
    RamResponse,
    Server,
    ServerResponse,
    ServersResponse,
    UploadedLogResponse,
)
from exaclient.config import load_config


class Exaroton:
    """Async client for the exaroton API.

    Every method issues exactly one request and returns the typed response
    envelope. Server and credit pool arguments accept either an ID or an
    object fetched earlier::

        async with Exaroton(api_key) as exa:
            servers = (await exa.get_servers()).unwrap()
            await exa.start_server(servers[0])

    The resource groups are available as attributes too
    (``exa.servers.start(...)``).
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.client = ExarotonClient(
            api_key, base_url=base_url, timeout=timeout, transport=transport
        )
        self.account = AccountAPI(self.client)
        self.servers = ServersAPI(self.client)
        self.logs = LogsAPI(self.client)
        self.options = OptionsAPI(self.client)
        self.player_lists = PlayerListsAPI(self.client)
        self.files = FilesAPI(self.client)
        self.billing = BillingAPI(self.client)

    @classmethod
    def from_config(cls) -> Exaroton:
        """Build a client from ~/.config/exaclient/config.toml."""
        config = load_config()
        if not config.api.api_key:
            raise ExarotonError(
                "No API key configured. Run 'exaclient configure --api-key KEY' "
                "or set EXAROTON_API_KEY."
            )
        return cls(
            config.api.api_key,
            base_url=config.api.base_url,
            timeout=config.api.timeout,
        )

    async def close(self) -> None:
        await self.client.close()

    async def __aenter__(self) -> Exaroton:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    # Account

    async def get_account(self) -> AccountResponse:
        return await self.account.get()

    # Servers

    async def get_servers(self) -> ServersResponse:
        return await self.servers.list()

    async def get_server(self, server: str | Server) -> ServerResponse:
        return await self.servers.get(server)

    async def start_server(self, server: str | Server) -> GenericResponse:
        return await self.servers.start(server)

    async def start_server_with_own_credits(self, server: str | Server) -> GenericResponse:
        return await self.servers.start(server, use_own_credits=True)

    async def stop_server(self, server: str | Server) -> GenericResponse:
        return await self.servers.stop(server)

    async def restart_server(self, server: str | Server) -> GenericResponse:
        return await self.servers.restart(server)

    async def execute_server_command(
        self, server: str | Server, command: str
    ) -> GenericResponse:
        return await self.servers.execute_command(server, command)

    async def extend_server_timer(
        self, server: str | Server, seconds: int
    ) -> GenericResponse:
        return await self.servers.extend_timer(server, seconds)

    # Logs

    async def get_server_log(self, server: str | Server) -> LogResponse:
        return await self.logs.get(server)

    async def upload_server_log(self, server: str | Server) -> UploadedLogResponse:
        return await self.logs.share(server)

    # Options

    async def get_server_ram(self, server: str | Server) -> RamResponse:
        return await self.options.get_ram(server)

    async def change_server_ram(self, server: str | Server, ram: int) -> RamResponse:
        return await self.options.set_ram(server, ram)

    async def get_server_motd(self, server: str | Server) -> MotdResponse:
        return await self.options.get_motd(server)

    async def change_server_motd(self, server: str | Server, motd: str) -> MotdResponse:
        return await self.options.set_motd(server, motd)

    # Player lists

    async def get_player_lists(self, server: str | Server) -> ListResponse:
        return await self.player_lists.list(server)

    async def get_player_list_contents(
        self, server: str | Server, name: str
    ) -> ListResponse:
        return await self.player_lists.get_entries(server, name)

    async def add_entries_to_player_list(
        self, server: str | Server, name: str, entries: list[str]
    ) -> ListResponse:
        return await self.player_lists.add_entries(server, name, entries)

    async def remove_entries_from_player_list(
        self, server: str | Server, name: str, entries: list[str]
    ) -> ListResponse:
        return await self.player_lists.remove_entries(server, name, entries)

    # Files

    async def get_file_information(
        self, server: str | Server, path: str
    ) -> FileInformationResponse:
        return await self.files.info(server, path)

    async def read_file(self, server: str | Server, path: str) -> bytes:
        return await self.files.read(server, path)

    async def read_text_file(
        self, server: str | Server, path: str, encoding: str = "utf-8"
    ) -> str:
        return await self.files.read_text(server, path, encoding)

    async def write_file(
        self, server: str | Server, path: str, content: bytes | str
    ) -> GenericResponse:
        return await self.files.write(server, path, content)

    async def create_directory(self, server: str | Server, path: str) -> GenericResponse:
        return await self.files.create_directory(server, path)

    async def delete_file(self, server: str | Server, path: str) -> GenericResponse:
        return await self.files.delete(server, path)

    async def get_config_options(
        self, server: str | Server, path: str
    ) -> ConfigOptionsResponse:
        return await self.files.get_config(server, path)

    async def update_config_options(
        self, server: str | Server, path: str, options: dict[str, Any]
    ) -> ConfigOptionsResponse:
        return await self.files.update_config(server, path, options)

    # Billing

    async def get_credit_pools(self) -> CreditPoolsResponse:
        return await self.billing.list_pools()

    async def get_credit_pool(self, pool: str | CreditPool) -> CreditPoolResponse:
        return await self.billing.get_pool(pool)

    async def get_credit_pool_members(
        self, pool: str | CreditPool
    ) -> CreditPoolMembersResponse:
        return await self.billing.get_pool_members(pool)

    async def get_credit_pool_servers(
        self, pool: str | CreditPool
    ) -> CreditPoolServersResponse:
        return await self.billing.get_pool_servers(pool)
