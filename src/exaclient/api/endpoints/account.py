"""Account API endpoints."""

from __future__ import annotations

from exaclient.api.client import ExarotonClient
from exaclient.api.models import AccountResponse, parse_response


class AccountAPI:
    def __init__(self, client: ExarotonClient) -> None:
        self._client = client

    async def get(self) -> AccountResponse:
        data = await self._client.get("account/")
        return parse_response(AccountResponse, data)
