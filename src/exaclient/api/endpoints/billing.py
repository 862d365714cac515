"""Billing (credit pool) API endpoints."""

from __future__ import annotations

from exaclient.api.client import ExarotonClient
from exaclient.api.models import (
    CreditPool,
    CreditPoolMembersResponse,
    CreditPoolResponse,
    CreditPoolServersResponse,
    CreditPoolsResponse,
    parse_response,
)
from exaclient.api.paths import pool_id


class BillingAPI:
    def __init__(self, client: ExarotonClient) -> None:
        self._client = client

    async def list_pools(self) -> CreditPoolsResponse:
        data = await self._client.get("billing/pools/")
        return parse_response(CreditPoolsResponse, data)

    async def get_pool(self, pool: str | CreditPool) -> CreditPoolResponse:
        data = await self._client.get(f"billing/pools/{pool_id(pool)}/")
        return parse_response(CreditPoolResponse, data)

    async def get_pool_members(
        self, pool: str | CreditPool
    ) -> CreditPoolMembersResponse:
        data = await self._client.get(f"billing/pools/{pool_id(pool)}/members/")
        return parse_response(CreditPoolMembersResponse, data)

    async def get_pool_servers(
        self, pool: str | CreditPool
    ) -> CreditPoolServersResponse:
        data = await self._client.get(f"billing/pools/{pool_id(pool)}/servers/")
        return parse_response(CreditPoolServersResponse, data)
