"""Shared test fixtures for exaclient."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from exaclient.api.client import ExarotonClient
from exaclient.api.models import CreditPool, Server


def envelope(data=None, success=True, error=None):
    return {"success": success, "error": error, "data": data}


@pytest.fixture
def mock_client():
    """An ExarotonClient with mocked HTTP methods."""
    client = ExarotonClient("test-api-key")
    client.get = AsyncMock(return_value=envelope())
    client.get_text = AsyncMock()
    client.get_bytes = AsyncMock()
    client.post = AsyncMock(return_value=envelope())
    client.put = AsyncMock(return_value=envelope())
    client.delete = AsyncMock(return_value=envelope())
    return client


@pytest.fixture
def sample_server_data():
    """Raw server API response data."""
    return {
        "id": "tgkm731xO7GiHt76",
        "name": "example",
        "address": "example.exaroton.me",
        "motd": "Welcome to the server of example!",
        "status": 1,
        "host": "zeta.host.exaroton.com",
        "port": 25566,
        "players": {"max": 20, "count": 1, "list": ["Steve"]},
        "software": {
            "id": "Tzj3AxqBH7ikU2sb",
            "name": "Vanilla",
            "version": "1.20.4",
        },
        "shared": False,
    }


@pytest.fixture
def sample_pool_data():
    """Raw credit pool API response data."""
    return {
        "id": "N2t9gWOMpzRL37FI",
        "name": "Example Pool",
        "credits": 123.45,
        "servers": 2,
        "owner": "Yq9Bmd3jvPz5eB8D",
        "isOwner": True,
        "members": 3,
        "ownShare": 0.5,
        "ownCredits": 61.72,
    }


@pytest.fixture
def sample_server(sample_server_data):
    return Server.model_validate(sample_server_data)


@pytest.fixture
def sample_pool(sample_pool_data):
    return CreditPool.model_validate(sample_pool_data)
