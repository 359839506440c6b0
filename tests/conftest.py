"""Test configuration for pytest."""

from __future__ import annotations

import httpx
import pytest
import pytest_asyncio

from showcase_gateway.config import GatewayConfig
from showcase_gateway.services import RemoteDataGateway

from tests.helpers import API_KEY, GRAPHQL_URL, SERVER_URL, FakeShowcaseApi


@pytest.fixture
def fake_api() -> FakeShowcaseApi:
    return FakeShowcaseApi()


@pytest.fixture
def gateway_config() -> GatewayConfig:
    return GatewayConfig(graphql_url=GRAPHQL_URL, api_key=API_KEY, server_url=SERVER_URL)


@pytest_asyncio.fixture
async def http_client(fake_api: FakeShowcaseApi):
    async with httpx.AsyncClient(transport=httpx.MockTransport(fake_api.handler)) as client:
        yield client


@pytest.fixture
def gateway(gateway_config: GatewayConfig, http_client: httpx.AsyncClient) -> RemoteDataGateway:
    return RemoteDataGateway(gateway_config, client=http_client)


@pytest.fixture
def clean_gateway_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clear every environment variable the gateway configuration reads."""
    for name in (
        "SHOWCASE_ENV",
        "NODE_ENV",
        "SHOWCASE_GRAPHQL_API_URL",
        "SHOWCASE_GRAPHQL_API_KEY",
        "SHOWCASE_SERVER_URL",
        "SHOWCASE_HTTP_TIMEOUT",
    ):
        monkeypatch.delenv(name, raising=False)
