from __future__ import annotations

import httpx
import pytest
from dependency_injector import providers

from cumulocity_client.infrastructure.gateways import UsersApi
from cumulocity_client.infrastructure.pipeline import ApiPipeline
from cumulocity_client.infrastructure.transport import CumulocityHttpClient
from cumulocity_client.main.config import AppSettings, CumulocitySettings
from cumulocity_client.main.container import (
    client_lifespan,
    get_container,
    init_container,
)


def _settings() -> AppSettings:
    return AppSettings(
        c8y=CumulocitySettings(
            base_url="https://t100.example.com",
            tenant="t100",
            username="admin",
            password="secret",
        )
    )


def test_init_and_get_container() -> None:
    container = init_container(_settings())

    assert get_container() is container
    assert container.users_api() is container.users_api()
    assert isinstance(container.users_api(), UsersApi)
    assert isinstance(container.pipeline(), ApiPipeline)
    assert container.http_client().base_url == "https://t100.example.com/"


@pytest.mark.asyncio
async def test_client_lifespan_closes_the_pool() -> None:
    container = init_container(_settings())

    async with client_lifespan() as ready:
        http = ready.http_client()
        assert http.is_closed is False

    assert http.is_closed is True


@pytest.mark.asyncio
async def test_api_groups_share_one_pool() -> None:
    requests = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        body = [] if request.url.path == "/features" else {}
        return httpx.Response(200, json=body)

    container = init_container(_settings())
    container.http_client.override(
        providers.Singleton(
            CumulocityHttpClient,
            base_url="https://t100.example.com",
            tenant="t100",
            username="admin",
            password="secret",
            transport=httpx.MockTransport(handler),
        )
    )

    async with client_lifespan() as ready:
        await ready.feature_toggles_api().list_current_tenant_features()
        await ready.users_api().get_users("t100")

    assert [request.url.path for request in requests] == ["/features", "/user/t100/users"]
    assert all("Authorization" in request.headers for request in requests)


def test_get_container_without_init_raises(monkeypatch) -> None:
    monkeypatch.setattr("cumulocity_client.main.container._app_container", None)
    with pytest.raises(RuntimeError):
        get_container()
