from typing import AsyncGenerator, Generator

import httpx
import pytest
from fastapi import FastAPI

from storefront_account.container.container_factory import StorefrontAccountContainer
from storefront_account.gateway.api import create_app
from storefront_account.gateway.session.cookie_session_storage import (
    CookieSessionStorage,
)
from storefront_account.gateway.storefront_api.storefront_client import (
    StorefrontClient,
)
from tests.common import create_test_container


@pytest.fixture(scope="function")
def test_container() -> Generator[StorefrontAccountContainer, None, None]:
    container: StorefrontAccountContainer = create_test_container()
    yield container
    container.reset_singletons()


@pytest.fixture
def session_storage(test_container: StorefrontAccountContainer) -> CookieSessionStorage:
    return test_container.session_storage()


@pytest.fixture
def storefront_client(test_container: StorefrontAccountContainer) -> StorefrontClient:
    return test_container.storefront_client()


@pytest.fixture
def app(test_container: StorefrontAccountContainer) -> FastAPI:
    app1 = create_app()
    app1.state.container = test_container
    return app1


@pytest.fixture
async def async_client(app: FastAPI) -> AsyncGenerator[httpx.AsyncClient, None]:
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app), base_url="http://test"
    ) as client:
        yield client
