import http.cookies
from typing import Any

import httpx
from dependency_injector import providers
from typing_extensions import override

from storefront_account.container.container_factory import (
    StorefrontAccountContainer,
    StorefrontAccountContainerFactory,
)
from storefront_account.gateway.utilities.storefront_environment_variables import (
    StorefrontEnvironmentVariables,
)

STOREFRONT_GRAPHQL_URL = "https://test-shop.myshopify.com/api/2024-01/graphql.json"


class TestStorefrontEnvironmentVariables(StorefrontEnvironmentVariables):
    """Test Storefront Environment Variables"""

    __test__ = False

    @override
    @property
    def store_domain(self) -> str:
        return "test-shop.myshopify.com"

    @override
    @property
    def storefront_api_token(self) -> str:
        return "test-storefront-token"

    @override
    @property
    def storefront_api_version(self) -> str:
        return "2024-01"

    @override
    @property
    def session_secret(self) -> str:
        return "test-session-secret"

    @override
    @property
    def session_cookie_secure(self) -> bool:
        return False


def create_test_container() -> StorefrontAccountContainer:
    container = StorefrontAccountContainerFactory.create_container()
    container.environment_variables.override(
        providers.Object(TestStorefrontEnvironmentVariables())
    )
    return container


def customer_create_response(
    *,
    customer_id: str | None = "gid://shopify/Customer/1",
    user_errors: list[dict[str, Any]] | None = None,
) -> httpx.Response:
    return httpx.Response(
        200,
        json={
            "data": {
                "customerCreate": {
                    "customer": {"id": customer_id} if customer_id else None,
                    "customerUserErrors": user_errors or [],
                }
            }
        },
    )


def access_token_create_response(
    *,
    access_token: str | None = "token-abc",
    expires_at: str = "2030-01-01T00:00:00Z",
) -> httpx.Response:
    return httpx.Response(
        200,
        json={
            "data": {
                "customerAccessTokenCreate": {
                    "customerAccessToken": (
                        {"accessToken": access_token, "expiresAt": expires_at}
                        if access_token
                        else None
                    ),
                    "customerUserErrors": [],
                }
            }
        },
    )


def session_cookie_value(set_cookie_header: str, cookie_name: str = "session") -> str:
    cookie: http.cookies.SimpleCookie = http.cookies.SimpleCookie()
    cookie.load(set_cookie_header)
    return cookie[cookie_name].value
