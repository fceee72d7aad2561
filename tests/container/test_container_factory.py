import httpx
import pytest
from dependency_injector import providers

from storefront_account.container.container_factory import (
    StorefrontAccountContainer,
    StorefrontAccountContainerFactory,
)
from storefront_account.gateway.api import create_app
from storefront_account.gateway.managers.customer_signup_manager import (
    CustomerSignupManager,
)
from storefront_account.gateway.models.signup_response import SignupResult
from storefront_account.gateway.models.signup_submission import SubmittedCredentials
from storefront_account.gateway.session.customer_session import CustomerSession
from tests.common import STOREFRONT_GRAPHQL_URL


def test_services_are_singletons(test_container: StorefrontAccountContainer) -> None:
    manager = test_container.customer_signup_manager()

    assert isinstance(manager, CustomerSignupManager)
    assert test_container.customer_signup_manager() is manager
    assert test_container.storefront_client() is test_container.storefront_client()


def test_overridden_settings_flow_into_services(
    test_container: StorefrontAccountContainer,
) -> None:
    assert test_container.storefront_client().url == STOREFRONT_GRAPHQL_URL

    session_storage = test_container.session_storage()
    assert session_storage.cookie_name == "session"
    assert "Secure" not in session_storage.commit_session(CustomerSession())


def test_environment_configures_default_container(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("PUBLIC_STORE_DOMAIN", "other-shop.myshopify.com")
    monkeypatch.setenv("PUBLIC_STOREFRONT_API_TOKEN", "token")
    monkeypatch.setenv("PUBLIC_STOREFRONT_API_VERSION", "2024-04")
    monkeypatch.setenv("SESSION_SECRET", "secret")
    monkeypatch.setenv("SESSION_COOKIE_NAME", "storefront_session")

    container = StorefrontAccountContainerFactory.create_container()

    assert (
        container.storefront_client().url
        == "https://other-shop.myshopify.com/api/2024-04/graphql.json"
    )
    assert container.session_storage().cookie_name == "storefront_session"


def test_missing_session_secret_fails_on_resolve(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.delenv("SESSION_SECRET", raising=False)

    container = StorefrontAccountContainerFactory.create_container()

    with pytest.raises(ValueError):
        container.session_storage()


async def test_overridden_manager_is_used_by_router(
    test_container: StorefrontAccountContainer,
) -> None:
    class DummyManager:
        def __init__(self) -> None:
            self.kwargs: dict[str, object] = {}

        async def sign_up(self, **kwargs: object) -> SignupResult:
            self.kwargs = kwargs
            return SignupResult(status_code=400, error="stubbed")

    manager = DummyManager()
    app = create_app()
    app.state.container = test_container

    with test_container.customer_signup_manager.override(providers.Object(manager)):
        async with httpx.AsyncClient(
            transport=httpx.ASGITransport(app=app), base_url="http://test"
        ) as client:
            response = await client.post(
                "/account/signup",
                data={"email": "user@example.com", "password": "p", "passwordConfirm": "p"},
            )

    assert response.status_code == 400
    assert response.json() == {"error": "stubbed"}
    assert manager.kwargs["method"] == "POST"
    credentials = manager.kwargs["credentials"]
    assert isinstance(credentials, SubmittedCredentials)
    assert credentials.email == "user@example.com"
