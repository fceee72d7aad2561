from typing import Annotated, cast

from fastapi import Depends, Request

from storefront_account.container.container_factory import StorefrontAccountContainer
from storefront_account.gateway.managers.customer_signup_manager import (
    CustomerSignupManager,
)
from storefront_account.gateway.session.cookie_session_storage import (
    CookieSessionStorage,
)
from storefront_account.gateway.session.customer_session import CustomerSession
from storefront_account.gateway.utilities.storefront_environment_variables import (
    StorefrontEnvironmentVariables,
)


def get_container(request: Request) -> StorefrontAccountContainer:
    return cast(StorefrontAccountContainer, request.app.state.container)


def get_environment_variables(
    container: Annotated[StorefrontAccountContainer, Depends(get_container)],
) -> StorefrontEnvironmentVariables:
    return container.environment_variables()


def get_session_storage(
    container: Annotated[StorefrontAccountContainer, Depends(get_container)],
) -> CookieSessionStorage:
    return container.session_storage()


def get_customer_signup_manager(
    container: Annotated[StorefrontAccountContainer, Depends(get_container)],
) -> CustomerSignupManager:
    return container.customer_signup_manager()


def get_customer_session(
    request: Request,
    session_storage: Annotated[CookieSessionStorage, Depends(get_session_storage)],
) -> CustomerSession:
    """Load the visitor's session from the request cookie."""
    return session_storage.get_session(
        request.cookies.get(session_storage.cookie_name)
    )
