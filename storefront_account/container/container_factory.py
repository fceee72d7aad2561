import logging

from dependency_injector import containers, providers

from storefront_account.gateway.http.http_client_factory import HttpClientFactory
from storefront_account.gateway.managers.customer_signup_manager import (
    CustomerSignupManager,
)
from storefront_account.gateway.session.cookie_session_storage import (
    CookieSessionStorage,
)
from storefront_account.gateway.storefront_api.storefront_client import (
    StorefrontClient,
)
from storefront_account.gateway.utilities.logger.log_levels import SRC_LOG_LEVELS
from storefront_account.gateway.utilities.storefront_environment_variables import (
    StorefrontEnvironmentVariables,
)

logger = logging.getLogger(__name__)
logger.setLevel(SRC_LOG_LEVELS["INITIALIZATION"])


class StorefrontAccountContainer(containers.DeclarativeContainer):
    """Services shared by every sign-up request. All of them are singletons."""

    environment_variables = providers.Singleton(StorefrontEnvironmentVariables)

    http_client_factory = providers.Singleton(
        HttpClientFactory,
        log_requests=environment_variables.provided.log_storefront_requests,
    )

    storefront_client = providers.Singleton(
        StorefrontClient,
        http_client_factory=http_client_factory,
        environment_variables=environment_variables,
    )

    session_storage = providers.Singleton(
        CookieSessionStorage,
        secret=environment_variables.provided.session_secret,
        cookie_name=environment_variables.provided.session_cookie_name,
        max_age=environment_variables.provided.session_max_age_seconds,
        secure=environment_variables.provided.session_cookie_secure,
    )

    customer_signup_manager = providers.Singleton(
        CustomerSignupManager,
        storefront_client=storefront_client,
        session_storage=session_storage,
        environment_variables=environment_variables,
    )


class StorefrontAccountContainerFactory:
    @classmethod
    def create_container(cls) -> StorefrontAccountContainer:
        logger.info("Initializing DI container")

        # providers are lazy: nothing reads configuration until first resolved
        container = StorefrontAccountContainer()

        logger.info("DI container initialized")
        return container
