import json
import logging
from typing import Any, Final

from storefront_account.gateway.exceptions.signup_exception import SignupException
from storefront_account.gateway.exceptions.signup_method_not_allowed_exception import (
    SignupMethodNotAllowedException,
)
from storefront_account.gateway.exceptions.signup_validation_exception import (
    SignupValidationException,
)
from storefront_account.gateway.exceptions.storefront_api_exception import (
    StorefrontApiException,
)
from storefront_account.gateway.exceptions.storefront_missing_data_exception import (
    StorefrontMissingDataException,
)
from storefront_account.gateway.exceptions.storefront_user_error_exception import (
    StorefrontUserErrorException,
)
from storefront_account.gateway.models.signup_response import SignupResult
from storefront_account.gateway.models.signup_submission import SubmittedCredentials
from storefront_account.gateway.models.storefront_customer import NewCustomer
from storefront_account.gateway.session.cookie_session_storage import (
    CookieSessionStorage,
)
from storefront_account.gateway.session.customer_session import CustomerSession
from storefront_account.gateway.storefront_api.storefront_client import (
    StorefrontClient,
)
from storefront_account.gateway.utilities.logger.log_levels import SRC_LOG_LEVELS
from storefront_account.gateway.utilities.storefront_environment_variables import (
    StorefrontEnvironmentVariables,
)
from storefront_account.gateway.utilities.storefront_locale import StorefrontLocale

logger = logging.getLogger(__name__)
logger.setLevel(SRC_LOG_LEVELS["SIGNUP"])

CUSTOMER_ACCESS_TOKEN_SESSION_KEY: Final[str] = "customerAccessToken"


def _is_json_value(value: Any) -> bool:
    if value is None:
        return False
    try:
        json.dumps(value, allow_nan=False)
    except (TypeError, ValueError):
        return False
    return True


class CustomerSignupManager:
    """Registers a customer with the Storefront API and signs them in."""

    def __init__(
        self,
        *,
        storefront_client: StorefrontClient,
        session_storage: CookieSessionStorage,
        environment_variables: StorefrontEnvironmentVariables,
    ) -> None:
        if storefront_client is None:
            raise ValueError("storefront_client must not be None")
        if session_storage is None:
            raise ValueError("session_storage must not be None")
        if environment_variables is None:
            raise ValueError("environment_variables must not be None")
        if not isinstance(storefront_client, StorefrontClient):
            raise TypeError("storefront_client must be an instance of StorefrontClient")
        if not isinstance(session_storage, CookieSessionStorage):
            raise TypeError(
                "session_storage must be an instance of CookieSessionStorage"
            )
        if not isinstance(environment_variables, StorefrontEnvironmentVariables):
            raise TypeError(
                "environment_variables must be an instance of StorefrontEnvironmentVariables"
            )
        self._storefront_client = storefront_client
        self._session_storage = session_storage
        self._environment_variables = environment_variables

    def get_signed_in_redirect(
        self, *, session: CustomerSession, locale: StorefrontLocale
    ) -> str | None:
        """Landing path for visitors that already hold an access token, else None."""
        if session.get(CUSTOMER_ACCESS_TOKEN_SESSION_KEY):
            return locale.localize_path(self._environment_variables.account_landing_path)
        return None

    async def sign_up(
        self,
        *,
        method: str,
        credentials: SubmittedCredentials,
        session: CustomerSession,
        locale: StorefrontLocale,
    ) -> SignupResult:
        """
        Create the customer, fetch an access token for them and store it in the session.

        Every failure is turned into a SignupResult carrying the error message;
        the session is only written once both Storefront calls have succeeded.
        """
        try:
            if method.upper() != "POST":
                raise SignupMethodNotAllowedException(method)

            self._validate(credentials)
            assert credentials.password is not None

            new_customer: NewCustomer = await self._create_customer_async(
                email=credentials.email,
                password=credentials.password,
                locale=locale,
            )
            access_token: dict[str, Any] = await self._create_access_token_async(
                email=credentials.email,
                password=credentials.password,
                locale=locale,
            )

            session.set(CUSTOMER_ACCESS_TOKEN_SESSION_KEY, access_token)
            logger.info("Registered and signed in customer %s", new_customer.id)
            return SignupResult(
                status_code=302,
                new_customer=new_customer,
                headers={
                    "Set-Cookie": self._session_storage.commit_session(session),
                    "Location": locale.localize_path(
                        self._environment_variables.account_landing_path
                    ),
                },
            )
        except Exception as exc:
            return self._to_failure(exc)

    @staticmethod
    def _validate(credentials: SubmittedCredentials) -> None:
        validation = credentials.validate_submission()
        if not validation.passwords_match:
            raise SignupValidationException("Passwords do not match")
        if not validation.inputs_present:
            raise SignupValidationException(
                "Please provide both an email and a password."
            )

    async def _create_customer_async(
        self, *, email: str, password: str, locale: StorefrontLocale
    ) -> NewCustomer:
        payload = await self._storefront_client.create_customer_async(
            email=email, password=password, locale=locale
        )
        if payload.customer_user_errors:
            raise StorefrontUserErrorException(payload.customer_user_errors)
        if payload.customer is None or not payload.customer.id:
            raise StorefrontMissingDataException(
                "Could not create customer", field="customerCreate.customer.id"
            )
        return payload.customer

    async def _create_access_token_async(
        self, *, email: str, password: str, locale: StorefrontLocale
    ) -> dict[str, Any]:
        payload = await self._storefront_client.create_customer_access_token_async(
            email=email, password=password, locale=locale
        )
        token = payload.customer_access_token
        if token is None or not token.access_token:
            raise StorefrontMissingDataException(
                "Missing access token",
                field="customerAccessTokenCreate.customerAccessToken.accessToken",
            )
        return token.model_dump(by_alias=True)

    @staticmethod
    def _to_failure(exc: Exception) -> SignupResult:
        match exc:
            case SignupMethodNotAllowedException():
                logger.info("Rejected %s request to the sign-up route", exc.method)
            case SignupValidationException() | StorefrontUserErrorException():
                logger.info("Sign-up rejected: %s", exc.message)
            case StorefrontMissingDataException():
                logger.warning(
                    "Storefront response is missing %s: %s", exc.field, exc.message
                )
            case StorefrontApiException():
                logger.warning("Storefront API call failed: %s", exc.message)
            case SignupException():
                logger.warning("Sign-up failed: %s", exc.message)
            case _:
                logger.exception("Unexpected failure while signing up a customer")
                # anything else is reported with its payload untouched when it
                # can be rendered as JSON
                error: Any = (
                    exc.args[0]
                    if len(exc.args) == 1 and _is_json_value(exc.args[0])
                    else str(exc)
                )
                return SignupResult(status_code=400, error=error)
        assert isinstance(exc, SignupException)
        return SignupResult(status_code=exc.status_code, error=exc.error)
