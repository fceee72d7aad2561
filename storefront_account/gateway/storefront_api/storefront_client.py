import logging
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from storefront_account.gateway.exceptions.storefront_api_exception import (
    StorefrontApiException,
)
from storefront_account.gateway.http.http_client_factory import HttpClientFactory
from storefront_account.gateway.models.storefront_customer import (
    CustomerAccessTokenCreatePayload,
    CustomerCreatePayload,
)
from storefront_account.gateway.storefront_api.mutations import (
    CUSTOMER_ACCESS_TOKEN_CREATE_MUTATION,
    CUSTOMER_CREATE_MUTATION,
)
from storefront_account.gateway.utilities.logger.log_levels import SRC_LOG_LEVELS
from storefront_account.gateway.utilities.storefront_environment_variables import (
    StorefrontEnvironmentVariables,
)
from storefront_account.gateway.utilities.storefront_locale import StorefrontLocale

logger = logging.getLogger(__name__)
logger.setLevel(SRC_LOG_LEVELS["STOREFRONT"])

INVALID_RESPONSE_MESSAGE = "Invalid response from the Storefront API"

PayloadT = TypeVar("PayloadT", bound=BaseModel)


class StorefrontClient:
    """Issues customer mutations against the commerce platform's Storefront GraphQL API."""

    def __init__(
        self,
        *,
        http_client_factory: HttpClientFactory,
        environment_variables: StorefrontEnvironmentVariables,
    ) -> None:
        self._http_client_factory = http_client_factory
        if self._http_client_factory is None:
            raise ValueError("http_client_factory must not be None")
        if not isinstance(self._http_client_factory, HttpClientFactory):
            raise TypeError(
                "http_client_factory must be an instance of HttpClientFactory"
            )
        self._environment_variables = environment_variables
        if self._environment_variables is None:
            raise ValueError("environment_variables must not be None")
        if not isinstance(
            self._environment_variables, StorefrontEnvironmentVariables
        ):
            raise TypeError(
                "environment_variables must be an instance of StorefrontEnvironmentVariables"
            )

        store_domain: str | None = self._environment_variables.store_domain
        if not store_domain:
            raise ValueError("PUBLIC_STORE_DOMAIN environment variable must be set")
        api_token: str | None = self._environment_variables.storefront_api_token
        if not api_token:
            raise ValueError(
                "PUBLIC_STOREFRONT_API_TOKEN environment variable must be set"
            )

        self.base_url: str = (
            store_domain.rstrip("/")
            if store_domain.startswith(("http://", "https://"))
            else f"https://{store_domain.rstrip('/')}"
        )
        self.graphql_path: str = (
            f"/api/{self._environment_variables.storefront_api_version}/graphql.json"
        )
        self._api_token: str = api_token

    @property
    def url(self) -> str:
        return f"{self.base_url}{self.graphql_path}"

    async def mutate_async(
        self,
        *,
        query: str,
        variables: dict[str, Any],
        locale: StorefrontLocale,
    ) -> dict[str, Any]:
        """
        Post a GraphQL mutation and return its ``data`` object.

        Raises StorefrontApiException when the API cannot be reached, answers
        with an error status, returns something other than JSON or reports
        top-level GraphQL errors.
        """
        headers = {
            "accept": "application/json",
            "content-type": "application/json",
            "X-Shopify-Storefront-Access-Token": self._api_token,
        }
        try:
            async with self._http_client_factory.create_http_client(
                base_url=self.base_url,
                headers=headers,
                timeout=self._environment_variables.storefront_api_timeout_seconds,
            ) as client:
                response = await client.post(
                    self.graphql_path,
                    json={
                        "query": query,
                        "variables": {**variables, **locale.as_variables()},
                    },
                )
                response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.warning(
                "Storefront request failed with HTTP status %s",
                exc.response.status_code,
            )
            raise StorefrontApiException(
                f"Storefront request failed with status {exc.response.status_code}",
                url=self.url,
                status_code=exc.response.status_code,
            ) from exc
        except httpx.HTTPError as exc:
            logger.exception("Storefront request could not be completed")
            raise StorefrontApiException(
                "Unable to reach the Storefront API", url=self.url
            ) from exc

        payload: Any
        try:
            payload = response.json()
        except ValueError as exc:
            logger.exception("Storefront API returned invalid JSON")
            raise StorefrontApiException(
                INVALID_RESPONSE_MESSAGE,
                url=self.url,
                status_code=response.status_code,
            ) from exc

        if not isinstance(payload, dict):
            logger.error(
                "Storefront API returned a %s instead of a JSON object",
                type(payload).__name__,
            )
            raise StorefrontApiException(
                INVALID_RESPONSE_MESSAGE,
                url=self.url,
                status_code=response.status_code,
            )

        errors: Any = payload.get("errors") or []
        if errors:
            if not isinstance(errors, list):
                errors = [errors]
            first_error: Any = errors[0]
            message: Any = (
                first_error.get("message") if isinstance(first_error, dict) else None
            )
            logger.warning("Storefront API returned GraphQL errors: %s", errors)
            raise StorefrontApiException(
                message
                if isinstance(message, str) and message
                else "Storefront API returned an error",
                url=self.url,
                status_code=response.status_code,
                errors=errors,
            )

        data: Any = payload.get("data")
        if data is None:
            return {}
        if not isinstance(data, dict):
            logger.error(
                "Storefront API returned a %s as data", type(data).__name__
            )
            raise StorefrontApiException(
                INVALID_RESPONSE_MESSAGE,
                url=self.url,
                status_code=response.status_code,
            )
        return data

    def _parse_payload(
        self, payload_type: type[PayloadT], data: dict[str, Any], field: str
    ) -> PayloadT:
        """Validate one mutation result; malformed data is reported generically."""
        try:
            return payload_type.model_validate(data.get(field) or {})
        except ValidationError as exc:
            logger.warning(
                "Storefront API returned an unexpected %s payload: %s",
                field,
                exc.errors(include_input=False),
            )
            raise StorefrontApiException(
                INVALID_RESPONSE_MESSAGE, url=self.url
            ) from exc

    async def create_customer_async(
        self, *, email: str, password: str, locale: StorefrontLocale
    ) -> CustomerCreatePayload:
        data = await self.mutate_async(
            query=CUSTOMER_CREATE_MUTATION,
            variables={"input": {"email": email, "password": password}},
            locale=locale,
        )
        return self._parse_payload(CustomerCreatePayload, data, "customerCreate")

    async def create_customer_access_token_async(
        self, *, email: str, password: str, locale: StorefrontLocale
    ) -> CustomerAccessTokenCreatePayload:
        data = await self.mutate_async(
            query=CUSTOMER_ACCESS_TOKEN_CREATE_MUTATION,
            variables={"input": {"email": email, "password": password}},
            locale=locale,
        )
        return self._parse_payload(
            CustomerAccessTokenCreatePayload, data, "customerAccessTokenCreate"
        )
