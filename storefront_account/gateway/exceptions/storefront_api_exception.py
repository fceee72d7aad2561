from typing import Any

from storefront_account.gateway.exceptions.signup_exception import SignupException


class StorefrontApiException(SignupException):
    """
    Exception raised when the Storefront API cannot be reached, answers with a
    non-success HTTP status, returns top-level GraphQL errors or sends data
    that does not have the expected shape.
    """

    def __init__(
        self,
        message: str,
        *,
        url: str,
        status_code: int | None = None,
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        super().__init__(message)
        self.url: str = url
        self.response_status_code: int | None = status_code
        self.errors: list[dict[str, Any]] = errors or []
