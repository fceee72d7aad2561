from storefront_account.gateway.exceptions.signup_exception import SignupException


class StorefrontMissingDataException(SignupException):
    """
    Exception raised when a Storefront response lacks a field the sign-up flow depends on.
    """

    def __init__(self, message: str, *, field: str) -> None:
        super().__init__(message)
        self.field: str = field
