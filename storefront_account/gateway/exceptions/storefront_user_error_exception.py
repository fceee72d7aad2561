from storefront_account.gateway.exceptions.signup_exception import SignupException
from storefront_account.gateway.models.storefront_customer import CustomerUserError


class StorefrontUserErrorException(SignupException):
    """
    Exception raised when the Storefront API rejects the input with customerUserErrors,
    for example when the email is already taken.
    """

    def __init__(self, user_errors: list[CustomerUserError]) -> None:
        if not user_errors:
            raise ValueError("user_errors must not be empty")
        super().__init__(user_errors[0].message)
        self.user_errors: list[CustomerUserError] = user_errors
