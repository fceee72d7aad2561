from storefront_account.gateway.exceptions.signup_exception import SignupException


class SignupValidationException(SignupException):
    """
    Exception raised when submitted credentials fail local validation.
    """

    pass
