from storefront_account.gateway.exceptions.signup_exception import SignupException


class SignupMethodNotAllowedException(SignupException):
    """
    Exception raised when the sign-up route receives a method other than GET or POST.
    """

    status_code: int = 405

    def __init__(self, method: str) -> None:
        super().__init__("Method not allowed")
        self.method: str = method
