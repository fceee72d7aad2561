from typing import Any


class SignupException(Exception):
    """
    Base class for every failure raised while registering a customer.
    The manager converts these into an error response at a single boundary.
    """

    status_code: int = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message: str = message

    @property
    def error(self) -> Any:
        """Value reported in the ``error`` field of the response body."""
        return self.message
