from typing import Any, Optional

from pydantic import BaseModel, Field

from storefront_account.gateway.models.storefront_customer import NewCustomer


class SignupResult(BaseModel):
    """Outcome of a sign-up submission, independent of how it is rendered."""

    status_code: int
    error: Optional[Any] = None
    new_customer: Optional[NewCustomer] = None
    headers: dict[str, str] = Field(default_factory=dict)

    @property
    def succeeded(self) -> bool:
        return self.error is None

    def to_body(self) -> dict[str, Any]:
        if self.succeeded:
            return {
                "error": None,
                "newCustomer": (
                    self.new_customer.model_dump(mode="json")
                    if self.new_customer is not None
                    else None
                ),
            }
        return {"error": self.error}
