from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CustomerUserError(BaseModel):
    """An input error reported by the Storefront API for a customer mutation."""

    code: Optional[str] = None
    """ Machine readable code, e.g. TAKEN or TOO_SHORT."""

    field: Optional[list[str]] = None
    """ Path to the input field that caused the error."""

    message: str
    """ Human readable message, shown to the shopper as-is."""


class NewCustomer(BaseModel):
    """Customer created by the platform. Only the id is requested but extra fields are kept."""

    model_config = ConfigDict(extra="allow")

    id: Optional[str] = None


class CustomerAccessToken(BaseModel):
    """Opaque credential issued by the platform; stored in the session untouched."""

    model_config = ConfigDict(populate_by_name=True)

    access_token: Optional[str] = Field(default=None, alias="accessToken")
    expires_at: Optional[str] = Field(default=None, alias="expiresAt")


class CustomerCreatePayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    customer: Optional[NewCustomer] = None
    customer_user_errors: list[CustomerUserError] = Field(
        default_factory=list, alias="customerUserErrors"
    )


class CustomerAccessTokenCreatePayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    customer_access_token: Optional[CustomerAccessToken] = Field(
        default=None, alias="customerAccessToken"
    )
    customer_user_errors: list[CustomerUserError] = Field(
        default_factory=list, alias="customerUserErrors"
    )
