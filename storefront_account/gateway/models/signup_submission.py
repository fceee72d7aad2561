from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field


class ValidationResult(BaseModel):
    """Facts derived from a submission before anything is sent to the platform."""

    passwords_match: bool
    inputs_present: bool


class SubmittedCredentials(BaseModel):
    """
    Credentials parsed from the sign-up form.

    ``email`` falls back to an empty string when the field is omitted while the
    password fields fall back to ``None``, so an omitted password can be told
    apart from an empty one.
    """

    model_config = ConfigDict(populate_by_name=True)

    email: str = ""
    password: Optional[str] = None
    password_confirm: Optional[str] = Field(default=None, alias="passwordConfirm")

    @classmethod
    def from_form(cls, form: Mapping[str, Any]) -> "SubmittedCredentials":
        return cls(
            email=str(form["email"]) if "email" in form else "",
            password=str(form["password"]) if "password" in form else None,
            password_confirm=(
                str(form["passwordConfirm"]) if "passwordConfirm" in form else None
            ),
        )

    def validate_submission(self) -> ValidationResult:
        return ValidationResult(
            passwords_match=bool(
                self.password
                and self.password_confirm
                and self.password == self.password_confirm
            ),
            inputs_present=bool(self.email and self.password),
        )
