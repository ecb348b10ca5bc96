"""Auth domain schemas.

Wire models for the backend's auth endpoints. The API speaks camelCase
JSON; models accept either spelling and serialize with aliases.
"""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class UserRole(StrEnum):
    PATIENT = "patient"
    PROVIDER = "provider"
    ADMIN = "admin"


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_payload(self) -> dict:
        """JSON body for the API: camelCase keys, unset optionals omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Identity(CamelModel):
    """The authenticated user's profile as returned by the API.

    `role` stays a plain string: the server may send values this client
    does not know, and the dashboard resolver handles those explicitly.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    email: str
    first_name: str | None = None
    last_name: str | None = None
    role: str = UserRole.PATIENT
    avatar_url: str | None = None
    is_email_verified: bool = False
    phone: str | None = None


class LoginCredentials(CamelModel):
    email: str
    password: str


class RegistrationData(CamelModel):
    """Self-registration input, forwarded verbatim to the API."""

    email: str
    password: str
    first_name: str
    last_name: str
    phone: str | None = None
    role: UserRole | None = None


class VerifyEmailRequest(CamelModel):
    user_id: str
    otp: str


class ResendOtpRequest(CamelModel):
    user_id: str


class ForgotPasswordRequest(CamelModel):
    email: str


class CompleteResetPasswordRequest(CamelModel):
    email: str
    code: str
    new_password: str


class ProfileUpdate(CamelModel):
    """Fields a user may change on their own profile."""

    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None
    address: str | None = None
