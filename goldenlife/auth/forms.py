"""Auth form models.

Local input checks that run before anything is sent to the API. A form
that fails here raises FormValidationError and never reaches the network.
"""

from typing import Any

from pydantic import BaseModel, EmailStr, Field, model_validator
from pydantic import ValidationError as PydanticValidationError

from goldenlife.auth.schemas import RegistrationData, UserRole
from goldenlife.core.exceptions import FormValidationError

PASSWORD_MIN_LENGTH = 6
NAME_MIN_LENGTH = 2
OTP_LENGTH = 6


class LoginForm(BaseModel):
    email: EmailStr
    password: str = Field(min_length=PASSWORD_MIN_LENGTH)


class RegisterForm(BaseModel):
    first_name: str = Field(min_length=NAME_MIN_LENGTH)
    last_name: str = Field(min_length=NAME_MIN_LENGTH)
    email: EmailStr
    phone: str | None = None
    password: str = Field(min_length=PASSWORD_MIN_LENGTH)
    confirm_password: str = Field(min_length=PASSWORD_MIN_LENGTH)
    role: UserRole = UserRole.PATIENT

    @model_validator(mode="after")
    def check_passwords_match(self) -> "RegisterForm":
        if self.password != self.confirm_password:
            raise ValueError("Passwords do not match")
        return self

    @model_validator(mode="after")
    def check_self_service_role(self) -> "RegisterForm":
        if self.role is UserRole.ADMIN:
            raise ValueError("Admin accounts cannot be self-registered")
        return self

    def to_registration(self) -> RegistrationData:
        return RegistrationData(
            email=self.email,
            password=self.password,
            first_name=self.first_name,
            last_name=self.last_name,
            phone=self.phone or None,
            role=self.role,
        )


class ForgotPasswordForm(BaseModel):
    email: EmailStr


class ResetPasswordForm(BaseModel):
    email: EmailStr
    code: str = Field(min_length=1)
    new_password: str = Field(min_length=PASSWORD_MIN_LENGTH)


def _field_errors(exc: PydanticValidationError) -> dict[str, str]:
    errors: dict[str, str] = {}
    for error in exc.errors():
        field = ".".join(str(loc) for loc in error["loc"]) or "__all__"
        message = error["msg"].removeprefix("Value error, ")
        errors.setdefault(field, message)
    return errors


def validate_form[F: BaseModel](form: type[F], data: dict[str, Any]) -> F:
    """Validate raw form input.

    Raises:
        FormValidationError: With one message per failing field; model-level
            failures (e.g. mismatched passwords) are keyed "__all__"
    """
    try:
        return form.model_validate(data)
    except PydanticValidationError as e:
        raise FormValidationError(field_errors=_field_errors(e)) from e
