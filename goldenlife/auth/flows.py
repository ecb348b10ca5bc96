"""Login and registration page flows.

Each flow validates its form locally, calls the session store, and turns
the outcome into a FlowResult the page can show (inline field errors or a
transient notice), navigating where the page would.
"""

import logging
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any
from urllib.parse import urlencode

from goldenlife.auth.exceptions import EmailNotVerifiedError
from goldenlife.auth.forms import LoginForm, RegisterForm, validate_form
from goldenlife.auth.session import SessionStore
from goldenlife.core.exceptions import AppException, FormValidationError
from goldenlife.locale.state import LocaleState
from goldenlife.navigation.guard import read_redirect_target
from goldenlife.navigation.navigator import Navigator
from goldenlife.navigation.routes import Pages

logger = logging.getLogger(__name__)


class Outcome(StrEnum):
    SUCCESS = "success"
    VERIFICATION_REQUIRED = "verification_required"
    FAILED = "failed"
    INVALID = "invalid"
    BLOCKED = "blocked"


@dataclass(frozen=True)
class FlowResult:
    outcome: Outcome
    message: str | None = None
    field_errors: dict[str, str] = field(default_factory=dict)
    location: str | None = None

    @property
    def ok(self) -> bool:
        return self.outcome is Outcome.SUCCESS

    @classmethod
    def invalid(cls, error: FormValidationError) -> "FlowResult":
        return cls(Outcome.INVALID, message=error.message, field_errors=error.field_errors)


def verify_email_location(user_id: str | None) -> str:
    if not user_id:
        return Pages.VERIFY_EMAIL
    return f"{Pages.VERIFY_EMAIL}?{urlencode({'userId': user_id})}"


class LoginFlow:
    """The login page.

    The post-login destination is read from the URL once, when the flow is
    created on entering the page.
    """

    def __init__(self, session: SessionStore, navigator: Navigator, locale: LocaleState):
        self._session = session
        self._navigator = navigator
        self._locale = locale
        self.redirect_target = read_redirect_target(navigator.location)
        self.is_submitting = False

    async def submit(self, email: str, password: str) -> FlowResult:
        try:
            form = validate_form(LoginForm, {"email": email, "password": password})
        except FormValidationError as e:
            return FlowResult.invalid(e)

        self.is_submitting = True
        try:
            await self._session.login(form.email, form.password)
        except EmailNotVerifiedError as e:
            self._navigator.navigate(verify_email_location(e.user_id))
            return FlowResult(
                Outcome.VERIFICATION_REQUIRED,
                message=e.message,
                location=self._navigator.location,
            )
        except AppException as e:
            return FlowResult(
                Outcome.FAILED,
                message=e.message or self._locale.translate("auth.invalid_credentials"),
            )
        finally:
            self.is_submitting = False

        self._navigator.navigate(self.redirect_target)
        return FlowResult(
            Outcome.SUCCESS,
            message=self._locale.translate("auth.login_success"),
            location=self._navigator.location,
        )


class RegisterFlow:
    def __init__(self, session: SessionStore, navigator: Navigator, locale: LocaleState):
        self._session = session
        self._navigator = navigator
        self._locale = locale
        self.is_submitting = False

    async def submit(self, data: dict[str, Any]) -> FlowResult:
        """Register, then continue to email verification unless already verified."""
        try:
            form = validate_form(RegisterForm, data)
        except FormValidationError as e:
            return FlowResult.invalid(e)

        self.is_submitting = True
        try:
            identity = await self._session.register(form.to_registration())
        except AppException as e:
            return FlowResult(Outcome.FAILED, message=e.message)
        finally:
            self.is_submitting = False

        if identity.is_email_verified:
            self._navigator.navigate(Pages.DASHBOARD)
            return FlowResult(Outcome.SUCCESS, location=self._navigator.location)

        self._navigator.navigate(verify_email_location(identity.id))
        return FlowResult(
            Outcome.VERIFICATION_REQUIRED,
            message=self._locale.translate("common.check_email_verify"),
            location=self._navigator.location,
        )
