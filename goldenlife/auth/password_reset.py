"""Forgot-password flow.

Step one asks the API to email a 6-digit reset code; step two sends the
code with the new password for the same email address.
"""

from goldenlife.auth.flows import FlowResult, Outcome
from goldenlife.auth.forms import ForgotPasswordForm, ResetPasswordForm, validate_form
from goldenlife.auth.session import SessionStore
from goldenlife.core.exceptions import AppException, FormValidationError
from goldenlife.locale.state import LocaleState
from goldenlife.navigation.navigator import Navigator
from goldenlife.navigation.routes import Pages


class PasswordResetFlow:
    def __init__(self, session: SessionStore, navigator: Navigator, locale: LocaleState):
        self._session = session
        self._navigator = navigator
        self._locale = locale
        self.email: str | None = None
        self.is_loading = False

    @property
    def code_sent(self) -> bool:
        return self.email is not None

    async def request_code(self, email: str) -> FlowResult:
        try:
            form = validate_form(ForgotPasswordForm, {"email": email})
        except FormValidationError as e:
            return FlowResult.invalid(e)

        self.is_loading = True
        try:
            await self._session.request_password_reset(form.email)
        except AppException as e:
            return FlowResult(Outcome.FAILED, message=e.message)
        finally:
            self.is_loading = False

        self.email = form.email
        return FlowResult(
            Outcome.SUCCESS, message=self._locale.translate("auth.reset_code_sent")
        )

    async def complete(self, code: str, new_password: str) -> FlowResult:
        if self.email is None:
            return FlowResult(Outcome.BLOCKED)

        try:
            form = validate_form(
                ResetPasswordForm,
                {"email": self.email, "code": code, "new_password": new_password},
            )
        except FormValidationError as e:
            return FlowResult.invalid(e)

        self.is_loading = True
        try:
            await self._session.complete_password_reset(
                form.email, form.code, form.new_password
            )
        except AppException as e:
            return FlowResult(Outcome.FAILED, message=e.message)
        finally:
            self.is_loading = False

        self._navigator.navigate(Pages.LOGIN)
        return FlowResult(
            Outcome.SUCCESS,
            message=self._locale.translate("auth.reset_success"),
            location=self._navigator.location,
        )
