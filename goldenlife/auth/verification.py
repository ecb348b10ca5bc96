"""Pending email verification.

A registered-but-unverified account waiting for its one-time code. Holds
the code being typed, the resend cooldown and the in-flight flags; on a
successful verification it sends the user to the login page, where a fresh
login establishes the verified session.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from urllib.parse import parse_qs, urlsplit

from goldenlife.auth.flows import FlowResult, Outcome
from goldenlife.auth.forms import OTP_LENGTH
from goldenlife.auth.session import SessionStore
from goldenlife.core.exceptions import AppException
from goldenlife.locale.state import LocaleState
from goldenlife.navigation.navigator import Navigator
from goldenlife.navigation.routes import Pages

logger = logging.getLogger(__name__)

RESEND_COOLDOWN_SECONDS = 60


class PendingVerification:
    def __init__(
        self,
        user_id: str,
        session: SessionStore,
        navigator: Navigator,
        locale: LocaleState,
    ):
        self.user_id = user_id
        self.code = ""
        self.cooldown = 0
        self.is_verifying = False
        self.is_resending = False
        self._session = session
        self._navigator = navigator
        self._locale = locale

    @classmethod
    def from_location(
        cls, session: SessionStore, navigator: Navigator, locale: LocaleState
    ) -> "PendingVerification | None":
        """Open the verification page for the `userId` in the URL or the session.

        Returns None when neither names an account (the page then shows its
        invalid-link state).
        """
        values = parse_qs(urlsplit(navigator.location).query).get("userId")
        user_id = values[0] if values else None
        if not user_id and session.identity is not None:
            user_id = session.identity.id
        if not user_id:
            return None
        return cls(user_id, session, navigator, locale)

    def enter_code(self, raw: str) -> str:
        """Keep digits only, up to the code length."""
        self.code = "".join(ch for ch in raw if ch.isdigit())[:OTP_LENGTH]
        return self.code

    @property
    def can_verify(self) -> bool:
        return len(self.code) == OTP_LENGTH and not self.is_verifying

    @property
    def can_resend(self) -> bool:
        return self.cooldown == 0 and not self.is_resending

    @property
    def resend_label(self) -> str:
        if self.cooldown > 0:
            return self._locale.translate("auth.resend_cooldown", seconds=self.cooldown)
        return self._locale.translate("auth.resend_code")

    def tick(self, seconds: int = 1) -> int:
        """Advance the resend cooldown clock."""
        self.cooldown = max(0, self.cooldown - seconds)
        return self.cooldown

    async def run_cooldown(
        self, sleep: Callable[[float], Awaitable[None]] = asyncio.sleep
    ) -> None:
        """Count the cooldown down once per second until it reaches zero."""
        while self.cooldown > 0:
            await sleep(1)
            self.tick()

    async def verify(self) -> FlowResult:
        if not self.can_verify:
            return FlowResult(Outcome.BLOCKED)

        self.is_verifying = True
        try:
            await self._session.verify_email(self.user_id, self.code)
        except AppException as e:
            return FlowResult(Outcome.FAILED, message=e.message)
        finally:
            self.is_verifying = False

        logger.info("Email verified for pending account")
        self._navigator.navigate(Pages.LOGIN)
        return FlowResult(
            Outcome.SUCCESS,
            message=self._locale.translate("auth.verify_success"),
            location=self._navigator.location,
        )

    async def resend(self) -> FlowResult:
        if not self.can_resend:
            return FlowResult(Outcome.BLOCKED)

        self.is_resending = True
        try:
            await self._session.resend_otp(self.user_id)
        except AppException as e:
            return FlowResult(Outcome.FAILED, message=e.message)
        finally:
            self.is_resending = False

        self.cooldown = RESEND_COOLDOWN_SECONDS
        return FlowResult(Outcome.SUCCESS, message=self._locale.translate("auth.otp_resent"))
