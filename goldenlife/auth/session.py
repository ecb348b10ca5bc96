"""Session store.

Holds the process-wide authentication state (checking, authenticated,
anonymous) and performs the auth operations that change it. Every page
and the route guard read from the one store owned by the client.

State is published as immutable snapshots: a reader sees either the
snapshot before an operation or the one after it, never a mix.
Operations that mutate the session run one at a time, in call order.
"""

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

import httpx
from pydantic import ValidationError as PydanticValidationError

from goldenlife.auth.exceptions import EmailNotVerifiedError, is_email_not_verified
from goldenlife.auth.schemas import (
    CompleteResetPasswordRequest,
    ForgotPasswordRequest,
    Identity,
    LoginCredentials,
    ProfileUpdate,
    RegistrationData,
    ResendOtpRequest,
    VerifyEmailRequest,
)
from goldenlife.core.constants import ApiPaths
from goldenlife.core.exceptions import ApplicationError, TransportError
from goldenlife.core.http import ApiClient

logger = logging.getLogger(__name__)


class SessionStatus(StrEnum):
    CHECKING = "checking"
    AUTHENTICATED = "authenticated"
    ANONYMOUS = "anonymous"


@dataclass(frozen=True)
class SessionSnapshot:
    """One consistent view of the session.

    `status` is AUTHENTICATED exactly when `identity` is set.
    """

    status: SessionStatus
    identity: Identity | None = None

    def __post_init__(self) -> None:
        has_identity = self.identity is not None
        if has_identity != (self.status is SessionStatus.AUTHENTICATED):
            raise ValueError(
                f"Session status {self.status} is inconsistent with identity"
            )

    @classmethod
    def checking(cls) -> "SessionSnapshot":
        return cls(SessionStatus.CHECKING)

    @classmethod
    def anonymous(cls) -> "SessionSnapshot":
        return cls(SessionStatus.ANONYMOUS)

    @classmethod
    def authenticated(cls, identity: Identity) -> "SessionSnapshot":
        return cls(SessionStatus.AUTHENTICATED, identity)

    @property
    def is_authenticated(self) -> bool:
        return self.status is SessionStatus.AUTHENTICATED

    @property
    def is_loading(self) -> bool:
        return self.status is SessionStatus.CHECKING


SessionListener = Callable[[SessionSnapshot], None]


class SessionStore:
    """Single source of truth for who is signed in.

    Listeners registered with subscribe() are called synchronously with the
    new snapshot after every change. A listener that raises is logged and
    skipped; the operation and the remaining listeners carry on.
    """

    def __init__(self, api: ApiClient):
        self._api = api
        self._snapshot = SessionSnapshot.checking()
        self._listeners: list[SessionListener] = []
        self._mutation_lock = asyncio.Lock()

    # --- state access ---

    @property
    def snapshot(self) -> SessionSnapshot:
        return self._snapshot

    @property
    def identity(self) -> Identity | None:
        return self._snapshot.identity

    @property
    def status(self) -> SessionStatus:
        return self._snapshot.status

    @property
    def is_authenticated(self) -> bool:
        return self._snapshot.is_authenticated

    @property
    def is_loading(self) -> bool:
        return self._snapshot.is_loading

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """Register a listener; returns a function that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _publish(self, snapshot: SessionSnapshot) -> None:
        previous = self._snapshot
        self._snapshot = snapshot
        if previous.status is not snapshot.status:
            logger.info(
                "Session %s -> %s",
                previous.status,
                snapshot.status,
                extra={"session_status": str(snapshot.status)},
            )
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:
                # The snapshot is already applied; a failing listener is skipped.
                logger.exception(
                    "Session listener %r failed",
                    listener,
                    extra={"session_status": str(snapshot.status)},
                )

    # --- helpers ---

    @staticmethod
    def _identity_from(response: httpx.Response, fallback: str) -> Identity:
        data = ApiClient.read_json(response)
        try:
            return Identity.model_validate(data.get("user"))
        except PydanticValidationError as e:
            logger.warning(
                "API returned %s without a usable user object",
                response.status_code,
                extra={"status_code": response.status_code},
            )
            raise ApplicationError(
                fallback, status_code=response.status_code, code="invalid_response"
            ) from e

    async def _post(self, path: str, payload: dict[str, Any], fallback: str) -> dict[str, Any]:
        response = await self._api.request("POST", path, payload)
        if not response.is_success:
            raise self._api.error_from_response(response, fallback)
        return ApiClient.read_json(response)

    # --- operations ---

    async def check_session(self) -> None:
        """Ask the API who is signed in.

        Never raises: any failure to confirm an identity leaves the session
        anonymous.
        """
        async with self._mutation_lock:
            try:
                response = await self._api.request("GET", ApiPaths.ME)
            except TransportError:
                logger.warning("Session check failed: API unreachable")
                self._publish(SessionSnapshot.anonymous())
                return

            if response.status_code != 200:
                self._publish(SessionSnapshot.anonymous())
                return

            try:
                identity = self._identity_from(response, "Session check failed")
            except ApplicationError:
                self._publish(SessionSnapshot.anonymous())
                return

            self._publish(SessionSnapshot.authenticated(identity))

    async def refresh_user(self) -> None:
        """Silently re-check the session (e.g. after a profile change elsewhere)."""
        await self.check_session()

    async def login(self, email: str, password: str) -> Identity:
        """Sign in with email and password.

        Raises:
            EmailNotVerifiedError: If the account exists but is unverified
            ApplicationError: If the API rejects the credentials
            TransportError: If the API is unreachable
        """
        payload = LoginCredentials(email=email, password=password).to_payload()
        async with self._mutation_lock:
            response = await self._api.request("POST", ApiPaths.LOGIN, payload)
            if not response.is_success:
                error = self._api.error_from_response(response, "Login failed")
                if is_email_not_verified(error):
                    user_id = ApiClient.read_json(response).get("userId")
                    raise EmailNotVerifiedError(
                        error.message,
                        status_code=error.status_code,
                        user_id=str(user_id) if user_id else None,
                    ) from error
                raise error

            identity = self._identity_from(response, "Login failed")
            self._publish(SessionSnapshot.authenticated(identity))
            return identity

    async def register(self, data: RegistrationData) -> Identity:
        """Create an account; the new identity becomes the current session.

        The caller decides from the returned identity whether email
        verification comes next.
        """
        async with self._mutation_lock:
            response = await self._api.request(
                "POST", ApiPaths.REGISTER, data.to_payload()
            )
            if not response.is_success:
                raise self._api.error_from_response(response, "Registration failed")

            identity = self._identity_from(response, "Registration failed")
            self._publish(SessionSnapshot.authenticated(identity))
            return identity

    async def verify_email(self, user_id: str, code: str) -> None:
        """Confirm an account with its one-time code.

        Leaves the session untouched; a fresh login establishes the
        verified session.
        """
        payload = VerifyEmailRequest(user_id=user_id, otp=code).to_payload()
        await self._post(ApiPaths.VERIFY_EMAIL, payload, "Verification failed")

    async def resend_otp(self, user_id: str) -> None:
        payload = ResendOtpRequest(user_id=user_id).to_payload()
        await self._post(ApiPaths.RESEND_EMAIL_OTP, payload, "Failed to resend OTP")

    async def request_password_reset(self, email: str) -> None:
        payload = ForgotPasswordRequest(email=email).to_payload()
        await self._post(
            ApiPaths.FORGOT_PASSWORD, payload, "Failed to send reset email"
        )

    async def complete_password_reset(
        self, email: str, code: str, new_password: str
    ) -> None:
        payload = CompleteResetPasswordRequest(
            email=email, code=code, new_password=new_password
        ).to_payload()
        await self._post(
            ApiPaths.COMPLETE_RESET_PASSWORD, payload, "Failed to reset password"
        )

    async def update_profile(self, changes: ProfileUpdate) -> Identity:
        """Update the signed-in user's profile and adopt the returned identity."""
        async with self._mutation_lock:
            response = await self._api.request(
                "PATCH", ApiPaths.PROFILE, changes.to_payload()
            )
            if not response.is_success:
                raise self._api.error_from_response(
                    response, "Failed to update profile"
                )

            identity = self._identity_from(response, "Failed to update profile")
            self._publish(SessionSnapshot.authenticated(identity))
            return identity

    async def refresh_token(self) -> str | None:
        """Renew the access token cookie from the refresh token cookie.

        A 401 means the refresh token is gone or expired, so the session
        becomes anonymous before the error is raised.

        Returns:
            The new access token when the API includes it in the body
        """
        async with self._mutation_lock:
            response = await self._api.request("POST", ApiPaths.REFRESH, {})
            if not response.is_success:
                error = self._api.error_from_response(response, "Token refresh failed")
                if response.status_code == 401:
                    self._publish(SessionSnapshot.anonymous())
                raise error

            token = ApiClient.read_json(response).get("accessToken")
            return token if isinstance(token, str) else None

    async def logout(self) -> None:
        """Sign out.

        The local session always ends anonymous. A failed logout request is
        logged, not raised, so the UI never stays signed in because the
        server could not be told.
        """
        async with self._mutation_lock:
            try:
                response = await self._api.request("POST", ApiPaths.LOGOUT, {})
                if not response.is_success:
                    logger.warning(
                        "Logout rejected by API with %s; clearing local session",
                        response.status_code,
                        extra={"status_code": response.status_code},
                    )
            except TransportError:
                logger.warning("Logout request failed; clearing local session")
            finally:
                self._publish(SessionSnapshot.anonymous())
