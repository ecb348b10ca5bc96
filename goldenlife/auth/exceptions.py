"""Auth domain exceptions.

Typed errors raised by the session store on top of the generic
ApplicationError returned by the API client.
"""

from goldenlife.core.exceptions import ApplicationError

EMAIL_NOT_VERIFIED_CODE = "email_not_verified"

# Older API builds only say so in the message text.
_EMAIL_NOT_VERIFIED_PHRASE = "verify your email"


class EmailNotVerifiedError(ApplicationError):
    """Raised when login is refused because the account's email is unverified.

    `user_id` is set when the API includes it, so the verification page can
    be opened for the right account.
    """

    error_type = "email_not_verified"

    def __init__(
        self,
        message: str = "Please verify your email before logging in",
        status_code: int = 403,
        user_id: str | None = None,
    ):
        self.user_id = user_id
        super().__init__(message, status_code=status_code, code=EMAIL_NOT_VERIFIED_CODE)


def is_email_not_verified(error: ApplicationError) -> bool:
    """Whether an API rejection means "email not verified".

    This is the only place that inspects message text; a typed code from the
    API always wins.
    """
    if error.code is not None:
        return error.code == EMAIL_NOT_VERIFIED_CODE
    return _EMAIL_NOT_VERIFIED_PHRASE in error.message.lower()
