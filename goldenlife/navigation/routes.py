"""Page route table.

Static paths are listed before parameterized ones so that, e.g.,
/provider/dashboard is never taken for a provider profile id.
"""

from dataclasses import dataclass, field

from goldenlife.auth.schemas import UserRole


class Pages:
    HOME = "/"
    PROVIDERS = "/providers"
    PROVIDER_PROFILE = "/provider/:id"
    LOGIN = "/login"
    REGISTER = "/register"
    FORGOT_PASSWORD = "/forgot-password"
    VERIFY_EMAIL = "/verify-email"
    CONSENT = "/consent"
    TERMS = "/terms"
    PRIVACY = "/privacy"
    COOKIES = "/cookies"
    ABOUT = "/about"
    BECOME_PROVIDER = "/become-provider"
    BOOKING = "/booking"
    DASHBOARD = "/dashboard"
    PATIENT_DASHBOARD = "/patient/dashboard"
    PROVIDER_DASHBOARD = "/provider/dashboard"
    PROVIDER_SETUP = "/provider/setup"
    ADMIN_CONSOLE = "/admin"
    MESSAGES = "/messages"
    NOTIFICATIONS = "/notifications"
    APPOINTMENTS = "/appointments"
    PROFILE = "/profile"
    SETTINGS = "/settings"


@dataclass(frozen=True)
class Route:
    """A page the client can render.

    `roles` limits a protected page to certain roles; None means any
    signed-in user.
    """

    pattern: str
    name: str
    protected: bool = False
    roles: frozenset[str] | None = None
    segments: tuple[str, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "segments", _split(self.pattern))

    def match(self, path: str) -> dict[str, str] | None:
        """Path parameters when `path` matches this route, else None."""
        parts = _split(path)
        if len(parts) != len(self.segments):
            return None
        params: dict[str, str] = {}
        for expected, actual in zip(self.segments, parts, strict=True):
            if expected.startswith(":"):
                params[expected[1:]] = actual
            elif expected != actual:
                return None
        return params


def _split(path: str) -> tuple[str, ...]:
    return tuple(part for part in path.split("/") if part)


ROUTES: tuple[Route, ...] = (
    # Public
    Route(Pages.HOME, "home"),
    Route(Pages.PROVIDERS, "providers"),
    Route(Pages.LOGIN, "login"),
    Route(Pages.REGISTER, "register"),
    Route(Pages.FORGOT_PASSWORD, "forgot_password"),
    Route(Pages.VERIFY_EMAIL, "verify_email"),
    Route(Pages.CONSENT, "consent"),
    Route(Pages.TERMS, "terms"),
    Route(Pages.PRIVACY, "privacy"),
    Route(Pages.COOKIES, "cookie_policy"),
    Route(Pages.ABOUT, "about"),
    Route(Pages.BECOME_PROVIDER, "become_provider"),
    # Signed-in only
    Route(Pages.BOOKING, "booking", protected=True),
    Route(Pages.DASHBOARD, "dashboard", protected=True),
    Route(Pages.PATIENT_DASHBOARD, "patient_dashboard", protected=True),
    Route(Pages.PROVIDER_DASHBOARD, "provider_dashboard", protected=True),
    Route(Pages.PROVIDER_SETUP, "provider_setup", protected=True),
    Route(
        Pages.ADMIN_CONSOLE,
        "admin_console",
        protected=True,
        roles=frozenset({UserRole.ADMIN}),
    ),
    Route(Pages.MESSAGES, "messages", protected=True),
    Route(Pages.NOTIFICATIONS, "notifications", protected=True),
    Route(Pages.APPOINTMENTS, "appointments", protected=True),
    Route(Pages.PROFILE, "profile", protected=True),
    Route(Pages.SETTINGS, "settings", protected=True),
    # Parameterized
    Route(Pages.PROVIDER_PROFILE, "provider_profile"),
)

NOT_FOUND = Route("/404", "not_found")


def match_route(path: str) -> tuple[Route, dict[str, str]]:
    """First route matching `path` (query string excluded), or NOT_FOUND."""
    for route in ROUTES:
        params = route.match(path)
        if params is not None:
            return route, params
    return NOT_FOUND, {}
