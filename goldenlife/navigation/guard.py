"""Route guard.

Decides, from the current session snapshot, what a requested location does:
render, wait for the startup session check, redirect, or show the
access-denied page.
"""

from dataclasses import dataclass, field
from urllib.parse import parse_qs, quote, urlsplit

from goldenlife.auth.schemas import Identity, UserRole
from goldenlife.auth.session import SessionSnapshot, SessionStatus, SessionStore
from goldenlife.navigation.routes import Pages, Route, match_route

REDIRECT_PARAM = "redirect"


@dataclass(frozen=True)
class Render:
    route: Route
    params: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class Pending:
    """The session is still being checked; show the page skeleton."""

    route: Route


@dataclass(frozen=True)
class Redirect:
    location: str


@dataclass(frozen=True)
class Forbidden:
    """Signed in, but the role may not see this page."""

    route: Route


Decision = Render | Pending | Redirect | Forbidden


def resolve_dashboard(identity: Identity | None) -> str:
    """Landing page for a role. Unknown or missing roles land as patients."""
    role = identity.role if identity else None
    if role == UserRole.ADMIN:
        return Pages.ADMIN_CONSOLE
    if role == UserRole.PROVIDER:
        return Pages.PROVIDER_DASHBOARD
    return Pages.PATIENT_DASHBOARD


def login_location(requested: str) -> str:
    """Login page URL that returns to `requested` after sign-in."""
    return f"{Pages.LOGIN}?{REDIRECT_PARAM}={quote(requested, safe='/')}"


def _is_local_path(target: str) -> bool:
    return (
        target.startswith("/")
        and not target.startswith("//")
        and "\\" not in target
        and not urlsplit(target).netloc
    )


def read_redirect_target(location: str) -> str:
    """Post-login destination carried by a login page URL; home when absent.

    Only same-site paths are honoured, anything else lands on home.
    """
    values = parse_qs(urlsplit(location).query).get(REDIRECT_PARAM)
    target = values[0] if values else ""
    return target if _is_local_path(target) else Pages.HOME


class RouteGuard:
    def __init__(self, session: SessionStore):
        self._session = session

    def decide(self, location: str) -> Decision:
        return decide(self._session.snapshot, location)


def decide(snapshot: SessionSnapshot, location: str) -> Decision:
    """Guard decision for `location` under `snapshot`."""
    route, params = match_route(urlsplit(location).path)

    if not route.protected:
        return Render(route, params)

    # No decision until the startup check resolves, so a signed-in user
    # reloading a protected page never flashes the login page.
    if snapshot.status is SessionStatus.CHECKING:
        return Pending(route)

    if snapshot.status is SessionStatus.ANONYMOUS:
        return Redirect(login_location(location))

    if route.pattern == Pages.DASHBOARD:
        return Redirect(resolve_dashboard(snapshot.identity))

    if route.roles is not None and (
        snapshot.identity is None or snapshot.identity.role not in route.roles
    ):
        return Forbidden(route)

    return Render(route, params)
