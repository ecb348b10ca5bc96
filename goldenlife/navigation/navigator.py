"""Client-side navigator.

Tracks the current location, runs every navigation through the route
guard and follows redirects. It listens to the session store, so a page
waiting on the startup check resolves by itself, and a protected page is
left as soon as the session ends.
"""

import logging

from goldenlife.auth.session import SessionSnapshot, SessionStore
from goldenlife.navigation.guard import Decision, Pending, Redirect, decide
from goldenlife.navigation.routes import Pages

logger = logging.getLogger(__name__)

MAX_REDIRECTS = 5


class RedirectLoopError(RuntimeError):
    """Raised when guard redirects do not settle on a page."""


class Navigator:
    def __init__(self, session: SessionStore, location: str = Pages.HOME):
        self._session = session
        self.history: list[str] = []
        self.location = location
        self.decision: Decision = self._settle(location)
        self._unsubscribe = session.subscribe(self._on_session_change)

    def _settle(self, location: str) -> Decision:
        for _ in range(MAX_REDIRECTS + 1):
            decision = decide(self._session.snapshot, location)
            if not isinstance(decision, Redirect):
                self.location = location
                return decision
            logger.debug("Redirect %s -> %s", location, decision.location)
            location = decision.location
        raise RedirectLoopError(f"Too many redirects ending at {location}")

    def navigate(self, location: str, *, replace: bool = False) -> Decision:
        """Go to `location`; the final location may differ after redirects."""
        if not replace:
            self.history.append(self.location)
        self.decision = self._settle(location)
        return self.decision

    def back(self) -> Decision:
        if not self.history:
            return self.decision
        self.decision = self._settle(self.history.pop())
        return self.decision

    def refresh(self) -> Decision:
        """Re-run the guard for the current location."""
        self.decision = self._settle(self.location)
        return self.decision

    def _on_session_change(self, snapshot: SessionSnapshot) -> None:
        if isinstance(self.decision, Pending) or not snapshot.is_authenticated:
            self.refresh()

    def close(self) -> None:
        self._unsubscribe()
