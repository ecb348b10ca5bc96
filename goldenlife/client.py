"""Client bootstrap.

Wires the process-wide pieces together: one API client, one session store,
one locale state and one navigator. start() runs the locale detector and
then the single startup session check; close() releases the HTTP client.

    async with GoldenLifeClient() as client:
        client.navigator.navigate("/appointments")
"""

import logging
from collections.abc import Mapping

import httpx

from goldenlife.auth.session import SessionStore
from goldenlife.core.http import ApiClient, create_http_client
from goldenlife.core.settings import Settings, get_settings
from goldenlife.locale.state import LocaleState
from goldenlife.locale.storage import JsonFilePreferenceStore, PreferenceStore
from goldenlife.navigation.navigator import Navigator
from goldenlife.navigation.routes import Pages

logger = logging.getLogger(__name__)


class GoldenLifeClient:
    def __init__(
        self,
        settings: Settings | None = None,
        *,
        preferences: PreferenceStore | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        location: str = Pages.HOME,
    ):
        self.settings = settings or get_settings()
        self.api = ApiClient(
            create_http_client(
                base_url=self.settings.api_base_url,
                connect_timeout=self.settings.http_connect_timeout,
                read_timeout=self.settings.http_read_timeout,
                transport=transport,
            )
        )
        self.session = SessionStore(self.api)
        self.locale = LocaleState(
            preferences
            or JsonFilePreferenceStore(self.settings.resolved_locale_store_path),
            fallback=self.settings.default_language,
        )
        self.navigator = Navigator(self.session, location)
        self._started = False

    async def start(self, environ: Mapping[str, str] | None = None) -> None:
        """Detect the language, then check the session once."""
        if self._started:
            return
        self._started = True
        self.locale.initialize(environ)
        await self.session.check_session()
        logger.info("Client started (session %s)", self.session.status)

    async def close(self) -> None:
        self.navigator.close()
        await self.api.aclose()

    async def __aenter__(self) -> "GoldenLifeClient":
        await self.start()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()
