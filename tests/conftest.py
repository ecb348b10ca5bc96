import inspect
import json
from collections.abc import Callable
from typing import Any

import anyio
import httpx
import pytest

from goldenlife.auth.session import SessionStore
from goldenlife.core.http import ApiClient, create_http_client
from goldenlife.core.settings import Settings
from goldenlife.locale.state import LocaleState
from goldenlife.locale.storage import MemoryPreferenceStore
from goldenlife.navigation.navigator import Navigator

API_BASE_URL = "http://api.goldenlife.test"

PROVIDER_USER: dict[str, Any] = {
    "id": "u1",
    "email": "a@b.com",
    "firstName": "Ada",
    "lastName": "Lovelace",
    "role": "provider",
    "avatarUrl": None,
    "isEmailVerified": True,
}


def pytest_configure(config: pytest.Config) -> None:
    # Tests use @pytest.mark.asyncio, but we intentionally rely on anyio.
    config.addinivalue_line(
        "markers",
        "asyncio: run async tests using anyio (project-local hook)",
    )


@pytest.hookimpl(tryfirst=True)
def pytest_pyfunc_call(pyfuncitem: pytest.Function) -> bool | None:
    """Run @pytest.mark.asyncio tests with anyio.

    This avoids adding an external pytest-asyncio dependency.
    """
    if pyfuncitem.get_closest_marker("asyncio") is None:
        return None

    test_func = pyfuncitem.obj
    if not inspect.iscoroutinefunction(test_func):
        return None

    funcargs = {
        name: pyfuncitem.funcargs[name] for name in pyfuncitem._fixtureinfo.argnames
    }

    async def _run_async_test() -> None:
        await test_func(**funcargs)

    anyio.run(_run_async_test)
    return True


Handler = Callable[[httpx.Request], httpx.Response]


class FakeBackend:
    """In-memory stand-in for the marketplace API, served via MockTransport.

    Routes answer with a canned response, a handler, or a transport error.
    Unknown routes answer 404.
    """

    def __init__(self) -> None:
        self._routes: dict[tuple[str, str], Handler] = {}
        self.requests: list[httpx.Request] = []

    def respond(
        self,
        method: str,
        path: str,
        status: int = 200,
        json_body: Any = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            if json_body is None:
                return httpx.Response(status, headers=headers)
            return httpx.Response(status, json=json_body, headers=headers)

        self._routes[(method, path)] = handler

    def fail(self, method: str, path: str) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("network unreachable", request=request)

        self._routes[(method, path)] = handler

    def handle(self, method: str, path: str, handler: Handler) -> None:
        self._routes[(method, path)] = handler

    def _dispatch(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        handler = self._routes.get((request.method, request.url.path))
        if handler is None:
            return httpx.Response(404, json={"message": "Not found"})
        return handler(request)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self._dispatch)

    def calls(self, method: str, path: str) -> list[httpx.Request]:
        return [
            r for r in self.requests if r.method == method and r.url.path == path
        ]

    @staticmethod
    def body(request: httpx.Request) -> Any:
        return json.loads(request.content) if request.content else None


@pytest.fixture(name="backend")
def backend_fixture() -> FakeBackend:
    return FakeBackend()


@pytest.fixture(name="api")
def api_fixture(backend: FakeBackend) -> ApiClient:
    return ApiClient(
        create_http_client(base_url=API_BASE_URL, transport=backend.transport)
    )


@pytest.fixture(name="store")
def store_fixture(api: ApiClient) -> SessionStore:
    return SessionStore(api)


@pytest.fixture(name="preferences")
def preferences_fixture() -> MemoryPreferenceStore:
    return MemoryPreferenceStore()


@pytest.fixture(name="locale")
def locale_fixture(preferences: MemoryPreferenceStore) -> LocaleState:
    return LocaleState(preferences)


@pytest.fixture(name="navigator")
def navigator_fixture(store: SessionStore) -> Navigator:
    return Navigator(store)


@pytest.fixture(name="test_settings")
def test_settings_fixture(tmp_path) -> Settings:
    return Settings(
        ENV_NAME="test",
        API_BASE_URL=API_BASE_URL,
        LOCALE_STORE_PATH=tmp_path / "preferences.json",
        AI_INTEGRATIONS_OPENAI_API_KEY="test-image-key",
        AI_INTEGRATIONS_OPENAI_BASE_URL="https://images.example.com/v1",
    )


@pytest.fixture(name="provider_user")
def provider_user_fixture() -> dict[str, Any]:
    return dict(PROVIDER_USER)
