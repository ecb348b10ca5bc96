"""Tests for health domain router."""

from fastapi.testclient import TestClient

from goldenlife.core.settings import Settings, get_settings
from goldenlife.main import app


def get_health(settings: Settings):
    app.dependency_overrides[get_settings] = lambda: settings
    client = TestClient(app, raise_server_exceptions=False)
    try:
        return client.get("/health")
    finally:
        app.dependency_overrides.clear()


def test_health_endpoint_image_generation_configured(test_settings):
    """Test GET /health reports a configured image integration."""
    response = get_health(test_settings)

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "image_generation": "configured"}


def test_health_endpoint_image_generation_not_configured(test_settings):
    """Test GET /health stays ok when the image integration has no key."""
    settings = test_settings.model_copy(update={"image_api_key": None})

    response = get_health(settings)

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "image_generation": "not_configured"}


def test_unknown_route_uses_unified_error_format():
    client = TestClient(app, raise_server_exceptions=False)

    response = client.get("/nope")

    assert response.status_code == 404
    assert response.json() == {"type": "http_error", "message": "Not Found"}
