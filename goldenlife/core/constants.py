"""
App-wide constants for API paths and route configuration.

Single source of truth for the backend endpoints the client core calls and
for the route groups served by the image proxy app.
"""

from dataclasses import dataclass
from typing import Any


class ApiPaths:
    """Backend API endpoints consumed by the client core."""

    ME = "/api/auth/me"
    LOGIN = "/api/auth/login"
    REGISTER = "/api/auth/register"
    VERIFY_EMAIL = "/api/auth/verify-email"
    RESEND_EMAIL_OTP = "/api/auth/resend-email-otp"
    LOGOUT = "/api/auth/logout"
    REFRESH = "/api/auth/refresh"
    PROFILE = "/api/auth/profile"
    FORGOT_PASSWORD = "/api/auth/forgot-password"
    COMPLETE_RESET_PASSWORD = "/api/auth/complete-reset-password"


@dataclass(frozen=True)
class RouteConfig:
    """Configuration for a route group."""

    prefix: str
    tag: str


class Routes:
    """Route configurations for the endpoints served by the proxy app."""

    IMAGES = RouteConfig(prefix="/api", tag="images")
    HEALTH = RouteConfig(prefix="/health", tag="health")


# Common response definitions for reuse across routers
class CommonResponses:
    """Standard HTTP error response definitions for OpenAPI documentation."""

    BAD_REQUEST: dict[int, dict[str, Any]] = {
        400: {"description": "Invalid request data"}
    }
    BAD_GATEWAY: dict[int, dict[str, Any]] = {
        502: {"description": "Upstream provider failed"}
    }
    SERVICE_UNAVAILABLE: dict[int, dict[str, Any]] = {
        503: {"description": "Integration is not configured"}
    }
