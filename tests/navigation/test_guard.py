"""Tests for goldenlife/navigation/guard.py and routes.py."""

import pytest

from goldenlife.auth.schemas import Identity
from goldenlife.auth.session import SessionSnapshot
from goldenlife.navigation.guard import (
    Forbidden,
    Pending,
    Redirect,
    Render,
    RouteGuard,
    decide,
    login_location,
    read_redirect_target,
    resolve_dashboard,
)
from goldenlife.navigation.routes import NOT_FOUND, Pages, match_route


def signed_in(role: str) -> SessionSnapshot:
    return SessionSnapshot.authenticated(Identity(id="u1", email="a@b.com", role=role))


@pytest.mark.parametrize(
    ("role", "expected"),
    [
        ("admin", Pages.ADMIN_CONSOLE),
        ("provider", Pages.PROVIDER_DASHBOARD),
        ("patient", Pages.PATIENT_DASHBOARD),
        ("nurse", Pages.PATIENT_DASHBOARD),
    ],
)
def test_role_based_landing(role, expected):
    assert resolve_dashboard(Identity(id="u1", email="a@b.com", role=role)) == expected


def test_missing_identity_lands_as_patient():
    assert resolve_dashboard(None) == Pages.PATIENT_DASHBOARD


class TestMatchRoute:
    def test_static_route_beats_parameterized(self):
        route, params = match_route("/provider/dashboard")

        assert route.name == "provider_dashboard"
        assert params == {}

    def test_provider_profile_captures_id(self):
        route, params = match_route("/provider/p42")

        assert route.name == "provider_profile"
        assert params == {"id": "p42"}

    def test_trailing_slash_is_ignored(self):
        assert match_route("/appointments/")[0].name == "appointments"

    def test_unknown_path(self):
        assert match_route("/nowhere") == (NOT_FOUND, {})


class TestDecide:
    def test_public_page_renders_while_checking(self):
        decision = decide(SessionSnapshot.checking(), "/providers")

        assert isinstance(decision, Render)
        assert decision.route.name == "providers"

    def test_protected_page_waits_while_checking(self):
        decision = decide(SessionSnapshot.checking(), "/appointments")

        assert isinstance(decision, Pending)

    def test_anonymous_is_sent_to_login_with_return_path(self):
        decision = decide(SessionSnapshot.anonymous(), "/appointments")

        assert decision == Redirect("/login?redirect=/appointments")

    def test_return_path_keeps_query_string(self):
        decision = decide(SessionSnapshot.anonymous(), "/booking?provider=p1")

        assert decision == Redirect("/login?redirect=/booking%3Fprovider%3Dp1")
        assert read_redirect_target(decision.location) == "/booking?provider=p1"

    def test_signed_in_renders_protected_page(self):
        decision = decide(signed_in("patient"), "/appointments")

        assert isinstance(decision, Render)

    @pytest.mark.parametrize(
        ("role", "expected"),
        [
            ("admin", "/admin"),
            ("provider", "/provider/dashboard"),
            ("patient", "/patient/dashboard"),
        ],
    )
    def test_generic_dashboard_redirects_by_role(self, role, expected):
        assert decide(signed_in(role), "/dashboard") == Redirect(expected)

    def test_admin_console_is_forbidden_for_other_roles(self):
        decision = decide(signed_in("provider"), "/admin")

        assert isinstance(decision, Forbidden)
        assert decision.route.name == "admin_console"

    def test_admin_console_renders_for_admin(self):
        assert isinstance(decide(signed_in("admin"), "/admin"), Render)

    def test_signed_in_user_may_open_login(self):
        assert isinstance(decide(signed_in("patient"), "/login"), Render)

    def test_route_guard_reads_store(self, store):
        assert isinstance(RouteGuard(store).decide("/messages"), Pending)


class TestRedirectTarget:
    @pytest.mark.parametrize(
        ("location", "expected"),
        [
            ("/login?redirect=/appointments", "/appointments"),
            ("/login", "/"),
            ("/login?redirect=", "/"),
            ("/login?redirect=https://evil.example.com", "/"),
            ("/login?redirect=//evil.example.com", "/"),
            ("/login?redirect=appointments", "/"),
        ],
    )
    def test_only_local_paths_are_honoured(self, location, expected):
        assert read_redirect_target(location) == expected

    def test_login_location_round_trip(self):
        assert read_redirect_target(login_location("/provider/p1")) == "/provider/p1"
