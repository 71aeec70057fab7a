"""
Tests for view gating.
"""

from __future__ import annotations

import pytest

from hr_portal.modules.accounts import Account
from hr_portal.modules.auth import Session, SessionState, normalize_view, resolve_view

ADMIN = Account("Admin", "Admin", "admin@example.com", "Password123!", role="admin", verified=True)
USER = Account("Jane", "Doe", "jane@x.com", "secret1", role="user", verified=True)


@pytest.mark.parametrize(
    "raw, expected",
    [("#/login", "login"), ("/profile", "profile"), ("requests", "requests"), ("", "home"), (None, "home"), ("#/", "home")],
)
def test_normalize_view(raw, expected) -> None:
    assert normalize_view(raw) == expected


@pytest.mark.parametrize("view", ["profile", "accounts", "employees", "department", "requests"])
def test_protected_views_redirect_anonymous_to_login(view) -> None:
    resolution = resolve_view(view, Session())

    assert resolution.view == "login"
    assert resolution.redirected is True
    assert resolution.reason == "login_required"


@pytest.mark.parametrize("view", ["accounts", "employees", "department"])
def test_admin_only_views_redirect_users_home(view) -> None:
    resolution = resolve_view(view, Session(identity=USER))

    assert resolution.view == "home"
    assert resolution.reason == "admin_required"


@pytest.mark.parametrize("view", ["profile", "requests", "home", "login", "register", "verify-email"])
def test_user_may_open_non_admin_views(view) -> None:
    resolution = resolve_view(view, Session(identity=USER))

    assert resolution.view == view
    assert resolution.redirected is False


@pytest.mark.parametrize("view", ["accounts", "employees", "department", "profile", "requests"])
def test_admin_may_open_everything(view) -> None:
    assert resolve_view(f"#/{view}", Session(identity=ADMIN)).view == view


def test_public_views_open_for_anonymous() -> None:
    for view in ("home", "login", "register", "verify-email"):
        assert resolve_view(view, Session()).view == view


def test_unknown_view_falls_back_to_home() -> None:
    resolution = resolve_view("#/nowhere", Session(identity=ADMIN))

    assert resolution.view == "home"
    assert resolution.requested == "nowhere"
    assert resolution.reason == "unknown_view"


def test_session_states() -> None:
    session = Session()
    assert session.state is SessionState.ANONYMOUS
    assert not session.is_admin

    session.sign_in(ADMIN)
    assert session.state is SessionState.AUTHENTICATED
    assert session.is_admin

    session.sign_out()
    assert session.identity is None
