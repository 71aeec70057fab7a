"""Static view table and the gate deciding which view a session may see."""

from __future__ import annotations

from .models import Session, ViewResolution

HOME_VIEW = "home"
LOGIN_VIEW = "login"

KNOWN_VIEWS = frozenset(
    {
        HOME_VIEW,
        LOGIN_VIEW,
        "register",
        "verify-email",
        "profile",
        "accounts",
        "employees",
        "department",
        "requests",
    }
)
PROTECTED_VIEWS = frozenset({"profile", "accounts", "employees", "department", "requests"})
ADMIN_ONLY_VIEWS = frozenset({"accounts", "employees", "department"})


def normalize_view(requested: str | None) -> str:
    """Turn ``"#/login"``, ``"/login"`` or ``""`` into a bare view name."""
    name = (requested or "").strip()
    name = name.lstrip("#").strip("/")
    return name or HOME_VIEW


def resolve_view(requested: str | None, session: Session) -> ViewResolution:
    name = normalize_view(requested)

    if name in PROTECTED_VIEWS and not session.is_authenticated:
        return ViewResolution(view=LOGIN_VIEW, requested=name, redirected=True, reason="login_required")

    if name in ADMIN_ONLY_VIEWS and not session.is_admin:
        return ViewResolution(view=HOME_VIEW, requested=name, redirected=True, reason="admin_required")

    if name not in KNOWN_VIEWS:
        return ViewResolution(view=HOME_VIEW, requested=name, redirected=True, reason="unknown_view")

    return ViewResolution(view=name, requested=name)
