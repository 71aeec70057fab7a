"""Session and view access control."""

from .access import ADMIN_ONLY_VIEWS, HOME_VIEW, KNOWN_VIEWS, LOGIN_VIEW, PROTECTED_VIEWS, normalize_view, resolve_view
from .exceptions import NoPendingVerificationError
from .models import Session, SessionState, ViewResolution
from .service import AuthService

__all__ = [
    "ADMIN_ONLY_VIEWS",
    "AuthService",
    "HOME_VIEW",
    "KNOWN_VIEWS",
    "LOGIN_VIEW",
    "NoPendingVerificationError",
    "PROTECTED_VIEWS",
    "Session",
    "SessionState",
    "ViewResolution",
    "normalize_view",
    "resolve_view",
]
