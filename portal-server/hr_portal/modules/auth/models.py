"""Session state for the single local user."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional

from hr_portal.modules.accounts.models import Account


class SessionState(str, enum.Enum):
    ANONYMOUS = "anonymous"
    AUTHENTICATED = "authenticated"


@dataclass(slots=True)
class Session:
    identity: Optional[Account] = None
    # Set by a successful verification, consumed by the next visit to login.
    just_verified: bool = False

    @property
    def state(self) -> SessionState:
        return SessionState.ANONYMOUS if self.identity is None else SessionState.AUTHENTICATED

    @property
    def is_authenticated(self) -> bool:
        return self.identity is not None

    @property
    def is_admin(self) -> bool:
        return self.identity is not None and self.identity.is_admin()

    def sign_in(self, account: Account) -> None:
        self.identity = account

    def sign_out(self) -> None:
        self.identity = None


@dataclass(slots=True, frozen=True)
class ViewResolution:
    view: str
    requested: str
    redirected: bool = False
    reason: Optional[str] = None
    show_verified_notice: bool = False
