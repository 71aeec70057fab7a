"""Domain models for accounts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

ROLE_ADMIN = "admin"
ROLE_USER = "user"
ROLES = frozenset({ROLE_ADMIN, ROLE_USER})


@dataclass(slots=True)
class Account:
    first_name: str
    last_name: str
    email: str
    password: str = field(repr=False)
    role: str = ROLE_USER
    verified: bool = False

    def is_admin(self) -> bool:
        return self.role == ROLE_ADMIN


@dataclass(slots=True)
class AccountCreateInput:
    first_name: str
    last_name: str
    email: str
    password: str
    role: str = ROLE_USER
    verified: bool = False


# Sentinel used to differentiate between "not provided" and explicit None.
UNSET = object()


@dataclass(slots=True)
class AccountUpdateInput:
    first_name: Optional[str] | object = UNSET
    last_name: Optional[str] | object = UNSET
    email: Optional[str] | object = UNSET
    password: Optional[str] | object = UNSET
    role: Optional[str] | object = UNSET
    verified: Optional[bool] | object = UNSET
