"""Account domain services and models."""

from .exceptions import AccountAlreadyExistsError, AccountNotFoundError, SelfDeletionError
from .models import (
    ROLE_ADMIN,
    ROLE_USER,
    ROLES,
    UNSET,
    Account,
    AccountCreateInput,
    AccountUpdateInput,
)
from .repository import AccountRepository
from .service import AccountService

__all__ = [
    "Account",
    "AccountAlreadyExistsError",
    "AccountCreateInput",
    "AccountNotFoundError",
    "AccountRepository",
    "AccountService",
    "AccountUpdateInput",
    "ROLES",
    "ROLE_ADMIN",
    "ROLE_USER",
    "SelfDeletionError",
    "UNSET",
]
