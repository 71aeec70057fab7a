"""Domain services for account management."""

from __future__ import annotations

import logging
from typing import Sequence

from hr_portal.modules.common.exceptions import ValidationError
from hr_portal.modules.common.validation import is_blank, require_fields, require_password

from .exceptions import AccountAlreadyExistsError, AccountNotFoundError, SelfDeletionError
from .models import ROLES, ROLE_USER, Account, AccountCreateInput, AccountUpdateInput, UNSET
from .repository import AccountRepository

logger = logging.getLogger(__name__)


class AccountService:
    """Encapsulates core account use cases."""

    def __init__(self, repository: AccountRepository) -> None:
        self._repository = repository

    def get_by_email(self, email: str) -> Account | None:
        return self._repository.get_by_email(email)

    def list_accounts(self) -> Sequence[Account]:
        return self._repository.list_accounts()

    def register(self, first_name: str, last_name: str, email: str, password: str) -> Account:
        require_fields("Please fill in all fields", first_name, last_name, email, password)
        require_password(password)
        if self._repository.email_exists(email):
            raise AccountAlreadyExistsError("Email already registered")

        account = self._repository.add(
            Account(
                first_name=first_name,
                last_name=last_name,
                email=email,
                password=password,
                role=ROLE_USER,
                verified=False,
            )
        )
        logger.info("Registered account %s (pending verification)", email)
        return account

    def verify(self, email: str) -> Account:
        account = self._repository.get_by_email(email)
        if account is None:
            raise AccountNotFoundError("Account not found. Please register again.")
        with self._repository.change():
            account.verified = True
        logger.info("Verified account %s", email)
        return account

    def authenticate(self, email: str, password: str) -> Account | None:
        """Return the verified account holding this email and password, if any."""
        for account in self._repository.list_accounts():
            if account.email == email and account.password == password and account.verified:
                return account
        return None

    def create_account(self, payload: AccountCreateInput) -> Account:
        require_fields(
            "First name, last name, and email are required",
            payload.first_name,
            payload.last_name,
            payload.email,
        )
        if is_blank(payload.password):
            raise ValidationError("Password is required for new accounts")
        require_password(payload.password)
        _require_role(payload.role)
        if self._repository.email_exists(payload.email):
            raise AccountAlreadyExistsError()

        account = self._repository.add(
            Account(
                first_name=payload.first_name,
                last_name=payload.last_name,
                email=payload.email,
                password=payload.password,
                role=payload.role,
                verified=bool(payload.verified),
            )
        )
        logger.info("Created account %s with role %s", account.email, account.role)
        return account

    def update_account(self, email: str, payload: AccountUpdateInput) -> Account:
        current = self._repository.get_by_email(email)
        if current is None:
            raise AccountNotFoundError()

        first_name = _resolve(payload.first_name, current.first_name)
        last_name = _resolve(payload.last_name, current.last_name)
        new_email = _resolve(payload.email, current.email)
        role = _resolve(payload.role, current.role)
        verified = _resolve(payload.verified, current.verified)

        require_fields("First name, last name, and email are required", first_name, last_name, new_email)
        _require_role(role)
        if new_email != current.email and self._repository.email_exists(new_email):
            raise AccountAlreadyExistsError()

        # An empty replacement keeps the stored password.
        password = None
        if payload.password is not UNSET and not is_blank(payload.password):
            password = payload.password
            require_password(password)

        with self._repository.change():
            current.first_name = first_name
            current.last_name = last_name
            current.email = new_email
            current.role = role
            current.verified = bool(verified)
            if password is not None:
                current.password = password
        logger.info("Updated account %s", current.email)
        return current

    def update_profile(
        self,
        email: str,
        first_name: str,
        last_name: str,
        new_password: str | None = None,
    ) -> Account:
        require_fields("First name and last name are required", first_name, last_name)
        return self.update_account(
            email,
            AccountUpdateInput(first_name=first_name, last_name=last_name, password=new_password),
        )

    def reset_password(self, email: str, new_password: str) -> Account:
        account = self._repository.get_by_email(email)
        if account is None:
            raise AccountNotFoundError()
        require_password(new_password)

        with self._repository.change():
            account.password = new_password
        logger.info("Password reset for %s", email)
        return account

    def delete_account(self, email: str, acting_email: str | None) -> None:
        account = self._repository.get_by_email(email)
        if account is None:
            raise AccountNotFoundError()
        if acting_email is not None and account.email == acting_email:
            raise SelfDeletionError()

        self._repository.remove(account)
        logger.info("Deleted account %s", email)


def _resolve(value, fallback):
    return fallback if value is UNSET or value is None else value


def _require_role(role: str) -> None:
    if role not in ROLES:
        raise ValidationError(f"Unknown role: {role}")
