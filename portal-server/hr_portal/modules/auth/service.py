"""Login, logout, registration and verification for the local session."""

from __future__ import annotations

import logging
from dataclasses import replace

from hr_portal.modules.accounts.models import Account
from hr_portal.modules.accounts.service import AccountService
from hr_portal.modules.common.exceptions import AuthenticationError
from hr_portal.modules.common.validation import require_fields
from hr_portal.modules.store.service import PersistentStore

from .access import LOGIN_VIEW, resolve_view
from .exceptions import NoPendingVerificationError
from .models import Session, ViewResolution

logger = logging.getLogger(__name__)


class AuthService:
    """Drives the Anonymous/Authenticated transitions of one ``Session``."""

    def __init__(self, accounts: AccountService, store: PersistentStore, session: Session) -> None:
        self._accounts = accounts
        self._store = store
        self._session = session

    @property
    def session(self) -> Session:
        return self._session

    def restore(self) -> Session:
        token = self._store.read_token()
        account = self._accounts.get_by_email(token) if token else None
        if account is not None:
            self._session.sign_in(account)
            logger.info("Restored session for %s", account.email)
        else:
            self._session.sign_out()
        return self._session

    def login(self, email: str, password: str) -> Account:
        require_fields("Please enter email and password", email, password)
        account = self._accounts.authenticate(email, password)
        if account is None:
            logger.info("Rejected login for %s", email)
            raise AuthenticationError("Invalid email or password, or account not verified")

        self._store.write_token(account.email)
        self._session.sign_in(account)
        logger.info("Login succeeded for %s", account.email)
        return account

    def logout(self) -> None:
        email = self._session.identity.email if self._session.identity else None
        self._store.clear_token()
        self._session.sign_out()
        logger.info("Logged out %s", email)

    def refresh_token(self) -> None:
        """Rewrite the token after the signed-in account's email changed."""
        if self._session.identity is not None:
            self._store.write_token(self._session.identity.email)

    def register(self, first_name: str, last_name: str, email: str, password: str) -> Account:
        account = self._accounts.register(first_name, last_name, email, password)
        self._store.write_pending_email(account.email)
        return account

    def pending_email(self) -> str | None:
        return self._store.read_pending_email()

    def verify_pending_email(self) -> Account:
        email = self._store.read_pending_email()
        if not email:
            raise NoPendingVerificationError()

        account = self._accounts.verify(email)
        self._store.clear_pending_email()
        self._session.just_verified = True
        return account

    def navigate(self, requested: str | None) -> ViewResolution:
        resolution = resolve_view(requested, self._session)
        if resolution.view == LOGIN_VIEW and self._session.just_verified:
            self._session.just_verified = False
            return replace(resolution, show_verified_notice=True)
        return resolution
