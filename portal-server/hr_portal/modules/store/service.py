"""Persistent store: the aggregate record and its auxiliary slots."""

from __future__ import annotations

import logging

from pydantic import ValidationError as PydanticValidationError

from hr_portal.core.config import AdminSettings, StorageSettings
from hr_portal.modules.accounts.models import ROLE_ADMIN, Account
from hr_portal.modules.departments.models import default_departments

from .documents import decode_aggregate, encode_aggregate
from .exceptions import CorruptStoreError
from .models import AggregateStore, LoadResult, LoadStatus
from .repository import SlotRepository

logger = logging.getLogger(__name__)


class PersistentStore:
    """Reads and writes the whole aggregate under one storage key.

    Besides the aggregate, two scalar slots are kept: the session token (the
    logged-in account's email) and the email awaiting verification.
    """

    def __init__(self, slots: SlotRepository, storage: StorageSettings, admin: AdminSettings) -> None:
        self._slots = slots
        self._storage = storage
        self._admin = admin

    def read(self) -> LoadResult:
        raw = self._slots.get(self._storage.storage_key)
        if raw is None:
            return LoadResult(status=LoadStatus.EMPTY)
        try:
            store = decode_aggregate(raw)
        except PydanticValidationError as exc:
            return LoadResult(status=LoadStatus.CORRUPT, error=exc)
        return LoadResult(status=LoadStatus.LOADED, store=store)

    def load(self) -> AggregateStore:
        result = self.read()
        if result.status is LoadStatus.LOADED:
            self.ensure_admin_account(result.store)
            return result.store

        if result.status is LoadStatus.CORRUPT:
            if self._storage.on_corrupt == "abort":
                raise CorruptStoreError(
                    f"Stored data under {self._storage.storage_key!r} could not be parsed"
                ) from result.error
            logger.warning(
                "Discarding unreadable data under %s and reseeding: %s",
                self._storage.storage_key,
                result.error,
            )
        return self.seed()

    def seed(self) -> AggregateStore:
        store = AggregateStore(
            accounts=[self._admin_account()],
            departments=default_departments(),
            employees=[],
            requests=[],
        )
        self.save(store)
        logger.info("Seeded default data under %s", self._storage.storage_key)
        return store

    def ensure_admin_account(self, store: AggregateStore) -> Account:
        """Make the reserved admin email hold the canonical admin account."""
        admin = self._admin_account()
        positions = [
            index for index, account in enumerate(store.accounts) if account.email == admin.email
        ]
        if positions:
            store.accounts[positions[0]] = admin
            for index in reversed(positions[1:]):
                del store.accounts[index]
            logger.info(
                "Admin account %s repaired (%d duplicate entries removed)", admin.email, len(positions) - 1
            )
        else:
            store.accounts.insert(0, admin)
            logger.info("Admin account %s was missing; restored", admin.email)
        self.save(store)
        return admin

    def save(self, store: AggregateStore) -> None:
        self._slots.put(self._storage.storage_key, encode_aggregate(store))

    def read_token(self) -> str | None:
        return self._slots.get(self._storage.token_key)

    def write_token(self, email: str) -> None:
        self._slots.put(self._storage.token_key, email)

    def clear_token(self) -> None:
        self._slots.delete(self._storage.token_key)

    def read_pending_email(self) -> str | None:
        return self._slots.get(self._storage.pending_key)

    def write_pending_email(self, email: str) -> None:
        self._slots.put(self._storage.pending_key, email)

    def clear_pending_email(self) -> None:
        self._slots.delete(self._storage.pending_key)

    def _admin_account(self) -> Account:
        return Account(
            first_name=self._admin.first_name,
            last_name=self._admin.last_name,
            email=self._admin.email,
            password=self._admin.password,
            role=ROLE_ADMIN,
            verified=True,
        )
