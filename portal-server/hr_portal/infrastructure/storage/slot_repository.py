"""SQLAlchemy implementation of the slot repository."""

from __future__ import annotations

import logging

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from hr_portal.infrastructure.storage.models import StorageSlot
from hr_portal.infrastructure.storage.session import session_scope
from hr_portal.modules.common.exceptions import StorageError
from hr_portal.modules.store.repository import SlotRepository

logger = logging.getLogger(__name__)


class SqlSlotRepository(SlotRepository):
    """Named text slots stored as rows of ``storage_slots``."""

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def get(self, key: str) -> str | None:
        try:
            with session_scope(self._session_factory) as session:
                stmt = select(StorageSlot.value).where(StorageSlot.key == key)
                return session.execute(stmt).scalar_one_or_none()
        except SQLAlchemyError as exc:
            logger.error("Failed to read slot %s: %s", key, exc)
            raise StorageError(f"Could not read storage slot {key!r}") from exc

    def put(self, key: str, value: str) -> None:
        try:
            with session_scope(self._session_factory) as session:
                slot = session.get(StorageSlot, key)
                if slot is None:
                    session.add(StorageSlot(key=key, value=value))
                else:
                    slot.value = value
        except SQLAlchemyError as exc:
            logger.error("Failed to write slot %s: %s", key, exc)
            raise StorageError(f"Could not write storage slot {key!r}") from exc

    def delete(self, key: str) -> None:
        try:
            with session_scope(self._session_factory) as session:
                session.execute(delete(StorageSlot).where(StorageSlot.key == key))
        except SQLAlchemyError as exc:
            logger.error("Failed to clear slot %s: %s", key, exc)
            raise StorageError(f"Could not clear storage slot {key!r}") from exc
