"""Slot storage backed by SQLAlchemy (engine, sessions, tables)."""

from .base import Base
from .session import build_engine, build_session_factory, init_storage, session_scope
from .slot_repository import SqlSlotRepository

__all__ = [
    "Base",
    "SqlSlotRepository",
    "build_engine",
    "build_session_factory",
    "init_storage",
    "session_scope",
]
