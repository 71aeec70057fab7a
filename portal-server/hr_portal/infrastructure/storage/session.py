"""SQLAlchemy engine and session management."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from hr_portal.core.config import Settings
from hr_portal.infrastructure.storage.base import Base


def build_engine(settings: Settings) -> Engine:
    url = make_url(settings.database_url)
    engine_kwargs: dict[str, Any] = {
        "echo": settings.storage.echo or settings.debug,
        "future": True,
    }
    if url.get_backend_name() == "sqlite":
        engine_kwargs["connect_args"] = {"check_same_thread": False}
        if url.database in (None, "", ":memory:"):
            # Every session must see the same in-memory database.
            engine_kwargs["poolclass"] = StaticPool
    return create_engine(url, **engine_kwargs)


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, class_=Session, expire_on_commit=False)


@contextmanager
def session_scope(factory: sessionmaker[Session]) -> Iterator[Session]:
    with factory() as session:
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise


def init_storage(engine: Engine) -> None:
    """Create storage tables if they do not exist yet."""
    from hr_portal.infrastructure.storage import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
