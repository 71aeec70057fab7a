"""SQLAlchemy ORM models."""
from sqlalchemy import Column, DateTime, String, Text
from sqlalchemy.sql import func

from hr_portal.infrastructure.storage.base import Base


class StorageSlot(Base):
    """One named value, the local equivalent of a browser storage key."""

    __tablename__ = "storage_slots"

    key = Column(String(100), primary_key=True)
    value = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())
