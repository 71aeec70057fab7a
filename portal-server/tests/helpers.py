"""Shared constants and setup steps for the portal tests."""
from datetime import date

from hr_portal.core.config import Settings, StorageSettings
from hr_portal.infrastructure.storage import init_storage
from hr_portal.infrastructure.storage.models import StorageSlot

TODAY = date(2026, 10, 18)
ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "Password123!"


def make_settings(url: str, **storage) -> Settings:
    return Settings(environment="test", storage=StorageSettings(url=url, **storage))


def register_verified(portal, email="a@x.com", password="secret1", first="A", last="B"):
    """Register and verify an account through the portal surface."""
    portal.register(first, last, email, password)
    return portal.verify_pending_email()


def break_storage(engine) -> None:
    """Drop the slot table so every read and write fails."""
    StorageSlot.__table__.drop(engine)


def repair_storage(engine) -> None:
    """Recreate an empty slot table."""
    init_storage(engine)
