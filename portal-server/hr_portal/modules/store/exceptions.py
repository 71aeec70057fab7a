"""Persistent store specific exceptions."""

from hr_portal.modules.common.exceptions import StorageError


class CorruptStoreError(StorageError):
    """Stored data could not be parsed"""
