"""Persistent store for the portal aggregate."""

from .documents import AggregateDocument, decode_aggregate, encode_aggregate
from .exceptions import CorruptStoreError
from .models import AggregateStore, LoadResult, LoadStatus
from .repository import SlotRepository
from .service import PersistentStore

__all__ = [
    "AggregateDocument",
    "AggregateStore",
    "CorruptStoreError",
    "LoadResult",
    "LoadStatus",
    "PersistentStore",
    "SlotRepository",
    "decode_aggregate",
    "encode_aggregate",
]
