"""Repository abstractions for domain services."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import fields
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from hr_portal.modules.store.models import AggregateStore


class AggregateWriter(Protocol):
    def save(self, store: "AggregateStore") -> None:
        ...


class AggregateRepository:
    """Base repository exposing the loaded aggregate and its writer."""

    def __init__(self, writer: AggregateWriter, aggregate: "AggregateStore") -> None:
        self._writer = writer
        self._aggregate = aggregate

    @property
    def aggregate(self) -> "AggregateStore":
        return self._aggregate

    def flush(self) -> None:
        self._writer.save(self._aggregate)

    @contextmanager
    def change(self) -> Iterator["AggregateStore"]:
        """Mutate the aggregate and save it as one step.

        If the block or the save raises, the collections and every record in
        them are put back the way they were, so memory never runs ahead of
        storage. Records keep their identity, which matters for the session.
        """
        snapshot = _snapshot(self._aggregate)
        try:
            yield self._aggregate
            self.flush()
        except Exception:
            _restore(self._aggregate, snapshot)
            raise


def _record_state(record: Any) -> dict[str, Any]:
    return {item.name: getattr(record, item.name) for item in fields(record)}


def _snapshot(aggregate: "AggregateStore") -> dict[str, list[tuple[Any, dict[str, Any]]]]:
    return {
        collection.name: [(record, _record_state(record)) for record in getattr(aggregate, collection.name)]
        for collection in fields(aggregate)
    }


def _restore(aggregate: "AggregateStore", snapshot: dict[str, list[tuple[Any, dict[str, Any]]]]) -> None:
    for name, entries in snapshot.items():
        for record, state in entries:
            for attr, value in state.items():
                setattr(record, attr, value)
        getattr(aggregate, name)[:] = [record for record, _ in entries]
