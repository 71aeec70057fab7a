"""Repository protocol for named storage slots."""

from __future__ import annotations

from typing import Protocol


class SlotRepository(Protocol):
    """Abstract key/value slot persistence."""

    def get(self, key: str) -> str | None:
        ...

    def put(self, key: str, value: str) -> None:
        ...

    def delete(self, key: str) -> None:
        ...
