"""Domain models for departments."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Department:
    id: int
    name: str
    description: str = ""


def default_departments() -> list[Department]:
    return [
        Department(id=1, name="Engineering", description="Software development team"),
        Department(id=2, name="HR", description="Human resources team"),
    ]
