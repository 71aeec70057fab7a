"""Domain models for employees."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Union

# Only these department names may be assigned, whatever else exists.
ELIGIBLE_DEPARTMENT_NAMES = frozenset({"Engineering", "HR"})

EmployeeId = Union[str, int]


@dataclass(slots=True)
class Employee:
    id: EmployeeId
    email: str
    position: str
    department_id: Union[int, str]
    hire_date: Optional[str] = None


@dataclass(slots=True)
class EmployeeInput:
    id: EmployeeId
    email: str
    position: str
    department_id: Optional[Union[int, str]]
    hire_date: Optional[Union[date, str]] = None
