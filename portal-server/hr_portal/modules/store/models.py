"""Aggregate store and load outcomes."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional

from hr_portal.modules.accounts.models import Account
from hr_portal.modules.departments.models import Department
from hr_portal.modules.employees.models import Employee
from hr_portal.modules.requests.models import EmployeeRequest


@dataclass(slots=True)
class AggregateStore:
    accounts: list[Account] = field(default_factory=list)
    departments: list[Department] = field(default_factory=list)
    employees: list[Employee] = field(default_factory=list)
    requests: list[EmployeeRequest] = field(default_factory=list)


class LoadStatus(str, enum.Enum):
    EMPTY = "empty"
    LOADED = "loaded"
    CORRUPT = "corrupt"


@dataclass(slots=True)
class LoadResult:
    status: LoadStatus
    store: Optional[AggregateStore] = None
    error: Optional[Exception] = None
