"""Domain models for employee requests."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any


class RequestStatus(str, enum.Enum):
    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


@dataclass(slots=True)
class RequestItem:
    name: str
    qty: int = 1


@dataclass(slots=True)
class EmployeeRequest:
    type: str
    items: list[RequestItem]
    employee_email: str
    date: str
    status: RequestStatus = RequestStatus.PENDING


@dataclass(slots=True)
class RequestItemInput:
    name: str
    qty: Any = 1
