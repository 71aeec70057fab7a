"""Pydantic documents mirroring the persisted JSON layout."""

from __future__ import annotations

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from hr_portal.modules.accounts.models import Account
from hr_portal.modules.departments.models import Department
from hr_portal.modules.employees.models import Employee
from hr_portal.modules.requests.models import EmployeeRequest, RequestItem, RequestStatus

from .models import AggregateStore


class _Document(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AccountDocument(_Document):
    first_name: str
    last_name: str
    email: str
    password: str
    role: str
    verified: bool


class DepartmentDocument(_Document):
    id: int
    name: str
    description: str = ""


class EmployeeDocument(_Document):
    id: Union[int, str]
    email: str
    position: str
    department_id: Union[int, str]
    hire_date: Optional[str] = None


class RequestItemDocument(_Document):
    name: str
    qty: int


class RequestDocument(_Document):
    type: str
    items: list[RequestItemDocument]
    status: RequestStatus = RequestStatus.PENDING
    date: str
    employee_email: str


class AggregateDocument(_Document):
    accounts: list[AccountDocument] = []
    departments: list[DepartmentDocument] = []
    employees: list[EmployeeDocument] = []
    requests: list[RequestDocument] = []

    @field_validator("accounts", "departments", "employees", "requests", mode="before")
    @classmethod
    def _missing_collection(cls, value):
        return [] if value is None else value

    def to_domain(self) -> AggregateStore:
        return AggregateStore(
            accounts=[Account(**doc.model_dump()) for doc in self.accounts],
            departments=[Department(**doc.model_dump()) for doc in self.departments],
            employees=[
                Employee(
                    id=doc.id,
                    email=doc.email,
                    position=doc.position,
                    department_id=doc.department_id,
                    hire_date=doc.hire_date or None,
                )
                for doc in self.employees
            ],
            requests=[
                EmployeeRequest(
                    type=doc.type,
                    items=[RequestItem(name=item.name, qty=item.qty) for item in doc.items],
                    employee_email=doc.employee_email,
                    date=doc.date,
                    status=doc.status,
                )
                for doc in self.requests
            ],
        )

    @classmethod
    def from_domain(cls, store: AggregateStore) -> "AggregateDocument":
        return cls(
            accounts=[
                AccountDocument(
                    first_name=account.first_name,
                    last_name=account.last_name,
                    email=account.email,
                    password=account.password,
                    role=account.role,
                    verified=account.verified,
                )
                for account in store.accounts
            ],
            departments=[
                DepartmentDocument(id=dept.id, name=dept.name, description=dept.description)
                for dept in store.departments
            ],
            employees=[
                EmployeeDocument(
                    id=employee.id,
                    email=employee.email,
                    position=employee.position,
                    department_id=employee.department_id,
                    hire_date=employee.hire_date,
                )
                for employee in store.employees
            ],
            requests=[
                RequestDocument(
                    type=request.type,
                    items=[RequestItemDocument(name=item.name, qty=item.qty) for item in request.items],
                    status=request.status,
                    date=request.date,
                    employee_email=request.employee_email,
                )
                for request in store.requests
            ],
        )


def decode_aggregate(raw: str) -> AggregateStore:
    """Parse a persisted slot value; raises ``pydantic.ValidationError`` on bad input."""
    return AggregateDocument.model_validate_json(raw).to_domain()


def encode_aggregate(store: AggregateStore) -> str:
    return AggregateDocument.from_domain(store).model_dump_json(by_alias=True)
