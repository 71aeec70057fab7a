"""Domain service for employee records and their references."""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence, Union

from hr_portal.modules.accounts.models import Account
from hr_portal.modules.accounts.repository import AccountRepository
from hr_portal.modules.common.exceptions import DanglingReferenceError, ValidationError
from hr_portal.modules.common.validation import is_blank, require_fields
from hr_portal.modules.departments.models import Department
from hr_portal.modules.departments.repository import DepartmentRepository

from .exceptions import EmployeeAlreadyExistsError, EmployeeNotFoundError
from .models import ELIGIBLE_DEPARTMENT_NAMES, Employee, EmployeeId, EmployeeInput
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeService:
    """Employee CRUD with account and department reference checks."""

    def __init__(
        self,
        repository: EmployeeRepository,
        departments: DepartmentRepository,
        accounts: AccountRepository,
    ) -> None:
        self._repository = repository
        self._departments = departments
        self._accounts = accounts

    def list_employees(self) -> Sequence[Employee]:
        return self._repository.list_employees()

    def get(self, employee_id: EmployeeId) -> Employee | None:
        return self._repository.get_by_id(employee_id)

    def eligible_departments(self) -> list[Department]:
        return [
            department
            for department in self._departments.list_departments()
            if department.name in ELIGIBLE_DEPARTMENT_NAMES
        ]

    def department_for(self, employee: Employee) -> Department | None:
        """Resolve the employee's department, or ``None`` once it is gone or ineligible."""
        department = self._departments.get_by_id(employee.department_id)
        if department is None or department.name not in ELIGIBLE_DEPARTMENT_NAMES:
            return None
        return department

    def account_for(self, employee: Employee) -> Account | None:
        return self._accounts.get_by_email(employee.email)

    def create(self, payload: EmployeeInput) -> Employee:
        department, hire_date = self._validate(payload)
        if self._repository.get_by_id(payload.id) is not None:
            raise EmployeeAlreadyExistsError()

        employee = self._repository.add(
            Employee(
                id=payload.id,
                email=payload.email,
                position=payload.position,
                department_id=department.id,
                hire_date=hire_date,
            )
        )
        logger.info("Added employee %s (%s)", employee.id, employee.email)
        return employee

    def update(self, employee_id: EmployeeId, payload: EmployeeInput) -> Employee:
        """Replace an employee's fields.

        The new id is not checked against other employees.
        """
        employee = self._repository.get_by_id(employee_id)
        if employee is None:
            raise EmployeeNotFoundError()
        department, hire_date = self._validate(payload)

        with self._repository.change():
            employee.id = payload.id
            employee.email = payload.email
            employee.position = payload.position
            employee.department_id = department.id
            employee.hire_date = hire_date
        logger.info("Updated employee %s", employee.id)
        return employee

    def delete(self, employee_id: EmployeeId) -> None:
        employee = self._repository.get_by_id(employee_id)
        if employee is None:
            raise EmployeeNotFoundError()
        self._repository.remove(employee)
        logger.info("Deleted employee %s", employee.id)

    def _validate(self, payload: EmployeeInput) -> tuple[Department, Optional[str]]:
        require_fields("Employee ID, Email, and Position are required", payload.id, payload.email, payload.position)
        if is_blank(payload.department_id):
            raise ValidationError("Please select a department (Engineering or HR)")

        department = self._departments.get_by_id(payload.department_id)
        if department is None or department.name not in ELIGIBLE_DEPARTMENT_NAMES:
            raise DanglingReferenceError("Department must be Engineering or HR")
        if self._accounts.get_by_email(payload.email) is None:
            raise DanglingReferenceError("Email must match an existing account")

        return department, _normalize_hire_date(payload.hire_date)


def _normalize_hire_date(value: Union[date, str, None]) -> Optional[str]:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    if isinstance(value, date):
        return value.isoformat()
    try:
        return date.fromisoformat(value.strip()).isoformat()
    except ValueError as exc:
        raise ValidationError("Hire date must be an ISO date (YYYY-MM-DD)") from exc
