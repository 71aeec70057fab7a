"""In-memory employee collection backed by the aggregate store."""

from __future__ import annotations

from typing import Sequence

from hr_portal.modules.common.repository import AggregateRepository
from hr_portal.modules.departments.repository import same_id

from .models import Employee, EmployeeId


class EmployeeRepository(AggregateRepository):
    def list_employees(self) -> Sequence[Employee]:
        return list(self.aggregate.employees)

    def get_by_id(self, employee_id: EmployeeId) -> Employee | None:
        for employee in self.aggregate.employees:
            if same_id(employee.id, employee_id):
                return employee
        return None

    def add(self, employee: Employee) -> Employee:
        with self.change() as aggregate:
            aggregate.employees.append(employee)
        return employee

    def remove(self, employee: Employee) -> None:
        with self.change() as aggregate:
            aggregate.employees[:] = [item for item in aggregate.employees if item is not employee]
