"""In-memory department collection backed by the aggregate store."""

from __future__ import annotations

from typing import Any, Sequence

from hr_portal.modules.common.repository import AggregateRepository

from .models import Department


def same_id(left: Any, right: Any) -> bool:
    """Compare ids loosely so a form value ``"1"`` matches the stored ``1``."""
    return str(left).strip() == str(right).strip()


class DepartmentRepository(AggregateRepository):
    def list_departments(self) -> Sequence[Department]:
        return list(self.aggregate.departments)

    def get_by_id(self, department_id: Any) -> Department | None:
        for department in self.aggregate.departments:
            if same_id(department.id, department_id):
                return department
        return None

    def next_id(self) -> int:
        ids = [department.id for department in self.aggregate.departments if isinstance(department.id, int)]
        return max(ids, default=0) + 1

    def add(self, department: Department) -> Department:
        with self.change() as aggregate:
            aggregate.departments.append(department)
        return department

    def remove(self, department: Department) -> None:
        with self.change() as aggregate:
            aggregate.departments[:] = [item for item in aggregate.departments if item is not department]
