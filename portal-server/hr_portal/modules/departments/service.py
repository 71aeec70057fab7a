"""Domain service for department CRUD."""

from __future__ import annotations

import logging
from typing import Any, Sequence

from hr_portal.modules.common.exceptions import ValidationError
from hr_portal.modules.common.validation import require_fields

from .exceptions import DepartmentNotFoundError
from .models import Department
from .repository import DepartmentRepository

logger = logging.getLogger(__name__)


class DepartmentService:
    def __init__(self, repository: DepartmentRepository) -> None:
        self._repository = repository

    def list_departments(self) -> Sequence[Department]:
        return self._repository.list_departments()

    def get(self, department_id: Any) -> Department | None:
        return self._repository.get_by_id(department_id)

    def create(self, name: str, description: str = "", department_id: int | None = None) -> Department:
        """Add a department.

        An operator-supplied ``department_id`` is stored as given, even when
        another department already uses it. Without one the next free integer
        is assigned.
        """
        require_fields("Department name is required", name)
        if department_id is None:
            department_id = self._repository.next_id()
        elif not isinstance(department_id, int) or isinstance(department_id, bool):
            raise ValidationError("Department id must be an integer")

        department = self._repository.add(
            Department(id=department_id, name=name, description=description or "")
        )
        logger.info("Created department %s (%s)", department.name, department.id)
        return department

    def update(self, department_id: Any, name: str, description: str = "") -> Department:
        department = self._repository.get_by_id(department_id)
        if department is None:
            raise DepartmentNotFoundError()
        require_fields("Department name is required", name)

        with self._repository.change():
            department.name = name
            department.description = description or ""
        logger.info("Updated department %s", department.id)
        return department

    def delete(self, department_id: Any) -> None:
        department = self._repository.get_by_id(department_id)
        if department is None:
            raise DepartmentNotFoundError()

        # Employees keep their departmentId; it resolves to nothing from now on.
        self._repository.remove(department)
        logger.info("Deleted department %s (%s)", department.name, department.id)
