"""Department domain services and models."""

from .exceptions import DepartmentNotFoundError
from .models import Department, default_departments
from .repository import DepartmentRepository, same_id
from .service import DepartmentService

__all__ = [
    "Department",
    "DepartmentNotFoundError",
    "DepartmentRepository",
    "DepartmentService",
    "default_departments",
    "same_id",
]
