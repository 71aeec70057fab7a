"""Employee domain services and models."""

from .exceptions import EmployeeAlreadyExistsError, EmployeeNotFoundError
from .models import ELIGIBLE_DEPARTMENT_NAMES, Employee, EmployeeInput
from .repository import EmployeeRepository
from .service import EmployeeService

__all__ = [
    "ELIGIBLE_DEPARTMENT_NAMES",
    "Employee",
    "EmployeeAlreadyExistsError",
    "EmployeeInput",
    "EmployeeNotFoundError",
    "EmployeeRepository",
    "EmployeeService",
]
