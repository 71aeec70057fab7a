"""Employee domain specific exceptions."""

from hr_portal.modules.common.exceptions import ConflictError, NotFoundError


class EmployeeAlreadyExistsError(ConflictError):
    """Employee ID already exists"""


class EmployeeNotFoundError(NotFoundError):
    """Employee not found"""
