"""Department domain specific exceptions."""

from hr_portal.modules.common.exceptions import NotFoundError


class DepartmentNotFoundError(NotFoundError):
    """Department not found"""
