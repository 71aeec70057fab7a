"""Account domain specific exceptions."""

from hr_portal.modules.common.exceptions import ConflictError, NotFoundError, PermissionDeniedError


class AccountAlreadyExistsError(ConflictError):
    """Email already exists"""


class AccountNotFoundError(NotFoundError):
    """Account not found"""


class SelfDeletionError(PermissionDeniedError):
    """You cannot delete your own account"""
