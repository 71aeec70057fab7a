"""Session specific exceptions."""

from hr_portal.modules.common.exceptions import NotFoundError


class NoPendingVerificationError(NotFoundError):
    """No pending verification found"""
