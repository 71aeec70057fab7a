"""Employee request services and models."""

from .models import EmployeeRequest, RequestItem, RequestItemInput, RequestStatus
from .repository import RequestRepository
from .service import RequestService, normalize_items, normalize_qty

__all__ = [
    "EmployeeRequest",
    "RequestItem",
    "RequestItemInput",
    "RequestRepository",
    "RequestService",
    "RequestStatus",
    "normalize_items",
    "normalize_qty",
]
