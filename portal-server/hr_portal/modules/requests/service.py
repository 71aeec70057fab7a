"""Domain service for submitting and listing employee requests."""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Callable, Iterable, Mapping, Sequence, Union

from hr_portal.modules.accounts.models import Account
from hr_portal.modules.common.exceptions import AuthenticationRequiredError, ValidationError
from hr_portal.modules.common.validation import require_fields

from .models import EmployeeRequest, RequestItem, RequestItemInput, RequestStatus
from .repository import RequestRepository

logger = logging.getLogger(__name__)

ItemLike = Union[RequestItemInput, Mapping[str, Any]]


def normalize_qty(raw: Any) -> int:
    """Return ``raw`` as a positive integer, falling back to 1."""
    if isinstance(raw, bool):
        return 1
    if isinstance(raw, int):
        qty = raw
    elif isinstance(raw, float):
        qty = int(raw) if raw.is_integer() else 0
    else:
        try:
            qty = int(str(raw).strip())
        except (TypeError, ValueError):
            return 1
    return qty if qty >= 1 else 1


def normalize_items(items: Iterable[ItemLike]) -> list[RequestItem]:
    normalized: list[RequestItem] = []
    for item in items:
        if isinstance(item, Mapping):
            name, qty = item.get("name"), item.get("qty", 1)
        else:
            name, qty = item.name, item.qty
        name = (name or "").strip()
        if name:
            normalized.append(RequestItem(name=name, qty=normalize_qty(qty)))
    return normalized


class RequestService:
    def __init__(
        self,
        repository: RequestRepository,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._repository = repository
        self._today = today

    def submit(self, identity: Account | None, request_type: str, items: Iterable[ItemLike]) -> EmployeeRequest:
        if identity is None:
            raise AuthenticationRequiredError("Please log in to submit a request")
        require_fields("Please select a request type", request_type)
        normalized = normalize_items(items)
        if not normalized:
            raise ValidationError("Please add at least one item with a name")

        request = self._repository.add(
            EmployeeRequest(
                type=request_type,
                items=normalized,
                employee_email=identity.email,
                date=self._today().isoformat(),
                status=RequestStatus.PENDING,
            )
        )
        logger.info("Request %r submitted by %s with %d item(s)", request_type, identity.email, len(normalized))
        return request

    def list_for(self, identity: Account | None) -> Sequence[EmployeeRequest]:
        if identity is None:
            return []
        return self._repository.list_by_email(identity.email)
