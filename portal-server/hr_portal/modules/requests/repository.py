"""In-memory request collection backed by the aggregate store."""

from __future__ import annotations

from typing import Sequence

from hr_portal.modules.common.repository import AggregateRepository

from .models import EmployeeRequest


class RequestRepository(AggregateRepository):
    def list_by_email(self, email: str) -> Sequence[EmployeeRequest]:
        return [request for request in self.aggregate.requests if request.employee_email == email]

    def add(self, request: EmployeeRequest) -> EmployeeRequest:
        with self.change() as aggregate:
            aggregate.requests.append(request)
        return request
