"""View-facing surface of the portal.

Front ends (pages, HTTP routers, scripts) call these methods and re-render
from the results. Every method runs against the one ``Session`` owned by the
container, and admin-only operations check the session's role first.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Optional, Sequence

from hr_portal.modules.accounts import (
    UNSET,
    Account,
    AccountCreateInput,
    AccountService,
    AccountUpdateInput,
)
from hr_portal.modules.auth import AuthService, Session, ViewResolution
from hr_portal.modules.common.exceptions import AuthenticationRequiredError, PermissionDeniedError
from hr_portal.modules.common.validation import is_blank
from hr_portal.modules.departments import Department, DepartmentService
from hr_portal.modules.employees import Employee, EmployeeInput, EmployeeService
from hr_portal.modules.requests import EmployeeRequest, RequestService
from hr_portal.modules.requests.service import ItemLike

logger = logging.getLogger(__name__)


class PortalService:
    def __init__(
        self,
        auth: AuthService,
        accounts: AccountService,
        departments: DepartmentService,
        employees: EmployeeService,
        requests: RequestService,
    ) -> None:
        self._auth = auth
        self._accounts = accounts
        self._departments = departments
        self._employees = employees
        self._requests = requests

    @property
    def session(self) -> Session:
        return self._auth.session

    @property
    def current_identity(self) -> Account | None:
        return self._auth.session.identity

    # Session

    def navigate(self, view: str | None) -> ViewResolution:
        return self._auth.navigate(view)

    def login(self, email: str, password: str) -> Account:
        return self._auth.login(email, password)

    def logout(self) -> None:
        self._auth.logout()

    def register(self, first_name: str, last_name: str, email: str, password: str) -> Account:
        return self._auth.register(first_name, last_name, email, password)

    def pending_email(self) -> str | None:
        return self._auth.pending_email()

    def verify_pending_email(self) -> Account:
        return self._auth.verify_pending_email()

    # Profile

    def profile(self) -> Account:
        return self._require_identity()

    def update_profile(self, first_name: str, last_name: str, new_password: str | None = None) -> Account:
        identity = self._require_identity()
        return self._accounts.update_profile(identity.email, first_name, last_name, new_password)

    # Accounts

    def list_accounts(self) -> Sequence[Account]:
        self._require_admin()
        return self._accounts.list_accounts()

    def save_account(self, payload: AccountCreateInput, editing_email: str | None = None) -> Account:
        self._require_admin()
        if editing_email is None:
            return self._accounts.create_account(payload)

        is_self = self.current_identity is not None and self.current_identity.email == editing_email
        account = self._accounts.update_account(
            editing_email,
            AccountUpdateInput(
                first_name=payload.first_name,
                last_name=payload.last_name,
                email=payload.email,
                password=UNSET if is_blank(payload.password) else payload.password,
                role=payload.role,
                verified=payload.verified,
            ),
        )
        if is_self:
            self._auth.refresh_token()
        return account

    def reset_password(self, email: str, new_password: str) -> Account:
        self._require_admin()
        return self._accounts.reset_password(email, new_password)

    def delete_account(self, email: str) -> None:
        identity = self._require_admin()
        self._accounts.delete_account(email, acting_email=identity.email)

    # Departments

    def list_departments(self) -> Sequence[Department]:
        self._require_admin()
        return self._departments.list_departments()

    def save_department(
        self,
        name: str,
        description: str = "",
        *,
        department_id: int | None = None,
        editing_id: Any = None,
    ) -> Department:
        self._require_admin()
        if editing_id is None:
            return self._departments.create(name, description, department_id=department_id)
        return self._departments.update(editing_id, name, description)

    def delete_department(self, department_id: Any) -> None:
        self._require_admin()
        self._departments.delete(department_id)

    # Employees

    def list_employees(self) -> Sequence[Employee]:
        self._require_admin()
        return self._employees.list_employees()

    def eligible_departments(self) -> list[Department]:
        self._require_admin()
        return self._employees.eligible_departments()

    def employee_department(self, employee: Employee) -> Optional[Department]:
        return self._employees.department_for(employee)

    def save_employee(self, payload: EmployeeInput, editing_id: Any = None) -> Employee:
        self._require_admin()
        if editing_id is None:
            return self._employees.create(payload)
        return self._employees.update(editing_id, payload)

    def delete_employee(self, employee_id: Any) -> None:
        self._require_admin()
        self._employees.delete(employee_id)

    # Requests

    def submit_request(self, request_type: str, items: Iterable[ItemLike]) -> EmployeeRequest:
        return self._requests.submit(self.current_identity, request_type, items)

    def my_requests(self) -> Sequence[EmployeeRequest]:
        return self._requests.list_for(self._require_identity())

    def _require_identity(self) -> Account:
        identity = self.current_identity
        if identity is None:
            raise AuthenticationRequiredError("Please log in first")
        return identity

    def _require_admin(self) -> Account:
        identity = self._require_identity()
        if not identity.is_admin():
            logger.warning("Non-admin %s attempted an admin operation", identity.email)
            raise PermissionDeniedError("Admin role required")
        return identity
