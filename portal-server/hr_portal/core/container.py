"""Simple dependency container for wiring core services."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional

from sqlalchemy.engine import Engine

from hr_portal.core.config import Settings, get_settings
from hr_portal.infrastructure.storage import (
    SqlSlotRepository,
    build_engine,
    build_session_factory,
    init_storage,
)
from hr_portal.modules.accounts import AccountRepository, AccountService
from hr_portal.modules.auth import AuthService, Session
from hr_portal.modules.departments import DepartmentRepository, DepartmentService
from hr_portal.modules.employees import EmployeeRepository, EmployeeService
from hr_portal.modules.requests import RequestRepository, RequestService
from hr_portal.modules.store import AggregateStore, PersistentStore
from hr_portal.services import PortalService


@dataclass(slots=True)
class ApplicationContainer:
    settings: Settings
    engine: Engine
    store: PersistentStore
    aggregate: AggregateStore
    session: Session
    accounts: AccountService
    departments: DepartmentService
    employees: EmployeeService
    requests: RequestService
    auth: AuthService
    portal: PortalService

    def shutdown(self) -> None:
        self.engine.dispose()


def build_container(
    settings: Optional[Settings] = None,
    today: Callable[[], date] = date.today,
) -> ApplicationContainer:
    """Load the store, build every service around it and restore the session."""
    settings = settings or get_settings()

    engine = build_engine(settings)
    init_storage(engine)
    store = PersistentStore(
        SqlSlotRepository(build_session_factory(engine)),
        settings.storage,
        settings.admin,
    )
    aggregate = store.load()

    account_repository = AccountRepository(store, aggregate)
    department_repository = DepartmentRepository(store, aggregate)

    accounts = AccountService(account_repository)
    departments = DepartmentService(department_repository)
    employees = EmployeeService(
        EmployeeRepository(store, aggregate),
        department_repository,
        account_repository,
    )
    requests = RequestService(RequestRepository(store, aggregate), today=today)

    session = Session()
    auth = AuthService(accounts, store, session)
    auth.restore()

    return ApplicationContainer(
        settings=settings,
        engine=engine,
        store=store,
        aggregate=aggregate,
        session=session,
        accounts=accounts,
        departments=departments,
        employees=employees,
        requests=requests,
        auth=auth,
        portal=PortalService(auth, accounts, departments, employees, requests),
    )


__all__ = ["ApplicationContainer", "build_container"]
