"""
Tests for employee records and their account/department references.
"""

from __future__ import annotations

from datetime import date

import pytest

from hr_portal.modules.common import ConflictError, DanglingReferenceError, StorageError, ValidationError
from hr_portal.modules.employees import (
    EmployeeAlreadyExistsError,
    EmployeeInput,
    EmployeeNotFoundError,
)

from tests.helpers import ADMIN_EMAIL, break_storage


@pytest.fixture
def employees(container):
    container.accounts.register("Jane", "Doe", "jane@x.com", "secret1")
    return container.employees


def _payload(**overrides) -> EmployeeInput:
    values = dict(id="E1", email="jane@x.com", position="Developer", department_id="1", hire_date="2024-03-01")
    values.update(overrides)
    return EmployeeInput(**values)


def _snapshot(employees) -> list[tuple]:
    return [(e.id, e.email, e.position, e.department_id, e.hire_date) for e in employees.list_employees()]


def test_create_employee(employees) -> None:
    employee = employees.create(_payload())

    assert employee.department_id == 1
    assert employee.hire_date == "2024-03-01"
    assert employees.department_for(employee).name == "Engineering"
    assert employees.account_for(employee).email == "jane@x.com"


def test_create_accepts_date_objects_and_blank_hire_date(employees) -> None:
    first = employees.create(_payload(hire_date=date(2023, 1, 9)))
    second = employees.create(_payload(id=2, hire_date=""))

    assert first.hire_date == "2023-01-09"
    assert second.hire_date is None


@pytest.mark.parametrize(
    "overrides, error",
    [
        ({"id": ""}, ValidationError),
        ({"email": ""}, ValidationError),
        ({"position": " "}, ValidationError),
        ({"department_id": None}, ValidationError),
        ({"department_id": ""}, ValidationError),
        ({"hire_date": "03/01/2024"}, ValidationError),
        ({"department_id": 99}, DanglingReferenceError),
        ({"email": "ghost@x.com"}, DanglingReferenceError),
    ],
)
def test_create_validation_leaves_state_unchanged(employees, overrides, error) -> None:
    with pytest.raises(error):
        employees.create(_payload(**overrides))
    assert employees.list_employees() == []


def test_only_engineering_and_hr_are_eligible(employees, container) -> None:
    sales = container.departments.create("Sales")

    with pytest.raises(DanglingReferenceError):
        employees.create(_payload(department_id=sales.id))

    assert [d.name for d in employees.eligible_departments()] == ["Engineering", "HR"]


def test_renamed_department_becomes_ineligible(employees, container) -> None:
    container.departments.update(1, "Platform")

    with pytest.raises(DanglingReferenceError):
        employees.create(_payload(department_id=1))


def test_duplicate_id_rejected_on_create(employees) -> None:
    employees.create(_payload())

    with pytest.raises(EmployeeAlreadyExistsError) as excinfo:
        employees.create(_payload(email=ADMIN_EMAIL))

    assert isinstance(excinfo.value, ConflictError)
    assert len(employees.list_employees()) == 1


def test_update_employee(employees) -> None:
    employees.create(_payload())

    updated = employees.update("E1", _payload(position="Lead", department_id=2, email=ADMIN_EMAIL))

    assert (updated.position, updated.department_id, updated.email) == ("Lead", 2, ADMIN_EMAIL)


def test_update_failure_keeps_previous_values(employees) -> None:
    employees.create(_payload())
    before = _snapshot(employees)

    with pytest.raises(DanglingReferenceError):
        employees.update("E1", _payload(position="Lead", email="ghost@x.com"))

    assert _snapshot(employees) == before


def test_update_does_not_recheck_id_uniqueness(employees) -> None:
    employees.create(_payload())
    employees.create(_payload(id="E2"))

    employees.update("E2", _payload(id="E1", position="Tester"))

    assert [e.id for e in employees.list_employees()] == ["E1", "E1"]


def test_update_and_delete_missing_employee(employees) -> None:
    with pytest.raises(EmployeeNotFoundError):
        employees.update("nope", _payload())
    with pytest.raises(EmployeeNotFoundError):
        employees.delete("nope")


def test_delete_employee(employees) -> None:
    employees.create(_payload(id=5))

    employees.delete("5")

    assert employees.list_employees() == []


def test_references_resolve_lazily_after_deletes(employees, container) -> None:
    employee = employees.create(_payload())

    container.departments.delete(1)
    container.accounts.delete_account("jane@x.com", acting_email=ADMIN_EMAIL)

    assert employees.get("E1") is employee
    assert employees.department_for(employee) is None
    assert employees.account_for(employee) is None


def test_failed_save_restores_employee(container, employees) -> None:
    employees.create(_payload())
    before = _snapshot(employees)
    break_storage(container.engine)

    with pytest.raises(StorageError):
        employees.update("E1", _payload(id="E9", position="Lead", department_id=2))
    with pytest.raises(StorageError):
        employees.delete("E1")

    assert _snapshot(employees) == before
