"""
Tests for department CRUD.
"""

from __future__ import annotations

import pytest

from hr_portal.modules.common import StorageError, ValidationError
from hr_portal.modules.departments import DepartmentNotFoundError

from tests.helpers import break_storage


@pytest.fixture
def departments(container):
    return container.departments


def test_seeded_departments(departments) -> None:
    rows = [(d.id, d.name, d.description) for d in departments.list_departments()]
    assert rows == [
        (1, "Engineering", "Software development team"),
        (2, "HR", "Human resources team"),
    ]


def test_create_assigns_next_id(departments) -> None:
    department = departments.create("Sales", "Revenue team")

    assert department.id == 3
    assert departments.get(3) is department
    assert departments.get("3") is department


def test_create_keeps_operator_supplied_id_even_when_taken(departments) -> None:
    departments.create("Legal", department_id=1)

    assert [d.id for d in departments.list_departments()] == [1, 2, 1]
    assert departments.get(1).name == "Engineering"


def test_create_requires_name(departments) -> None:
    with pytest.raises(ValidationError):
        departments.create("  ")
    with pytest.raises(ValidationError):
        departments.create("Legal", department_id="x")
    assert len(departments.list_departments()) == 2


def test_update(departments) -> None:
    updated = departments.update(2, "People", "")

    assert (updated.name, updated.description) == ("People", "")
    with pytest.raises(ValidationError):
        departments.update(2, "", "desc")
    with pytest.raises(DepartmentNotFoundError):
        departments.update(99, "Ghost")


def test_delete(departments, container, make_container) -> None:
    departments.delete(1)

    assert [d.name for d in departments.list_departments()] == ["HR"]
    with pytest.raises(DepartmentNotFoundError):
        departments.delete(1)
    assert [d.name for d in make_container().departments.list_departments()] == ["HR"]


def test_failed_save_leaves_departments_unchanged(container, departments) -> None:
    engineering = departments.get(1)
    break_storage(container.engine)

    with pytest.raises(StorageError):
        departments.update(1, "Platform", "Infra")
    with pytest.raises(StorageError):
        departments.delete(2)
    with pytest.raises(StorageError):
        departments.create("Sales")

    assert (engineering.name, engineering.description) == ("Engineering", "Software development team")
    assert [d.name for d in departments.list_departments()] == ["Engineering", "HR"]
