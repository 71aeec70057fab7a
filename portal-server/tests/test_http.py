"""
Tests for the HTTP interface: routing, payload mapping and error translation.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from hr_portal.main import create_app

from tests.helpers import ADMIN_EMAIL, ADMIN_PASSWORD, TODAY, break_storage


@pytest.fixture
def client(container):
    with TestClient(create_app(container=container)) as test_client:
        yield test_client


def _login_admin(client) -> None:
    response = client.post("/api/auth/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
    assert response.status_code == 200


def test_health(client) -> None:
    assert client.get("/health").json()["status"] == "ok"


def test_registration_flow(client) -> None:
    response = client.post(
        "/api/auth/register",
        json={"first_name": "A", "last_name": "B", "email": "a@x.com", "password": "secret1"},
    )
    assert response.status_code == 201
    assert response.json()["verified"] is False
    assert client.get("/api/auth/session").json() == {
        "authenticated": False,
        "account": None,
        "pending_email": "a@x.com",
    }

    failed = client.post("/api/auth/login", json={"email": "a@x.com", "password": "secret1"})
    assert failed.status_code == 401
    assert failed.json()["error"] == "AuthenticationError"

    assert client.post("/api/auth/verify").status_code == 200
    assert client.get("/api/views/login").json()["show_verified_notice"] is True

    logged_in = client.post("/api/auth/login", json={"email": "a@x.com", "password": "secret1"})
    assert logged_in.json()["role"] == "user"
    assert client.get("/api/auth/session").json()["authenticated"] is True

    assert client.post("/api/auth/logout").json()["success"] is True
    assert client.get("/api/auth/session").json()["authenticated"] is False


def test_error_mapping(client) -> None:
    short = client.post(
        "/api/auth/register",
        json={"first_name": "A", "last_name": "B", "email": "a@x.com", "password": "123"},
    )
    assert short.status_code == 422
    assert short.json() == {"detail": "Password must be at least 6 characters", "error": "ValidationError"}

    duplicate = client.post(
        "/api/auth/register",
        json={"first_name": "A", "last_name": "B", "email": ADMIN_EMAIL, "password": "secret1"},
    )
    assert duplicate.status_code == 409

    assert client.post("/api/auth/verify").status_code == 404
    assert client.get("/api/accounts").status_code == 401


def test_views_endpoint(client) -> None:
    assert client.get("/api/views").json()["view"] == "home"
    assert client.get("/api/views/accounts").json()["view"] == "login"

    _login_admin(client)
    assert client.get("/api/views/accounts").json() == {
        "view": "accounts",
        "requested": "accounts",
        "redirected": False,
        "reason": None,
        "show_verified_notice": False,
    }


def test_non_admin_is_forbidden(client, portal) -> None:
    portal.register("A", "B", "a@x.com", "secret1")
    portal.verify_pending_email()
    client.post("/api/auth/login", json={"email": "a@x.com", "password": "secret1"})

    response = client.get("/api/employees")
    assert response.status_code == 403
    assert response.json()["error"] == "PermissionDeniedError"


def test_account_endpoints(client) -> None:
    _login_admin(client)

    created = client.post(
        "/api/accounts",
        json={"first_name": "Jane", "last_name": "Doe", "email": "jane@x.com", "password": "secret1", "verified": True},
    )
    assert created.status_code == 201

    updated = client.put(
        "/api/accounts/jane@x.com",
        json={"first_name": "Janet", "last_name": "Doe", "email": "jane@x.com", "role": "admin", "verified": True},
    )
    assert updated.json()["role"] == "admin"

    assert client.post("/api/accounts/jane@x.com/password", json={"new_password": "xyz"}).status_code == 422
    assert client.post("/api/accounts/jane@x.com/password", json={"new_password": "another1"}).status_code == 200

    assert client.delete(f"/api/accounts/{ADMIN_EMAIL}").status_code == 403
    assert client.delete("/api/accounts/jane@x.com").status_code == 200
    assert [a["email"] for a in client.get("/api/accounts").json()] == [ADMIN_EMAIL]


def test_department_and_employee_endpoints(client) -> None:
    _login_admin(client)

    sales = client.post("/api/departments", json={"name": "Sales", "description": "Revenue"}).json()
    assert sales["id"] == 3
    renamed = client.put("/api/departments/3", json={"name": "Sales EU", "description": ""})
    assert renamed.json()["name"] == "Sales EU"

    rejected = client.post(
        "/api/employees",
        json={"id": "E1", "email": ADMIN_EMAIL, "position": "Boss", "department_id": 3},
    )
    assert rejected.status_code == 422
    assert rejected.json()["error"] == "DanglingReferenceError"

    created = client.post(
        "/api/employees",
        json={"id": "E1", "email": ADMIN_EMAIL, "position": "Boss", "department_id": "2", "hire_date": "2024-05-01"},
    )
    assert created.status_code == 201
    assert created.json()["department_name"] == "HR"

    assert [d["name"] for d in client.get("/api/employees/departments").json()] == ["Engineering", "HR"]

    client.delete("/api/departments/2")
    listed = client.get("/api/employees").json()
    assert listed[0]["department_id"] == 2
    assert listed[0]["department_name"] is None

    assert client.delete("/api/employees/E1").status_code == 200
    assert client.delete("/api/employees/E1").status_code == 404


def test_request_endpoints(client) -> None:
    _login_admin(client)

    created = client.post(
        "/api/requests",
        json={"type": "Supplies", "items": [{"name": "Pen", "qty": 0}, {"name": "", "qty": 3}]},
    )
    assert created.status_code == 201
    assert created.json() == {
        "type": "Supplies",
        "items": [{"name": "Pen", "qty": 1}],
        "status": "Pending",
        "date": TODAY.isoformat(),
        "employee_email": ADMIN_EMAIL,
    }

    assert len(client.get("/api/requests").json()) == 1
    assert client.post("/api/requests", json={"type": "Supplies", "items": []}).status_code == 422


def test_profile_endpoints(client) -> None:
    assert client.get("/api/profile").status_code == 401

    _login_admin(client)
    response = client.put("/api/profile", json={"first_name": "Root", "last_name": "User"})
    assert response.json()["first_name"] == "Root"
    assert client.get("/api/profile").json()["last_name"] == "User"


def test_storage_failure_maps_to_server_error(client, container) -> None:
    break_storage(container.engine)

    response = client.post(
        "/api/auth/register",
        json={"first_name": "A", "last_name": "B", "email": "a@x.com", "password": "secret1"},
    )

    assert response.status_code == 500
    assert response.json() == {"detail": "Could not write storage slot 'ipt_demo_v1'", "error": "StorageError"}
    assert [a.email for a in container.accounts.list_accounts()] == [ADMIN_EMAIL]


def test_error_responses_are_documented(client) -> None:
    operation = client.get("/openapi.json").json()["paths"]["/api/accounts"]["get"]

    for code in ("401", "403", "404", "409", "422", "500"):
        assert operation["responses"][code]["content"]["application/json"]["schema"] == {
            "$ref": "#/components/schemas/ErrorResponse"
        }
