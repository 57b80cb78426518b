from __future__ import annotations

import pytest

from src.office_records.office_records.core.enums import AdminRole
from src.office_records.office_records.main import create_app
from tests.fakes import fake_container


@pytest.fixture()
def container():
    c = fake_container()
    c.admins_repo.add(name="Rita Registry", email="rita@example.com", username="registry", password="secret1",
                      role=AdminRole.REGISTRY)
    c.admins_repo.add(name="Ben Boss", email="ben@example.com", username="boss", password="secret2",
                      role=AdminRole.BOSS)
    staff = c.admins_repo.add(name="Esi Staff", email="esi@example.com", username="esi", password="secret3",
                              role=AdminRole.EMPLOYEE)
    c.employees_repo.add("emp-1", "Esi Staff", department_id=1, email="esi@example.com")
    c.roles_repo.profiles[staff.admin_id] = {
        "role_id": 1,
        "role_name": "Staff",
        "department_id": 1,
        "department_name": "Finance",
        "employee_id": "emp-1",
        "position": "Clerk",
    }
    return c


@pytest.fixture()
def client(monkeypatch, container):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(container)
    return app.test_client()


def login(client, username, password):
    return client.post("/api/auth/login", json={"username": username, "password": password})


def test_login_requires_both_fields(client):
    res = login(client, "registry", "")
    assert res.status_code == 400
    assert res.get_json() == {"success": False, "error": "Username and password are required"}


def test_login_rejects_bad_password(client):
    res = login(client, "registry", "wrong-password")
    assert res.status_code == 401
    assert res.get_json()["error"] == "Invalid credentials"


def test_login_sets_session_and_redirect(client):
    assert client.get("/api/auth/check").status_code == 401

    res = login(client, "registry", "secret1")
    body = res.get_json()
    assert res.status_code == 200
    assert body["data"]["redirect"] == "/pages/registry"
    assert body["data"]["user"]["role"] == "Registry"

    check = client.get("/api/auth/check").get_json()
    assert check["data"]["user"]["username"] == "registry"
    assert not any(k.startswith("_") for k in check["data"]["user"])

    client.post("/api/auth/logout")
    assert client.get("/api/auth/check").status_code == 401


def test_employee_login_carries_profile(client):
    body = login(client, "esi", "secret3").get_json()
    assert body["data"]["redirect"] == "/pages/employee-profile"
    assert body["data"]["user"]["employee_id"] == "emp-1"
    assert body["data"]["user"]["department_name"] == "Finance"


def test_legacy_admins_listing(client):
    res = client.get("/apis/admins")
    assert res.status_code == 200
    assert res.get_json()["data"] == [{"id": 1, "name": "Admin 1"}, {"id": 2, "name": "Admin 2"}]


def test_protected_routes_need_login(client):
    res = client.get("/api/files")
    assert res.status_code == 401
    assert res.get_json() == {"success": False, "error": "Not authenticated"}


def test_unknown_route_is_json(client):
    res = client.get("/api/nope")
    assert res.status_code == 404
    assert res.get_json()["success"] is False


def test_registry_files_and_records_flow(client, container):
    login(client, "registry", "secret1")

    res = client.post("/api/files", json={"name": "Correspondence", "type": "Open File"})
    assert res.status_code == 201
    entry = res.get_json()["data"]
    assert entry["fileNumber"].startswith("F-")
    assert entry["referenceNumber"] == "REF-001"

    res = client.post(
        f"/api/files/{entry['id']}/records",
        json={"type": "Incoming", "from": "Ministry", "to": "Boss", "subject": "Budget call"},
    )
    assert res.status_code == 201
    record = res.get_json()["data"]

    res = client.post(
        f"/api/records/{record['id']}/forward",
        json={"forwarded_to": "Boss", "recipient_type": "boss"},
    )
    assert res.status_code == 201
    assert container.records_repo.get_by_id(record["id"]).status.value == "Forwarded"

    hits = client.get("/api/records/search?q=budget").get_json()["data"]
    assert [h["id"] for h in hits] == [record["id"]]

    dashboard = client.get("/api/dashboard/registry").get_json()["data"]
    assert dashboard["files"] == 1
    assert dashboard["recordsByStatus"]["Forwarded"] == 1


def test_file_validation_error_is_json(client):
    login(client, "registry", "secret1")
    res = client.post("/api/files", json={"name": "", "type": "Open File"})
    assert res.status_code == 400
    assert res.get_json() == {"success": False, "error": "File name is required"}


def test_role_checks_return_403(client):
    login(client, "boss", "secret2")
    res = client.post("/api/files", json={"name": "X", "type": "Open File"})
    assert res.status_code == 403
    assert res.get_json()["success"] is False

    assert client.get("/api/dashboard/super-admin").status_code == 403
    assert client.get("/api/dashboard/boss").status_code == 200


def test_employee_leave_round_trip(client, container):
    login(client, "esi", "secret3")
    res = client.post(
        "/api/leaves",
        json={"leave_type": "annual", "start_date": "2025-04-01", "end_date": "2025-04-03", "reason": "Rest"},
    )
    assert res.status_code == 201
    leave = res.get_json()["data"]
    assert leave["days"] == 3
    assert leave["status"] == "pending"
    assert client.put(f"/api/leaves/{leave['leave_id']}/status", json={"status": "approved"}).status_code == 403

    client.post("/api/auth/logout")
    login(client, "boss", "secret2")
    res = client.put(f"/api/leaves/{leave['leave_id']}/status", json={"status": "approved", "comment": "ok"})
    assert res.status_code == 200
    assert len(container.leaves_repo.approved) == 1
    assert container.mailer.sent[-1][0] == "esi@example.com"

    res = client.put(f"/api/leaves/{leave['leave_id']}/status", json={"status": "rejected"})
    assert res.status_code == 400
