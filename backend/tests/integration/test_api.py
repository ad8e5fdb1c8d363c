"""End-to-end API tests against an in-memory application state."""

import pytest
from httpx import ASGITransport, AsyncClient

from prms.application.services import ApplicationState
from prms.config import Settings
from prms.infrastructure.database import build_engine
from prms.infrastructure.storage import InMemoryKeyValueStore, SQLAlchemyKeyValueStore
from prms.main import create_app

ADMIN = {"username": "admin", "password": "772012"}
EMPLOYEE = {"username": "employee", "password": "123"}


def _client() -> AsyncClient:
    state = ApplicationState.load_from_persistence(InMemoryKeyValueStore(), Settings(_env_file=None))
    transport = ASGITransport(app=create_app(state))
    return AsyncClient(transport=transport, base_url="http://test")


async def _add_room(client: AsyncClient, number: str) -> str:
    response = await client.post("/api/v1/rooms", json={"room_number": number, "rent": 1500})
    assert response.status_code == 201
    return response.json()["id"]


@pytest.mark.asyncio
async def test_login_rejects_bad_credentials():
    async with _client() as client:
        response = await client.post(
            "/api/v1/auth/login", json={"username": "admin", "password": "wrong"}
        )
        session = await client.get("/api/v1/auth/session")

    assert response.status_code == 401
    assert session.json()["is_authenticated"] is False


@pytest.mark.asyncio
async def test_protected_routes_require_login():
    async with _client() as client:
        rooms = await client.get("/api/v1/rooms")
        stats = await client.get("/api/v1/reports/stats")

    assert rooms.status_code == 401
    assert stats.status_code == 401


@pytest.mark.asyncio
async def test_admin_room_lifecycle_is_logged():
    async with _client() as client:
        login = await client.post("/api/v1/auth/login", json=ADMIN)
        assert login.json()["role"] == "Admin"

        room_id = await _add_room(client, "101")
        updated = await client.put(
            f"/api/v1/rooms/{room_id}",
            json={"room_number": "101", "rent": 1800, "monthly_expenses": 300},
        )
        missing = await client.put("/api/v1/rooms/nope", json={"room_number": "1"})
        notifications = (await client.get("/api/v1/notifications")).json()
        deleted = await client.delete(f"/api/v1/rooms/{room_id}")

    assert updated.status_code == 200
    assert updated.json()["projected_profit"] == 1500
    assert missing.status_code == 404
    assert [n["message"] for n in notifications] == ["Updated Room 101", "Added Room 101"]
    assert all(n["performer"] == "Admin" for n in notifications)
    assert deleted.status_code == 204


@pytest.mark.asyncio
async def test_employee_is_scoped_and_limited():
    async with _client() as client:
        await client.post("/api/v1/auth/login", json=ADMIN)
        own = await _add_room(client, "101")
        other = await _add_room(client, "102")
        created = await client.post(
            "/api/v1/employees",
            json={
                "username": "employee",
                "name": "Eve",
                "permissions": {"rooms": {"view": True, "edit": True}},
                "assigned_room_ids": [own, "deleted-room"],
            },
        )
        assert created.json()["assigned_room_labels"] == ["101", "deleted-room"]

        await client.post("/api/v1/auth/login", json=EMPLOYEE)
        rooms = (await client.get("/api/v1/rooms")).json()
        edit_own = await client.put(f"/api/v1/rooms/{own}", json={"room_number": "101A"})
        edit_other = await client.put(f"/api/v1/rooms/{other}", json={"room_number": "102A"})
        add_room = await client.post("/api/v1/rooms", json={"room_number": "103"})
        add_tenant = await client.post("/api/v1/tenants", json={"name": "Jane", "room": "101"})
        list_employees = await client.get("/api/v1/employees")
        me = await client.get("/api/v1/employees/me")
        performer = (await client.get("/api/v1/notifications")).json()[0]["performer"]

    assert [r["id"] for r in rooms] == [own]
    assert edit_own.status_code == 200
    assert edit_other.status_code == 403
    assert add_room.status_code == 403
    assert add_tenant.status_code == 403
    assert list_employees.status_code == 403
    assert me.json()["username"] == "employee"
    assert performer == "Employee"


@pytest.mark.asyncio
async def test_bulk_tenant_status_logs_once():
    async with _client() as client:
        await client.post("/api/v1/auth/login", json=ADMIN)
        ids = []
        for name in ("A", "B"):
            response = await client.post("/api/v1/tenants", json={"name": name, "room": "101"})
            ids.append(response.json()["id"])

        result = await client.post(
            "/api/v1/tenants/bulk-status", json={"ids": ids + ["ghost"], "status": "Inactive"}
        )
        notifications = (await client.get("/api/v1/notifications")).json()
        found = (await client.get("/api/v1/tenants", params={"search": "a"})).json()

    assert result.json() == {"affected": 2}
    assert notifications[0]["message"] == "Bulk updated 2 tenants to Inactive"
    assert len(notifications) == 3
    assert [t["name"] for t in found] == ["A"]


@pytest.mark.asyncio
async def test_reports_reflect_paid_records():
    async with _client() as client:
        await client.post("/api/v1/auth/login", json=ADMIN)
        await client.post(
            "/api/v1/payments",
            json={"tenant": "Jane", "room": "101", "amount": 1500, "date": "2024-03-15"},
        )
        await client.post(
            "/api/v1/payments",
            json={
                "tenant": "Joe",
                "room": "102",
                "amount": 999,
                "date": "2024-03-16",
                "status": "Pending",
            },
        )
        await client.post(
            "/api/v1/expenses",
            json={
                "property": "Tower",
                "unit": "K6",
                "title": "Plumbing",
                "amount": 300,
                "date": "2024-03-10",
            },
        )

        trend = (await client.get("/api/v1/reports/trend", params={"as_of": "2024-03-31"})).json()
        stats = (await client.get("/api/v1/reports/stats")).json()
        dashboard = (await client.get("/api/v1/reports/dashboard")).json()

    assert trend[-1] == {"label": "Mar", "month": 3, "year": 2024, "income": 1500, "expenses": 300}
    assert stats["total_income"] == 2499
    assert stats["total_expenses"] == 300
    assert len(dashboard["recent_activity"]) == 3


@pytest.mark.asyncio
async def test_session_writes_are_committed_before_response():
    engine = build_engine("sqlite://")
    storage = SQLAlchemyKeyValueStore(engine)
    state = ApplicationState.load_from_persistence(storage, Settings(_env_file=None))
    transport = ASGITransport(app=create_app(state))

    async with AsyncClient(transport=transport, base_url="http://test") as client:
        await client.post("/api/v1/auth/login", json=ADMIN)
        assert storage.get("isAuth") == "true"

        await client.put("/api/v1/auth/theme", json={"dark": True})
        assert storage.get("theme") == "dark"

        await client.post("/api/v1/auth/logout")
        assert storage.get("isAuth") is None

    engine.dispose()
