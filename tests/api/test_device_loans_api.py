"""Device loan routes over the in-memory store."""

import pytest

from device_loans.di.container import DIContainer
from device_loans.di.providers import DatabaseProvider
from device_loans.main import create_application

LOAN_BODY = {
    "deviceId": "p1",
    "borrowerId": "b-1001",
    "loanAmount": 250,
    "startDate": "2025-01-01T09:00:00Z",
    "dueDate": "2025-01-15T09:00:00Z",
    "status": "active",
    "createdAt": "2025-01-01T08:00:00Z",
}


@pytest.fixture
def app(configured_settings, fake_connection):
    container = DIContainer(configured_settings)
    container.register_singleton(DatabaseProvider.CLIENT_KEY, fake_connection)
    return create_application(settings=configured_settings, container=container)


@pytest.mark.asyncio
async def test_upsert_then_get(app, make_client):
    async with make_client(app) as client:
        put = await client.put("/loans/loan-1", json=LOAN_BODY)
        got = await client.get("/loans/loan-1")

    assert put.status_code == 200
    assert got.status_code == 200
    data = got.json()["data"]
    assert data["id"] == "loan-1"
    assert data["borrowerId"] == "b-1001"
    assert data["loanAmount"] == 250
    assert data["status"] == "active"
    assert data["durationDays"] == 14


@pytest.mark.asyncio
async def test_upsert_replaces(app, make_client, fake_connection):
    async with make_client(app) as client:
        await client.put("/loans/loan-1", json=LOAN_BODY)
        res = await client.put("/loans/loan-1", json={**LOAN_BODY, "status": "returned"})

    assert res.json()["data"]["status"] == "returned"
    assert len(fake_connection.collections["deviceLoans"].docs) == 1


@pytest.mark.asyncio
async def test_invalid_loan_reports_every_violation(app, make_client, fake_connection):
    body = {**LOAN_BODY, "loanAmount": 0, "status": "lost", "dueDate": "2024-12-01T00:00:00Z"}
    async with make_client(app) as client:
        res = await client.put("/loans/loan-1", json=body)

    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "InvalidDeviceLoan"
    assert error["details"] == [
        "Status must be one of: active, returned, overdue",
        "Loan amount must be between 1 and 10000",
        "Due date must be after start date and both must be valid dates",
    ]
    assert fake_connection.collections["deviceLoans"].docs == []


@pytest.mark.asyncio
async def test_malformed_body_is_400(app, make_client):
    async with make_client(app) as client:
        res = await client.put("/loans/loan-1", json={**LOAN_BODY, "startDate": "not a date"})

    assert res.status_code == 400
    assert res.json()["error"]["code"] == "ValidationError"


@pytest.mark.asyncio
async def test_missing_loan_is_404(app, make_client):
    async with make_client(app) as client:
        res = await client.get("/loans/nope")

    assert res.status_code == 404
    assert res.json()["error"]["code"] == "NotFound"


@pytest.mark.asyncio
async def test_delete_is_idempotent(app, make_client):
    async with make_client(app) as client:
        await client.put("/loans/loan-1", json=LOAN_BODY)
        first = await client.delete("/loans/loan-1")
        second = await client.delete("/loans/loan-1")

    assert first.json()["data"] == {"deleted": True}
    assert second.status_code == 200
    assert second.json()["data"] == {"deleted": False}


@pytest.mark.asyncio
async def test_list_filters_and_sorting(app, make_client):
    async with make_client(app) as client:
        await client.put("/loans/a", json={**LOAN_BODY, "dueDate": "2025-01-20T00:00:00Z"})
        await client.put("/loans/b", json={**LOAN_BODY, "dueDate": "2025-01-10T00:00:00Z",
                                           "borrowerId": "b-2", "deviceId": "p2"})
        await client.put("/loans/c", json={**LOAN_BODY, "status": "returned"})

        everything = await client.get("/loans", params={"sortBy": "dueDate", "order": "desc"})
        active = await client.get("/loans/active")
        overdue = await client.get("/loans/overdue", params={"asOf": "2025-01-12T00:00:00Z"})
        by_borrower = await client.get("/loans/by-borrower/b-2")
        by_device = await client.get("/loans/by-device/p1")
        bad_sort = await client.get("/loans", params={"sortBy": "amount"})

    def ids(res):
        return [loan["id"] for loan in res.json()["data"]]

    assert ids(everything) == ["a", "c", "b"]
    assert everything.json()["count"] == 3
    assert ids(active) == ["a", "b"]
    assert ids(overdue) == ["b"]
    assert ids(by_borrower) == ["b"]
    assert ids(by_device) == ["a", "c"]
    assert bad_sort.status_code == 400


@pytest.mark.asyncio
async def test_unreadable_stored_loan_does_not_fail_listings(app, make_client, fake_connection):
    async with make_client(app) as client:
        await client.put("/loans/good", json=LOAN_BODY)
        fake_connection.collections["deviceLoans"].insert({
            **LOAN_BODY,
            "id": "broken",
            "dueDate": "not-a-date",
        })

        everything = await client.get("/loans")
        by_device = await client.get("/loans/by-device/p1")
        active = await client.get("/loans/active")

    for res in (everything, by_device, active):
        assert res.status_code == 200
        assert [loan["id"] for loan in res.json()["data"]] == ["good"]


@pytest.mark.asyncio
async def test_loans_without_configuration_are_400(unconfigured_settings, make_client):
    app = create_application(settings=unconfigured_settings)
    async with make_client(app) as client:
        res = await client.get("/loans")

    assert res.status_code == 400
    assert res.json()["error"]["code"] == "MissingConfig"
