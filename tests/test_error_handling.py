"""
Validation and failure-path tests.

- Malformed input is rejected with 422 before anything reaches the store
- Missing ids map to 404 NOT_FOUND
- Store failures surface as 500 and are never masked as success
"""

import pytest
from sqlalchemy.exc import OperationalError
from fastapi.testclient import TestClient
from pydantic import ValidationError

from test_fixtures import client, db_session
from main import app
from services import FoodEntryService
from domain.schemas import FoodEntryCreate, FoodEntryUpdate, DailySummaryQuery


VALID_ENTRY = {"name": "Apple", "calories": 95.5, "consumed_at": "2024-01-15T10:30:00Z"}


# =============================================================================
# SCHEMA VALIDATION
# =============================================================================


@pytest.mark.parametrize(
    "overrides",
    [
        {"name": ""},
        {"calories": 0},
        {"calories": -10},
        {"calories": 0.001},
        {"calories": "95.5"},
        {"calories": None},
        {"consumed_at": "yesterday"},
    ],
)
def test_create_rejects_invalid_input(client: TestClient, overrides):
    r = client.post("/food-entries", json={**VALID_ENTRY, **overrides})

    assert r.status_code == 422
    assert r.json()["error"]["code"] == "VALIDATION_ERROR"
    assert client.get("/food-entries").json() == []


@pytest.mark.parametrize("missing", ["name", "calories", "consumed_at"])
def test_create_requires_all_fields(client: TestClient, missing):
    payload = {k: v for k, v in VALID_ENTRY.items() if k != missing}

    r = client.post("/food-entries", json=payload)

    assert r.status_code == 422


@pytest.mark.parametrize(
    "payload",
    [{"name": ""}, {"calories": 0}, {"calories": -1}, {"name": None}, {"consumed_at": None}],
)
def test_update_rejects_invalid_input(client: TestClient, payload):
    created = client.post("/food-entries", json=VALID_ENTRY).json()

    r = client.patch(f"/food-entries/{created['id']}", json=payload)

    assert r.status_code == 422
    unchanged = client.get(f"/food-entries/{created['id']}").json()
    assert unchanged == created


def test_update_validation_precedes_lookup(client: TestClient):
    r = client.patch("/food-entries/999", json={"calories": -5})
    assert r.status_code == 422


def test_non_integer_id_rejected(client: TestClient):
    assert client.delete("/food-entries/abc").status_code == 422


@pytest.mark.parametrize("value", ["2024-1-15", "15-01-2024", "2024-02-30", "2024-01-15T00:00", ""])
def test_daily_summary_rejects_malformed_date(client: TestClient, value):
    r = client.get("/daily-summary", params={"date": value})

    assert r.status_code == 422
    assert r.json()["error"]["code"] == "VALIDATION_ERROR"


def test_daily_summary_requires_date(client: TestClient):
    assert client.get("/daily-summary").status_code == 422


def test_schema_level_validation():
    with pytest.raises(ValidationError):
        FoodEntryCreate(name="Apple", calories=0, consumed_at="2024-01-15T10:30:00Z")
    with pytest.raises(ValidationError):
        FoodEntryUpdate(calories=None)
    with pytest.raises(ValidationError):
        DailySummaryQuery(date="2023-02-29")

    assert DailySummaryQuery(date="2024-02-29").day.day == 29
    assert FoodEntryUpdate(name="Pear").changes() == {"name": "Pear"}
    assert FoodEntryUpdate().changes() == {}


# =============================================================================
# NOT FOUND
# =============================================================================


def test_get_unknown_entry(client: TestClient):
    r = client.get("/food-entries/12345")

    assert r.status_code == 404
    body = r.json()
    assert body["success"] is False
    assert body["error"]["code"] == "NOT_FOUND"
    assert body["error"]["details"] == {"id": 12345}


def test_delete_unknown_entry(client: TestClient):
    r = client.delete("/food-entries/12345")
    assert r.status_code == 404


# =============================================================================
# STORE FAILURES
# =============================================================================


def test_store_failure_surfaces_as_500(db_session, monkeypatch):
    def broken(db):
        raise OperationalError("SELECT", {}, Exception("connection refused"))

    monkeypatch.setattr(FoodEntryService, "get_food_entries", staticmethod(broken))
    failing_client = TestClient(app, raise_server_exceptions=False)

    r = failing_client.get("/food-entries")

    assert r.status_code == 500
    assert r.json()["error"]["code"] == "INTERNAL_SERVER_ERROR"


# =============================================================================
# CALENDAR EDGES
# =============================================================================


def test_create_rejects_offset_before_earliest_utc_time(client: TestClient):
    r = client.post(
        "/food-entries",
        json={**VALID_ENTRY, "consumed_at": "0001-01-01T00:00:00+01:00"},
    )

    assert r.status_code == 422
    assert r.json()["error"]["code"] == "VALIDATION_ERROR"
    assert client.get("/food-entries").json() == []


def test_update_rejects_offset_before_earliest_utc_time(client: TestClient):
    created = client.post("/food-entries", json=VALID_ENTRY).json()

    r = client.patch(
        f"/food-entries/{created['id']}",
        json={"consumed_at": "0001-01-01T00:30:00+02:00"},
    )

    assert r.status_code == 422


def test_date_range_rejects_offset_before_earliest_utc_time(client: TestClient):
    r = client.get(
        "/food-entries/range",
        params={
            "start_date": "0001-01-01T00:00:00+01:00",
            "end_date": "2024-01-15T00:00:00Z",
        },
    )

    assert r.status_code == 422


def test_daily_summary_last_calendar_day(client: TestClient):
    r = client.get("/daily-summary", params={"date": "9999-12-31"})

    assert r.status_code == 200
    assert r.json() == {"date": "9999-12-31", "total_calories": 0, "entry_count": 0}


def test_daily_summary_first_calendar_day(client: TestClient):
    r = client.get("/daily-summary", params={"date": "0001-01-01"})

    assert r.status_code == 200
    assert r.json()["entry_count"] == 0
