"""
Tests for saved plans: service and HTTP endpoints.
"""
import pytest
from fastapi.testclient import TestClient

from fittrack.api.deps import get_document_store
from fittrack.core.exceptions import StorageUnavailableError
from fittrack.main import app
from fittrack.services.documents import PLANS
from fittrack.services.plans import PlanService

from conftest import FakeDocumentStore


def seed_plans(store, user_id="user-1"):
    for month in (1, 3, 2):
        store.insert(PLANS, {
            "userId": user_id,
            "title": f"Plan {month}",
            "content": {"weeks": month},
            "createdAt": f"2024-{month:02d}-01T00:00:00Z",
        })


# =============================================================================
# PlanService
# =============================================================================

async def test_save_plan(store):
    plan_id = await PlanService(store).save_plan("user-1", {"content": {"days": []}})

    stored = store.collections[PLANS][plan_id]
    assert stored["userId"] == "user-1"
    assert stored["createdAt"] == store.now


async def test_latest_plan_is_newest(store):
    seed_plans(store)
    seed_plans(store, "user-2")
    service = PlanService(store)

    plan = await service.get_latest_plan("user-1")

    assert plan["title"] == "Plan 3"
    assert plan["userId"] == "user-1"
    assert ("query", PLANS, True, 1) in store.calls


async def test_get_user_plans_defaults_to_current_plan(store):
    seed_plans(store)

    plans = await PlanService(store).get_user_plans("user-1")

    assert [p["title"] for p in plans] == ["Plan 3"]


async def test_get_user_plans_with_limit(store):
    seed_plans(store)

    plans = await PlanService(store).get_user_plans("user-1", limit=5)

    assert [p["title"] for p in plans] == ["Plan 3", "Plan 2", "Plan 1"]


async def test_latest_plan_with_store_missing_index(unordered_store):
    seed_plans(unordered_store)

    plan = await PlanService(unordered_store).get_latest_plan("user-1")

    assert plan["title"] == "Plan 3"
    assert ("query", PLANS, False, None) in unordered_store.calls


async def test_no_plan_returns_none(store):
    assert await PlanService(store).get_latest_plan("user-1") is None


async def test_plan_read_failure_propagates():
    service = PlanService(FakeDocumentStore(fail_on={"query"}))

    with pytest.raises(StorageUnavailableError):
        await service.get_latest_plan("user-1")


# =============================================================================
# API
# =============================================================================

@pytest.fixture
def api_store():
    return FakeDocumentStore()


@pytest.fixture
def client(api_store):
    app.dependency_overrides[get_document_store] = lambda: api_store
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_save_and_read_latest_plan(client):
    assert client.get("/api/users/user-1/plans/latest").status_code == 404

    response = client.post(
        "/api/users/user-1/plans",
        json={"title": "Spring block", "content": {"weeks": [{"week": 1}]}},
    )
    assert response.status_code == 201
    plan_id = response.json()["id"]

    response = client.get("/api/users/user-1/plans/latest")

    assert response.status_code == 200
    body = response.json()
    assert body["id"] == plan_id
    assert body["title"] == "Spring block"
    assert body["content"] == {"weeks": [{"week": 1}]}
    assert body["createdAt"] == 1709294400000


def test_list_plans(client, api_store):
    seed_plans(api_store)

    response = client.get("/api/users/user-1/plans", params={"limit": 2})

    assert response.status_code == 200
    assert [p["title"] for p in response.json()] == ["Plan 3", "Plan 2"]


def test_plan_requires_content(client):
    response = client.post("/api/users/user-1/plans", json={"title": "Empty"})

    assert response.status_code == 422


def test_plan_storage_failure_returns_503():
    store = FakeDocumentStore(fail_on={"query"})
    app.dependency_overrides[get_document_store] = lambda: store
    try:
        response = TestClient(app).get("/api/users/user-1/plans/latest")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 503
