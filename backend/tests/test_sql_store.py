"""
Tests for the SQLAlchemy-backed document store, run against in-memory SQLite.
"""
from datetime import datetime, timezone

import pytest
import pytest_asyncio
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import fittrack.models  # noqa: F401
from fittrack.core.database import Base
from fittrack.core.exceptions import StorageUnavailableError
from fittrack.models import MealRecord, Report, WorkoutRecord
from fittrack.services.analytics import AnalyticsCalculator
from fittrack.services.documents import (
    ANALYTICS,
    MEALS,
    PROFILES,
    REPORTS,
    WORKOUTS,
    SqlDocumentStore,
    query_recent,
)
from fittrack.services.profiles import ProfileService


def _engine():
    return create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )


@pytest_asyncio.fixture
async def session():
    engine = _engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as db:
        yield db

    await engine.dispose()


@pytest.fixture
def sql_store(session):
    return SqlDocumentStore(session)


async def seed(session, model, user_id, day, month=1, **data):
    session.add(model(
        user_id=user_id,
        created_at=datetime(2024, month, day, 9, 0),
        data=data,
    ))
    await session.commit()


async def test_add_assigns_id_and_created_at(sql_store):
    record_id = await sql_store.add(
        WORKOUTS,
        {"userId": "user-1", "type": "running", "duration": 30, "id": "ignored", "createdAt": "ignored"},
    )

    document = await sql_store.get(WORKOUTS, record_id)

    assert document["id"] == record_id
    assert record_id != "ignored"
    assert document["userId"] == "user-1"
    assert document["type"] == "running"
    assert document["duration"] == 30
    assert isinstance(document["createdAt"], datetime)


async def test_get_missing_returns_none(sql_store):
    assert await sql_store.get(MEALS, "missing") is None
    assert await sql_store.get(ANALYTICS, "missing") is None


async def test_ordered_query_with_limit(session, sql_store):
    for day in (3, 1, 7, 5):
        await seed(session, WorkoutRecord, "user-1", day, type="running")
    await seed(session, WorkoutRecord, "user-2", 9, type="running")

    documents = await sql_store.query(WORKOUTS, "user-1", limit=3)

    assert [doc["createdAt"].day for doc in documents] == [7, 5, 3]
    assert all(doc["userId"] == "user-1" for doc in documents)


async def test_range_query_bounds_are_inclusive(session, sql_store):
    for day in (1, 2, 3, 4):
        await seed(session, MealRecord, "user-1", day, type="lunch")

    documents = await sql_store.query(
        MEALS,
        "user-1",
        ordered=False,
        since=datetime(2024, 1, 2, 9, 0, tzinfo=timezone.utc),
        until=datetime(2024, 1, 3, 9, 0, tzinfo=timezone.utc),
    )

    assert sorted(doc["createdAt"].day for doc in documents) == [2, 3]


async def test_query_filters_on_document_fields(session, sql_store):
    await seed(session, Report, "user-1", 8, type="weekly", stats={})
    await seed(session, Report, "user-1", 9, type="monthly", stats={})

    documents = await sql_store.query(REPORTS, "user-1", filters={"type": "weekly"})

    assert [doc["type"] for doc in documents] == ["weekly"]


async def test_analytics_set_overwrites(sql_store):
    await sql_store.set(ANALYTICS, "user-1", {"userId": "user-1", "workoutStats": {"totalWorkouts": 1}})
    await sql_store.set(ANALYTICS, "user-1", {"userId": "user-1", "nutritionStats": {"totalMeals": 2}})

    document = await sql_store.get(ANALYTICS, "user-1")

    assert document == {"userId": "user-1", "nutritionStats": {"totalMeals": 2}}


async def test_record_set_creates_and_overwrites(sql_store):
    await sql_store.set(MEALS, "meal-1", {"userId": "user-1", "name": "Soup"})
    await sql_store.set(MEALS, "meal-1", {"userId": "user-1", "name": "Salad"})

    document = await sql_store.get(MEALS, "meal-1")

    assert document["name"] == "Salad"
    assert document["id"] == "meal-1"


async def test_unknown_collection_is_rejected(sql_store):
    with pytest.raises(ValueError):
        await sql_store.query("goals", "user-1")


async def test_missing_table_surfaces_as_storage_unavailable():
    engine = _engine()
    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async with session_factory() as db:
        store = SqlDocumentStore(db)
        with pytest.raises(StorageUnavailableError) as exc_info:
            await store.query(WORKOUTS, "user-1")

    assert exc_info.value.operation == "query"
    assert exc_info.value.collection == WORKOUTS
    await engine.dispose()


async def test_calculator_over_sql_store(session, sql_store):
    await seed(session, WorkoutRecord, "user-1", 10, type="running", duration=30, caloriesBurned=300)
    await seed(session, WorkoutRecord, "user-1", 12, month=2, type="yoga", duration=60, caloriesBurned=150)
    await seed(session, MealRecord, "user-1", 11, type="lunch", calories=500, protein=30, carbs=50, fat=20)

    calculator = AnalyticsCalculator(sql_store)
    summary = await calculator.recalculate("user-1")

    assert summary.workout_stats.total_workouts == 2
    assert set(summary.workout_stats.monthly_stats) == {"2024-01", "2024-02"}
    assert summary.nutrition_stats.macros_percentage.protein == 30

    stored = await calculator.get_summary("user-1")
    assert stored.to_document() == summary.to_document()


class FailingOnceSession:
    """Session wrapper whose first statement fails, like an ordered query missing its index."""

    def __init__(self, db):
        self.db = db
        self.failures = 1
        self.rollbacks = 0

    async def execute(self, stmt):
        if self.failures:
            self.failures -= 1
            raise OperationalError("SELECT", {}, Exception("index not ready"))
        return await self.db.execute(stmt)

    async def rollback(self):
        self.rollbacks += 1
        await self.db.rollback()


async def test_failed_query_rolls_back_so_fallback_can_run(session):
    for day in (3, 1, 7):
        await seed(session, WorkoutRecord, "user-1", day, type="running")
    flaky = FailingOnceSession(session)

    documents = await query_recent(SqlDocumentStore(flaky), WORKOUTS, "user-1", 2)

    assert flaky.rollbacks == 1
    assert [doc["createdAt"].day for doc in documents] == [7, 3]


async def test_profile_update_round_trip(sql_store):
    service = ProfileService(sql_store)
    profile_id = await service.create_profile("user-1", {"name": "Ana", "weight": 62})

    await service.update_profile(profile_id, {"weight": 61.5})
    profile = await service.get_profile("user-1")

    assert profile["id"] == profile_id
    assert profile["name"] == "Ana"
    assert profile["weight"] == 61.5
    assert "updatedAt" in profile
    assert isinstance(profile["createdAt"], datetime)
    assert await sql_store.get(PROFILES, profile_id) == profile
