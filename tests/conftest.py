"""
Shared fixtures for the workout tracker tests.

Strategy:
- The test FastAPI app is built without the lifespan handler (no connection to the
  configured database, no catalog seeding).
- Integration tests run against a temporary SQLite file per test, with foreign
  keys enabled, so ON DELETE CASCADE and the exercise_id foreign key behave as
  in production. get_db and get_session_factory are overridden to use it.
- Unit tests of the service layer use an AsyncMock session (mock_db).
"""

import pytest
from unittest.mock import AsyncMock, MagicMock
from httpx import AsyncClient, ASGITransport
from fastapi import FastAPI
from sqlalchemy import select, func
from typing import AsyncGenerator, List

from app.main import create_app
from app.core.db import build_engine, build_session_factory, get_db, get_session_factory
from app.core.database import init_database
from app.models.exercise import Exercise


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def create_test_app() -> FastAPI:
    """Test FastAPI app without the lifespan handler."""
    return create_app(run_startup=False)


async def count_rows(session_factory, model, **filters) -> int:
    async with session_factory() as session:
        query = select(func.count()).select_from(model)
        for column, value in filters.items():
            query = query.where(getattr(model, column) == value)
        result = await session.execute(query)
        return result.scalar_one()


def workout_payload(exercise_ids: List[int], name: str = "Leg day", **extra) -> dict:
    payload = {
        "name": name,
        "exercises": [{"exercise_id": exercise_id} for exercise_id in exercise_ids],
    }
    payload.update(extra)
    return payload


# ---------------------------------------------------------------------------
# Database
# ---------------------------------------------------------------------------

@pytest.fixture
async def db_engine(tmp_path):
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'workouts_test.db'}")
    await init_database(engine, reset=False)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return build_session_factory(db_engine)


@pytest.fixture
async def catalog(session_factory) -> List[Exercise]:
    """Three catalog exercises: Squat (Legs), Bench Press (Chest), Pull-up (Back)."""
    exercises = [
        Exercise(name="Squat", category="Legs", description="Barbell back squat",
                 muscle_groups=["quadriceps", "glutes"], equipment="Barbell"),
        Exercise(name="Bench Press", category="Chest", description="Flat barbell press",
                 muscle_groups=["chest", "triceps"], equipment="Barbell"),
        Exercise(name="Pull-up", category="Back", description=None,
                 muscle_groups=["lats"], equipment=None),
    ]
    async with session_factory() as session:
        session.add_all(exercises)
        await session.commit()
    return exercises


@pytest.fixture
def mock_db() -> AsyncMock:
    """
    Mocked DB session for service unit tests.
    execute() returns a MagicMock with preset result methods.
    """
    session = AsyncMock()
    session.add = MagicMock()
    session.add_all = MagicMock()
    default_result = MagicMock()
    default_result.scalar_one_or_none.return_value = None
    default_result.scalars.return_value.all.return_value = []
    session.execute.return_value = default_result
    return session


# ---------------------------------------------------------------------------
# HTTP clients
# ---------------------------------------------------------------------------

@pytest.fixture
def test_app(session_factory) -> FastAPI:
    app = create_test_app()

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_session_factory] = lambda: session_factory
    return app


@pytest.fixture
async def client(test_app) -> AsyncGenerator[AsyncClient, None]:
    async with AsyncClient(
        transport=ASGITransport(app=test_app),
        base_url="http://test",
    ) as ac:
        yield ac
