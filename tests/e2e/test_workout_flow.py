"""
E2E scenarios: the catalog browser driving the real API over ASGITransport,
backed by a temporary SQLite database.

1. Load catalog -> filter -> select -> adjust -> submit -> workout listed
2. Failed create (exercise removed from the catalog meanwhile) keeps the
   pending selection and leaves no workout behind
3. Delete from the client removes the workout and its exercise rows
4. Reconciliation job removes workouts without exercises
"""

import pytest
from datetime import date
from httpx import AsyncClient, ASGITransport
from sqlalchemy import delete

from app.client.api_client import WorkoutApiClient
from app.client.catalog_browser import CatalogBrowser, SUBMIT_ERROR_MESSAGE, SUBMIT_SUCCESS_MESSAGE
from app.core.cleanup import purge_empty_workouts
from app.models.exercise import Exercise
from app.models.workout import Workout, WorkoutExercise
from tests.conftest import count_rows

pytestmark = pytest.mark.e2e


@pytest.fixture
async def browser(test_app, catalog):
    http = AsyncClient(transport=ASGITransport(app=test_app), base_url="http://test")
    browser = CatalogBrowser(WorkoutApiClient(http=http))
    await browser.load()
    yield browser
    await browser.api.close()


@pytest.mark.asyncio
async def test_build_and_submit_workout(browser):
    assert [exercise["name"] for exercise in browser.exercises] == ["Bench Press", "Pull-up", "Squat"]

    legs = browser.filter(search_term="", category="Legs")
    assert [exercise["name"] for exercise in legs] == ["Squat"]

    browser.select(legs[0]["id"])
    browser.select(browser.filter(search_term="press")[0]["id"])
    browser.update_field(0, "weight", "100")
    browser.update_field(1, "sets", "5")

    assert await browser.submit("Heavy day", notes="new PR") is True
    assert browser.message == SUBMIT_SUCCESS_MESSAGE
    assert browser.selected_exercises == []

    assert len(browser.recent_workouts) == 1
    workout = browser.recent_workouts[0]
    assert workout["name"] == "Heavy day"
    assert workout["notes"] == "new PR"
    assert [
        (exercise["exercise_name"], exercise["sets"], exercise["reps"], exercise["weight"], exercise["rest_seconds"])
        for exercise in workout["exercises"]
    ] == [
        ("Squat", 3, 10, 100, 60),
        ("Bench Press", 5, 10, 0, 60),
    ]


@pytest.mark.asyncio
async def test_failed_submit_keeps_selection(browser, session_factory):
    squat_id = next(exercise["id"] for exercise in browser.exercises if exercise["name"] == "Squat")
    browser.select(squat_id)

    # The catalog row disappears after the client loaded it
    async with session_factory() as session:
        await session.execute(delete(Exercise).where(Exercise.id == squat_id))
        await session.commit()

    assert await browser.submit("Leg day") is False

    assert browser.message == SUBMIT_ERROR_MESSAGE
    assert [selected["exercise_id"] for selected in browser.selected_exercises] == [squat_id]
    assert await count_rows(session_factory, Workout) == 0


@pytest.mark.asyncio
async def test_delete_workout_from_client(browser, session_factory):
    browser.select(browser.exercises[0]["id"])
    browser.select(browser.exercises[1]["id"])
    await browser.submit("Upper body")
    workout_id = browser.recent_workouts[0]["id"]

    assert await browser.delete_workout(workout_id) is True

    assert browser.recent_workouts == []
    assert await count_rows(session_factory, WorkoutExercise, workout_id=workout_id) == 0
    assert await browser.delete_workout(workout_id) is False


@pytest.mark.asyncio
async def test_cleanup_removes_workouts_without_exercises(browser, session_factory):
    browser.select(browser.exercises[0]["id"])
    await browser.submit("Has exercises")

    # A row written outside the API, without any exercises
    async with session_factory() as session:
        orphan = Workout(name="Orphan", date=date.today())
        session.add(orphan)
        await session.commit()
        orphan_id = orphan.id

    removed = await purge_empty_workouts(session_factory)

    assert removed == [orphan_id]
    await browser.load_recent_workouts()
    assert [workout["name"] for workout in browser.recent_workouts] == ["Has exercises"]
