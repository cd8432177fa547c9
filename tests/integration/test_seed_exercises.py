"""
Integration tests for loading the starter catalog.
"""

import pytest

from app.core.initial_exercises import INITIAL_EXERCISES
from app.core.seed_exercises import seed_exercises
from app.models.exercise import Exercise
from tests.conftest import count_rows

pytestmark = pytest.mark.integration


@pytest.mark.asyncio
async def test_seed_fills_empty_catalog(session_factory, client):
    added = await seed_exercises(session_factory)

    assert added == len(INITIAL_EXERCISES)
    assert await count_rows(session_factory, Exercise) == len(INITIAL_EXERCISES)

    names = [exercise["name"] for exercise in (await client.get("/api/get-exercises")).json()]
    assert names == sorted(names)


@pytest.mark.asyncio
async def test_seed_skips_existing_catalog(session_factory, catalog):
    assert await seed_exercises(session_factory) == 0
    assert await count_rows(session_factory, Exercise) == len(catalog)
