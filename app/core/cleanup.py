"""
Reconciliation job: removes workouts that have no exercise rows.

Workout creation is transactional, so such rows only appear when something
else writes to the tables. Run periodically:

    python -m app.core.cleanup
"""
import asyncio
import logging
from typing import List

from sqlalchemy.ext.asyncio import async_sessionmaker

from app.core.db import AsyncSessionLocal
from app.services.workout_service import WorkoutService

logger = logging.getLogger(__name__)


async def purge_empty_workouts(session_factory: async_sessionmaker = AsyncSessionLocal) -> List[int]:
    async with session_factory() as db:
        service = WorkoutService(db, session_factory)
        workout_ids = await service.purge_empty_workouts()

    logger.info("Cleanup finished, %d workouts removed", len(workout_ids))
    return workout_ids


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(purge_empty_workouts())
