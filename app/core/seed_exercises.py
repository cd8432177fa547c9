"""
Script that loads the starter exercise catalog into the database
"""
import asyncio
import logging

from sqlalchemy.ext.asyncio import async_sessionmaker

from app.core.db import AsyncSessionLocal
from app.core.initial_exercises import INITIAL_EXERCISES
from app.models.exercise import Exercise
from app.repositories.exercise_repository import ExerciseRepository

logger = logging.getLogger(__name__)


async def seed_exercises(session_factory: async_sessionmaker = AsyncSessionLocal) -> int:
    """Load the starter catalog if the exercises table is empty. Returns the number of rows added."""
    async with session_factory() as db:
        repo = ExerciseRepository(db)

        existing = await repo.count()
        if existing > 0:
            logger.info("Catalog already holds %d exercises, skipping seed", existing)
            return 0

        logger.info("Loading %d starter exercises", len(INITIAL_EXERCISES))
        await repo.add_all([
            Exercise(
                name=exercise_data["name"],
                category=exercise_data.get("category"),
                description=exercise_data.get("description"),
                muscle_groups=exercise_data.get("muscle_groups", []),
                equipment=exercise_data.get("equipment"),
            )
            for exercise_data in INITIAL_EXERCISES
        ])
        logger.info("Loaded %d exercises", len(INITIAL_EXERCISES))
        return len(INITIAL_EXERCISES)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(seed_exercises())
