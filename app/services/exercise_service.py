import logging
from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import StorageError
from app.repositories.exercise_repository import ExerciseRepository
from app.schemas.exercise import ExerciseRead

logger = logging.getLogger(__name__)


class ExerciseService:
    def __init__(self, db: AsyncSession):
        self.repo = ExerciseRepository(db)

    async def list_exercises(self) -> List[ExerciseRead]:
        """Full catalog ordered by name."""
        try:
            exercises = await self.repo.list_all()
        except SQLAlchemyError as e:
            logger.error("Error fetching exercises: %s", e)
            raise StorageError("Failed to fetch exercises", str(e)) from e

        logger.info("Fetched %d exercises", len(exercises))
        return [ExerciseRead.model_validate(exercise) for exercise in exercises]
