from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.core.config import settings
from app.core.db import get_db, get_session_factory
from app.services.exercise_service import ExerciseService
from app.services.workout_service import WorkoutService


def get_exercise_service(db: AsyncSession = Depends(get_db)) -> ExerciseService:
    return ExerciseService(db)


def get_workout_service(
        db: AsyncSession = Depends(get_db),
        session_factory: async_sessionmaker = Depends(get_session_factory),
) -> WorkoutService:
    """Service factory, injected into the endpoints via Depends."""
    return WorkoutService(db, session_factory, recent_limit=settings.RECENT_WORKOUTS_LIMIT)
