"""
Workout service: creating, listing and deleting workouts.

Creation writes the workout and its exercise rows in one transaction: if the
batch insert of the exercise rows fails, the rollback also discards the
workout row, so a created workout always has at least one exercise.
"""
import asyncio
import logging
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.core.config import settings
from app.core.exceptions import ValidationError, NotFoundError, StorageError, PartialReadFailure
from app.models.exercise import Exercise
from app.models.workout import Workout, WorkoutExercise
from app.repositories.workout_repository import WorkoutRepository
from app.schemas.workout import (
    ExerciseSelection,
    WorkoutCreate,
    WorkoutRead,
    WorkoutExerciseRead,
    WorkoutCreatedResponse,
    DisplayExercise,
    WorkoutWithExercises,
)

logger = logging.getLogger(__name__)

UNKNOWN_EXERCISE_NAME = "Unknown Exercise"
UNKNOWN_CATEGORY = "Unknown"


def parse_workout_id(raw_id) -> int:
    """Workout ids arrive as path segments; only positive integers are accepted."""
    value = str(raw_id).strip() if raw_id is not None else ""
    if not (value.isascii() and value.isdigit()) or int(value) <= 0:
        raise ValidationError("Valid workout ID is required")
    return int(value)


def build_workout_exercise(workout_id: int, selection: ExerciseSelection) -> WorkoutExercise:
    # Missing or zero values fall back to the defaults
    return WorkoutExercise(
        workout_id=workout_id,
        exercise_id=selection.exercise_id,
        sets=selection.sets or 1,
        reps=selection.reps or 0,
        weight=selection.weight or 0,
        rest_seconds=selection.rest_seconds or None,
        notes=selection.notes or None,
    )


def to_display_exercise(entry: WorkoutExercise, exercise: Optional[Exercise]) -> DisplayExercise:
    return DisplayExercise(
        exercise_name=(exercise.name if exercise and exercise.name else UNKNOWN_EXERCISE_NAME),
        category=(exercise.category if exercise and exercise.category else UNKNOWN_CATEGORY),
        sets=entry.sets,
        reps=entry.reps,
        weight=entry.weight,
        rest_seconds=entry.rest_seconds,
        notes=entry.notes,
    )


class WorkoutService:
    def __init__(
            self,
            db: AsyncSession,
            session_factory: async_sessionmaker,
            recent_limit: int = settings.RECENT_WORKOUTS_LIMIT,
    ):
        self.db = db
        self.repo = WorkoutRepository(db)
        # Per-workout exercise fetches run concurrently and need their own sessions
        self.session_factory = session_factory
        self.recent_limit = recent_limit

    # ------------------------------------------------------------------
    # Create
    # ------------------------------------------------------------------

    async def create_workout(self, payload: WorkoutCreate) -> WorkoutCreatedResponse:
        name = (payload.name or "").strip()
        if not name:
            raise ValidationError("Workout name is required")
        if not payload.exercises:
            raise ValidationError("At least one exercise is required")

        logger.info("Creating workout %r with %d exercises", name, len(payload.exercises))

        workout = Workout(
            name=name,
            notes=(payload.notes or "").strip() or None,
            date=datetime.now(timezone.utc).date(),
        )
        try:
            workout = await self.repo.add_workout(workout)
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error("Error creating workout: %s", e)
            raise StorageError("Failed to create workout", str(e)) from e

        workout_id = workout.id
        rows = [build_workout_exercise(workout_id, selection) for selection in payload.exercises]
        try:
            rows = await self.repo.add_workout_exercises(rows)
            await self.db.commit()
        except SQLAlchemyError as e:
            # Also discards the workout row flushed above
            await self.db.rollback()
            logger.error("Error adding exercises to workout %s, workout discarded: %s", workout_id, e)
            raise StorageError("Failed to create workout", str(e)) from e

        logger.info("Workout %s created with %d exercises", workout.id, len(rows))

        return WorkoutCreatedResponse(
            **WorkoutRead.model_validate(workout).model_dump(),
            exercises=[WorkoutExerciseRead.model_validate(row) for row in rows],
        )

    # ------------------------------------------------------------------
    # List
    # ------------------------------------------------------------------

    async def list_recent_workouts(self) -> List[WorkoutWithExercises]:
        try:
            workouts = await self.repo.list_recent(self.recent_limit)
        except SQLAlchemyError as e:
            logger.error("Error fetching workouts: %s", e)
            raise StorageError("Failed to fetch workouts", str(e)) from e

        if not workouts:
            return []

        logger.info("Found %d workouts", len(workouts))

        # gather keeps results in the order of the workouts, not completion order
        results = await asyncio.gather(
            *(self._load_exercises(workout.id) for workout in workouts),
            return_exceptions=True,
        )

        listing = []
        for workout, exercises in zip(workouts, results):
            if isinstance(exercises, PartialReadFailure):
                logger.warning("%s: %s", exercises.message, exercises.details)
                exercises = []
            elif isinstance(exercises, BaseException):
                raise exercises
            listing.append(WorkoutWithExercises(
                **WorkoutRead.model_validate(workout).model_dump(),
                exercises=exercises,
            ))
        return listing

    async def _load_exercises(self, workout_id: int) -> List[DisplayExercise]:
        try:
            async with self.session_factory() as session:
                rows = await WorkoutRepository(session).list_exercises_with_catalog(workout_id)
        except Exception as e:
            raise PartialReadFailure(workout_id, e) from e
        return [to_display_exercise(entry, exercise) for entry, exercise in rows]

    # ------------------------------------------------------------------
    # Delete
    # ------------------------------------------------------------------

    async def delete_workout(self, raw_id) -> WorkoutRead:
        workout_id = parse_workout_id(raw_id)
        logger.info("Deleting workout %s", workout_id)

        try:
            workout = await self.repo.get_by_id(workout_id)
            if workout is None:
                raise NotFoundError("Workout not found")
            deleted = WorkoutRead.model_validate(workout)
            await self.repo.delete(workout)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error("Error deleting workout %s: %s", workout_id, e)
            raise StorageError("Failed to delete workout", str(e)) from e

        logger.info("Workout %s deleted", workout_id)
        return deleted

    # ------------------------------------------------------------------
    # Maintenance
    # ------------------------------------------------------------------

    async def purge_empty_workouts(self) -> List[int]:
        """Remove workouts that ended up without any exercise rows."""
        try:
            workout_ids = await self.repo.delete_without_exercises()
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error("Error purging empty workouts: %s", e)
            raise StorageError("Failed to purge empty workouts", str(e)) from e

        if workout_ids:
            logger.warning("Purged %d workouts without exercises: %s", len(workout_ids), workout_ids)
        return workout_ids
