from typing import List, Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete, exists

from app.models.exercise import Exercise
from app.models.workout import Workout, WorkoutExercise


class WorkoutRepository:
    """Data access for workouts and their exercise rows.

    Writes only flush; committing or rolling back is up to the caller so that
    several writes can share one transaction.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_id(self, workout_id: int) -> Optional[Workout]:
        result = await self.db.execute(select(Workout).where(Workout.id == workout_id))
        return result.scalar_one_or_none()

    async def list_recent(self, limit: int) -> List[Workout]:
        result = await self.db.execute(
            select(Workout)
            .order_by(Workout.created_at.desc(), Workout.id.desc())
            .limit(limit)
        )
        return list(result.scalars().all())

    async def list_exercises_with_catalog(
            self,
            workout_id: int,
    ) -> List[Tuple[WorkoutExercise, Optional[Exercise]]]:
        """Exercise rows of a workout in the order they were added, with their catalog entry."""
        result = await self.db.execute(
            select(WorkoutExercise, Exercise)
            .outerjoin(Exercise, WorkoutExercise.exercise_id == Exercise.id)
            .where(WorkoutExercise.workout_id == workout_id)
            .order_by(WorkoutExercise.created_at, WorkoutExercise.id)
        )
        return [(row[0], row[1]) for row in result.all()]

    async def add_workout(self, workout: Workout) -> Workout:
        self.db.add(workout)
        await self.db.flush()
        await self.db.refresh(workout)
        return workout

    async def add_workout_exercises(self, rows: List[WorkoutExercise]) -> List[WorkoutExercise]:
        self.db.add_all(rows)
        await self.db.flush()
        for row in rows:
            await self.db.refresh(row)
        return rows

    async def delete(self, workout: Workout) -> None:
        # workout_exercises rows go with it through ON DELETE CASCADE
        await self.db.delete(workout)
        await self.db.flush()

    async def delete_without_exercises(self) -> List[int]:
        """Delete workouts that have no exercise rows and return their ids."""
        has_exercises = exists().where(WorkoutExercise.workout_id == Workout.id)
        result = await self.db.execute(select(Workout.id).where(~has_exercises))
        workout_ids = list(result.scalars().all())
        if workout_ids:
            await self.db.execute(delete(Workout).where(Workout.id.in_(workout_ids)))
        return workout_ids
