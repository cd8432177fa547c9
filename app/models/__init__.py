from app.models.exercise import Exercise
from app.models.workout import Workout, WorkoutExercise

__all__ = [
    "Exercise",
    "Workout", "WorkoutExercise",
]
