"""
View model of the exercise catalog page.

Holds the loaded catalog, the current filter result, the exercises picked for
the next workout and the recent workouts. One instance per page; the event
handlers of the UI call its methods one at a time.
"""
import logging
import math
from typing import Any, Dict, List, Optional

import httpx

from app.client.api_client import WorkoutApiClient, ApiError

logger = logging.getLogger(__name__)

LOAD_ERROR_MESSAGE = "Failed to load exercises. Please check your connection."
SUBMIT_VALIDATION_MESSAGE = "Please enter a workout name and add at least one exercise"
SUBMIT_SUCCESS_MESSAGE = "Workout created successfully!"
SUBMIT_ERROR_MESSAGE = "Error creating workout. Please try again."

INT_FIELDS = ("sets", "reps", "rest_seconds")
FLOAT_FIELDS = ("weight",)

DEFAULT_SELECTION = {
    "sets": 3,
    "reps": 10,
    "weight": 0,
    "rest_seconds": 60,
}


def to_int(value: Any) -> int:
    """Integer value of a form input; anything unparsable, "12abc" included, becomes 0."""
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        pass
    try:
        return int(float(value))
    except (TypeError, ValueError, OverflowError):
        return 0


def to_float(value: Any) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0
    return number if math.isfinite(number) else 0


def matches(exercise: Dict, search_term: str, category: str) -> bool:
    term = (search_term or "").lower()
    name = (exercise.get("name") or "").lower()
    description = (exercise.get("description") or "").lower()
    matches_search = term in name or term in description
    matches_category = not category or exercise.get("category") == category
    return matches_search and matches_category


class CatalogBrowser:
    def __init__(self, api: WorkoutApiClient):
        self.api = api
        self.exercises: List[Dict] = []
        self.filtered_exercises: List[Dict] = []
        self.selected_exercises: List[Dict] = []
        self.recent_workouts: List[Dict] = []
        self.search_term = ""
        self.category = ""
        self.error: Optional[str] = None
        self.message: Optional[str] = None

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    async def load(self) -> None:
        await self.load_exercises()
        await self.load_recent_workouts()

    async def load_exercises(self) -> None:
        try:
            self.exercises = await self.api.get_exercises()
        except (ApiError, httpx.HTTPError) as e:
            logger.error("Error loading exercises: %s", e)
            self.error = LOAD_ERROR_MESSAGE
            return
        self.error = None
        self.filter(self.search_term, self.category)

    async def load_recent_workouts(self) -> None:
        try:
            self.recent_workouts = await self.api.get_workouts()
        except (ApiError, httpx.HTTPError) as e:
            # The previous list stays on screen
            logger.error("Error loading workouts: %s", e)

    @property
    def categories(self) -> List[str]:
        return sorted({exercise["category"] for exercise in self.exercises if exercise.get("category")})

    # ------------------------------------------------------------------
    # Filtering
    # ------------------------------------------------------------------

    def filter(self, search_term: str = "", category: str = "") -> List[Dict]:
        self.search_term = search_term
        self.category = category
        self.filtered_exercises = [
            exercise for exercise in self.exercises
            if matches(exercise, search_term, category)
        ]
        return self.filtered_exercises

    # ------------------------------------------------------------------
    # Pending selection
    # ------------------------------------------------------------------

    def is_selected(self, exercise_id: int) -> bool:
        return any(selected["exercise_id"] == exercise_id for selected in self.selected_exercises)

    def select(self, exercise_id: int) -> bool:
        """Add an exercise to the pending workout. Returns False if nothing changed."""
        exercise = next((e for e in self.exercises if e.get("id") == exercise_id), None)
        if exercise is None or self.is_selected(exercise_id):
            return False

        self.selected_exercises.append({
            "exercise_id": exercise_id,
            "name": exercise.get("name"),
            **DEFAULT_SELECTION,
        })
        return True

    def deselect(self, index: int) -> None:
        if 0 <= index < len(self.selected_exercises):
            del self.selected_exercises[index]

    def update_field(self, index: int, field: str, value: Any) -> None:
        if not 0 <= index < len(self.selected_exercises):
            return
        if field in INT_FIELDS:
            self.selected_exercises[index][field] = to_int(value)
        elif field in FLOAT_FIELDS:
            self.selected_exercises[index][field] = to_float(value)

    def can_submit(self, name: str) -> bool:
        return bool((name or "").strip()) and bool(self.selected_exercises)

    # ------------------------------------------------------------------
    # Submit / delete
    # ------------------------------------------------------------------

    async def submit(self, name: str, notes: str = "") -> bool:
        if not self.can_submit(name):
            self.message = SUBMIT_VALIDATION_MESSAGE
            return False

        exercises = [
            {key: value for key, value in selected.items() if key != "name"}
            for selected in self.selected_exercises
        ]
        try:
            await self.api.create_workout(
                name=name.strip(),
                notes=(notes or "").strip() or None,
                exercises=exercises,
            )
        except (ApiError, httpx.HTTPError) as e:
            logger.error("Error creating workout: %s", e)
            self.message = SUBMIT_ERROR_MESSAGE
            return False

        self.selected_exercises = []
        await self.load_recent_workouts()
        self.message = SUBMIT_SUCCESS_MESSAGE
        return True

    async def delete_workout(self, workout_id: int) -> bool:
        try:
            await self.api.delete_workout(workout_id)
        except (ApiError, httpx.HTTPError) as e:
            logger.error("Error deleting workout %s: %s", workout_id, e)
            return False

        await self.load_recent_workouts()
        return True
