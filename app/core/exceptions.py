"""
Domain errors and their HTTP status codes.

Services raise these exceptions; the handlers in app.api.errors turn them
into JSON responses of the form {"error": ..., "details": ...}.
"""
from typing import Optional


class WorkoutAppError(Exception):
    status_code: int = 500

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details


class ValidationError(WorkoutAppError):
    """Malformed or missing client input. Raised before any storage call."""
    status_code = 400


class NotFoundError(WorkoutAppError):
    status_code = 404


class StorageError(WorkoutAppError):
    """The database rejected or failed an operation."""
    status_code = 500


class PartialReadFailure(WorkoutAppError):
    """One workout's exercises could not be loaded while listing.

    Never reaches an exception handler: the listing logs it and returns
    that workout with an empty exercise list.
    """

    def __init__(self, workout_id: int, cause: Exception):
        super().__init__(f"Failed to load exercises for workout {workout_id}", str(cause))
        self.workout_id = workout_id
        self.cause = cause
