from fastapi import APIRouter, Depends, status
from typing import List

from app.core.dependencies import get_workout_service
from app.schemas.workout import (
    WorkoutCreate,
    WorkoutCreatedResponse,
    WorkoutWithExercises,
    WorkoutDeletedResponse,
)
from app.services.workout_service import WorkoutService

router = APIRouter(tags=["workouts"])


@router.get("/get-workouts", response_model=List[WorkoutWithExercises])
async def get_workouts(service: WorkoutService = Depends(get_workout_service)):
    """Ten most recent workouts with their exercises."""
    return await service.list_recent_workouts()


@router.post(
    "/create-workout",
    response_model=WorkoutCreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_workout(
    payload: WorkoutCreate,
    service: WorkoutService = Depends(get_workout_service)
):
    return await service.create_workout(payload)


@router.delete("/delete-workout/{workout_id}", response_model=WorkoutDeletedResponse)
async def delete_workout(
    workout_id: str,
    service: WorkoutService = Depends(get_workout_service)
):
    # workout_id stays a string here so that a bad id is a 400 from the service, not a 422
    deleted = await service.delete_workout(workout_id)
    return WorkoutDeletedResponse(message="Workout deleted successfully", deleted=deleted)
