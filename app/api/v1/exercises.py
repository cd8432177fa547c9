from fastapi import APIRouter, Depends
from typing import List

from app.core.dependencies import get_exercise_service
from app.schemas.exercise import ExerciseRead
from app.services.exercise_service import ExerciseService

router = APIRouter(tags=["exercises"])


@router.get("/get-exercises", response_model=List[ExerciseRead])
async def get_exercises(service: ExerciseService = Depends(get_exercise_service)):
    return await service.list_exercises()
