from fastapi import APIRouter
from app.api.v1.exercises import router as exercises_router
from app.api.v1.workouts import router as workouts_router

api_router = APIRouter()

api_router.include_router(exercises_router)
api_router.include_router(workouts_router)
