from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import date as date_type, datetime

class ExerciseSelection(BaseModel):
    exercise_id: int
    sets: Optional[int] = Field(default=None, ge=0)
    reps: Optional[int] = Field(default=None, ge=0)
    weight: Optional[float] = Field(default=None, ge=0)
    rest_seconds: Optional[int] = Field(default=None, ge=0)
    notes: Optional[str] = None

class WorkoutCreate(BaseModel):
    # name and exercises are checked by WorkoutService so that a missing
    # value gets the same 400 message as a blank one
    name: Optional[str] = None
    notes: Optional[str] = None
    exercises: Optional[List[ExerciseSelection]] = None

class WorkoutRead(BaseModel):
    id: int
    name: str
    notes: Optional[str] = None
    date: date_type
    created_at: datetime
    duration_minutes: Optional[int] = None

    class Config:
        from_attributes = True

class WorkoutExerciseRead(BaseModel):
    id: int
    workout_id: int
    exercise_id: int
    sets: int
    reps: int
    weight: float
    rest_seconds: Optional[int] = None
    notes: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True

class WorkoutCreatedResponse(WorkoutRead):
    exercises: List[WorkoutExerciseRead]

class DisplayExercise(BaseModel):
    exercise_name: str
    category: str
    sets: int
    reps: int
    weight: float
    rest_seconds: Optional[int] = None
    notes: Optional[str] = None

class WorkoutWithExercises(WorkoutRead):
    exercises: List[DisplayExercise] = []

class WorkoutDeletedResponse(BaseModel):
    message: str
    deleted: WorkoutRead
