from pydantic import BaseModel, field_validator
from typing import Optional, List

class ExerciseRead(BaseModel):
    id: int
    name: str
    category: Optional[str] = None
    description: Optional[str] = None
    muscle_groups: List[str] = []
    equipment: Optional[str] = None

    @field_validator("muscle_groups", mode="before")
    @classmethod
    def normalize_muscle_groups(cls, value):
        # Catalog rows written by hand may hold NULL or a single string
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        return value

    class Config:
        from_attributes = True
