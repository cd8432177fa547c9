from sqlalchemy import Column, Integer, String, Text, JSON
from sqlalchemy.orm import relationship
from app.core.base import Base

class Exercise(Base):
    """Catalog entry. Maintained outside the app, read-only here."""
    __tablename__ = "exercises"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False, index=True)
    category = Column(String, nullable=True, index=True)
    description = Column(Text, nullable=True)
    muscle_groups = Column(JSON, default=list, nullable=False)
    equipment = Column(String, nullable=True)

    workout_entries = relationship("WorkoutExercise", back_populates="exercise")
