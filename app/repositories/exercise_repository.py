from typing import List

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func

from app.models.exercise import Exercise


class ExerciseRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_all(self) -> List[Exercise]:
        result = await self.db.execute(select(Exercise).order_by(Exercise.name, Exercise.id))
        return list(result.scalars().all())

    async def count(self) -> int:
        result = await self.db.execute(select(func.count(Exercise.id)))
        return result.scalar_one()

    async def add_all(self, exercises: List[Exercise]) -> None:
        self.db.add_all(exercises)
        await self.db.commit()
