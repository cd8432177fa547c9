import logging

from sqlalchemy.ext.asyncio import AsyncEngine

from app.core.config import settings
from app.core.base import Base
from app.core.db import engine as default_engine

# Models must be imported so that they are registered on Base.metadata
from app.models.exercise import Exercise
from app.models.workout import Workout, WorkoutExercise

logger = logging.getLogger(__name__)


async def init_database(engine: AsyncEngine = default_engine, reset: bool = settings.RESET_DATABASE):
    """Create the tables, dropping them first when reset is requested."""
    async with engine.begin() as conn:
        if reset:
            logger.warning("RESET_DATABASE=true, dropping all tables")
            await conn.run_sync(Base.metadata.drop_all)

        await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables created/verified")
