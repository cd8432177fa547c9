from typing import List, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    DATABASE_URL: str = "postgresql://workouts_user:workouts_password@db:5432/workouts_db"
    # Optional access key, used as the connection password when set
    DATABASE_ACCESS_KEY: Optional[str] = None
    # Drop and recreate the tables on every start (development only)
    RESET_DATABASE: bool = False
    SEED_EXERCISES: bool = True
    SQL_ECHO: bool = False
    RECENT_WORKOUTS_LIMIT: int = 10
    CORS_ORIGINS: List[str] = ["*"]
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "allow"

settings = Settings()
