from app.core.config import settings
from app.core.base import Base
from app.core.db import engine, get_db, get_session_factory

__all__ = ["settings", "engine", "Base", "get_db", "get_session_factory"]
