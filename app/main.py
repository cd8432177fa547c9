import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from app.api.errors import register_exception_handlers
from app.api.router import api_router
from app.core.config import settings
from app.core.database import init_database
from app.core.seed_exercises import seed_exercises

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_database()
    if settings.SEED_EXERCISES:
        await seed_exercises()
    logger.info("Application started")
    yield
    logger.info("Application stopped")


def create_app(run_startup: bool = True) -> FastAPI:
    app = FastAPI(
        title="Workout Tracker API",
        version="1.0.0",
        lifespan=lifespan if run_startup else None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=False,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    @app.middleware("http")
    async def allow_any_origin(request: Request, call_next):
        response = await call_next(request)
        response.headers["Access-Control-Allow-Origin"] = "*"
        return response

    register_exception_handlers(app)
    app.include_router(api_router, prefix="/api")

    @app.options("/{rest_of_path:path}", include_in_schema=False)
    async def preflight_handler(rest_of_path: str):
        """Handle CORS preflight requests"""
        response = Response(status_code=200)
        response.headers["Access-Control-Allow-Origin"] = "*"
        response.headers["Access-Control-Allow-Methods"] = "GET, POST, DELETE, OPTIONS"
        response.headers["Access-Control-Allow-Headers"] = "Content-Type"
        return response

    @app.get("/")
    async def root():
        return {
            "app": "Workout Tracker",
            "version": app.version,
            "links": {
                "exercises": "/api/get-exercises",
                "workouts": "/api/get-workouts",
                "docs": "/docs",
            }
        }

    return app


logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = create_app()


if __name__ == "__main__":
    import os
    import uvicorn

    port = int(os.environ.get("PORT", 8000))
    uvicorn.run("app.main:app", host="0.0.0.0", port=port)
