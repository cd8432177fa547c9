import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.exceptions import WorkoutAppError, StorageError

logger = logging.getLogger(__name__)


async def workout_app_error_handler(request: Request, exc: WorkoutAppError) -> JSONResponse:
    content = {"error": exc.message}
    if isinstance(exc, StorageError):
        content["details"] = exc.details
    return JSONResponse(status_code=exc.status_code, content=content)


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Malformed bodies are client errors: 400 instead of FastAPI's default 422
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request body", "details": jsonable_encoder(exc.errors())},
    )


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error", "details": str(exc)},
        # Rendered outside the http middleware, so the CORS header is set here
        headers={"Access-Control-Allow-Origin": "*"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(WorkoutAppError, workout_app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
