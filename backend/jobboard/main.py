"""Application entrypoint: sets up FastAPI app, CORS, logging and registers API routers.

This file centralizes server bootstrap concerns (middleware, routers, log levels,
the request validation envelope) so the job handlers stay isolated in their modules.
"""
import logging
import sys
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from jobboard.api.routers import health as health_router
from jobboard.api.routers import jobs as jobs_router
from jobboard.core.config import settings
from jobboard.db.base import init_db
from jobboard.schemas.job import FieldError, ValidationErrorOut


# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format='%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S',
    handlers=[
        logging.StreamHandler(sys.stdout)
    ]
)

# Reduce noise from external libraries
logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

logger = logging.getLogger("jobs.api")


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed bodies/params in the same 400 envelope as missing fields."""
    errors = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ())]
        location = loc[0] if loc else "body"
        errors.append(FieldError(
            msg=err.get("msg", "Invalid value"),
            path=".".join(loc[1:]),
            location=location,
            value=err.get("input"),
        ))
    return JSONResponse(status_code=400, content=ValidationErrorOut(errors=errors).model_dump(mode="json"))


def create_app() -> FastAPI:
    app = FastAPI(title=settings.APP_NAME, version="0.1.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins or ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, request_validation_handler)

    app.include_router(health_router.router)
    app.include_router(jobs_router.router)

    @app.on_event("startup")
    def _on_startup():
        # create tables on startup (development convenience). Use migrations for prod.
        if settings.AUTO_CREATE_TABLES:
            init_db()
            logger.info("Database tables ensured")

    return app


app = create_app()
