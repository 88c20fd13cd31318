"""FastAPI application entry point."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.core.config import settings
from app.core.database import Base, engine, check_db_connection
from app.core.exceptions import SurveyAPIError, ValidationError
from app.core.logging_config import configure_logging
from app.api import admin_responses, auth, department_counts, health, submit, survey_config, users

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

API_PREFIX = "/api"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown."""
    logger.info("Starting Policy Awareness Survey API (%s)", settings.ENVIRONMENT)
    if settings.ENVIRONMENT == "development" and settings.DATABASE_URL.startswith("sqlite"):
        # Production schemas are managed by alembic
        Base.metadata.create_all(bind=engine)
    if not check_db_connection():
        logger.warning("Database not reachable at startup; submissions will be logged for recovery")
    yield
    logger.info("Shutting down Policy Awareness Survey API")


app = FastAPI(
    title="Policy Awareness Survey API",
    description="Anonymous policy awareness and training needs survey",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(SurveyAPIError)
async def survey_api_error_handler(request: Request, exc: SurveyAPIError):
    return JSONResponse(status_code=exc.status_code, content=jsonable_encoder(exc.to_dict()), headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    violations = [
        {
            "path": ".".join(str(part) for part in error["loc"] if part != "body"),
            "expected": error["msg"],
            "received": None if error["type"] == "missing" else error.get("input"),
        }
        for error in exc.errors()
    ]
    error = ValidationError(violations)
    return JSONResponse(status_code=error.status_code, content=jsonable_encoder(error.to_dict()))


for router in (
    submit.router,
    survey_config.router,
    admin_responses.router,
    department_counts.router,
    auth.router,
    users.router,
    health.router,
):
    app.include_router(router, prefix=API_PREFIX)

app.include_router(health.router)


@app.get("/")
def root():
    return {
        "message": "Policy Awareness Survey API",
        "version": "1.0.0",
        "docs": "/docs",
    }
