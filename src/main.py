import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from src.common.exceptions import (
    ResourceNotFoundException,
    StorageException,
    resource_not_found_handler,
    storage_exception_handler,
    unexpected_exception_handler,
    validation_exception_handler,
    internal_error_response,
    validation_error_response,
)
from src.common.opentelemetry import setup_opentelemetry
from src.config import get_settings
from src.tasks.router import router as tasks_router
from src.tasks.store.dependencies import create_task_store
from src.healthcheck.router import router as health_router

settings = get_settings()

logging.basicConfig(
    level=settings.LOG_LEVEL,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.task_store = create_task_store(settings.TASKS_FILE)
    yield


app = FastAPI(
    title=settings.API_NAME,
    summary=settings.API_SUMMARY,
    lifespan=lifespan,
    responses={
        **internal_error_response,
        **validation_error_response,
    },
    version=settings.TASKBOARD_VERSION,
)

if settings.OTEL_ENABLED:
    setup_opentelemetry(settings.OTEL_SERVICE_NAME, app)

if settings.CORS_ENABLED:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

app.exception_handler(RequestValidationError)(validation_exception_handler)
app.exception_handler(ResourceNotFoundException)(resource_not_found_handler)
app.exception_handler(StorageException)(storage_exception_handler)
app.exception_handler(Exception)(unexpected_exception_handler)


app.include_router(health_router)
app.include_router(tasks_router)
