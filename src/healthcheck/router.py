from typing import Any
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from src.tasks.store.base import TaskStore
from src.tasks.store.dependencies import get_task_store

router = APIRouter()


@router.get(
    "/healthcheck",
    tags=["Healthcheck"],
    status_code=status.HTTP_200_OK,
    responses={
        200: {
            "description": "Healthcheck status",
            "content": {
                "application/json": {
                    "example": {
                        "api": {"status": "ok"},
                        "storage": {"status": "ok"},
                    }
                }
            },
        },
        503: {
            "description": "Service unavailable",
            "content": {
                "application/json": {
                    "example": {
                        "api": {"status": "ok"},
                        "storage": {
                            "status": "error",
                            "message": "Tasks file is missing (tasks.json)",
                        },
                    }
                }
            },
        },
    },
)
def healthcheck(
    task_store: TaskStore = Depends(get_task_store),
) -> JSONResponse:
    health_status: dict[str, Any] = {
        "api": {"status": "ok"},
        "storage": {"status": "ok"},
    }
    has_error = False

    # Check the durable tasks file
    try:
        task_store.check()
    except Exception as e:
        health_status["storage"].update({"status": "error", "message": str(e)})
        has_error = True

    if has_error:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content=health_status
        )

    return JSONResponse(status_code=status.HTTP_200_OK, content=health_status)
