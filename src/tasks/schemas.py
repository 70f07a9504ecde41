from datetime import datetime
from typing import Any
from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr, field_validator
from pydantic.alias_generators import to_camel


class Task(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    text: str = Field(..., min_length=1)
    completed: bool = False
    created_at: datetime


def ensure_not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("'text' must not be blank")
    return value


class CreateTaskRequest(BaseModel):
    text: StrictStr = Field(..., min_length=1)
    completed: StrictBool = False

    @field_validator("text")
    def validate_text(cls, value: str):
        return ensure_not_blank(value)


class UpdateTaskRequest(BaseModel):
    text: StrictStr | None = Field(None, min_length=1)
    completed: StrictBool | None = None

    @field_validator("text", "completed", mode="before")
    def reject_null(cls, value: Any):
        # Omitting a field leaves it untouched; sending null is an error
        if value is None:
            raise ValueError("Field may be omitted but not null")
        return value

    @field_validator("text")
    def validate_text(cls, value: str | None):
        if value is None:
            return value
        return ensure_not_blank(value)


class TaskStats(BaseModel):
    total: int
    completed: int
    pending: int
    progress: int
