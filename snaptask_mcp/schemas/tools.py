"""Input schemas for the Snaptask MCP tools."""
import re
from typing import List, Optional

from pydantic import (
    AwareDatetime,
    BaseModel,
    Field,
    StrictBool,
    StrictInt,
    StrictStr,
    TypeAdapter,
    ValidationError,
    field_validator,
)

# Date and time with seconds; keeps numeric strings (unix timestamps) out
ISO_DATETIME_PREFIX = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}")
AWARE_DATETIME = TypeAdapter(AwareDatetime)
ISO_DATETIME_ERROR = "must be an ISO-8601 datetime with offset (e.g. 2024-01-05T09:00:00Z)"


class TodayViewInput(BaseModel):
    """No input needed for the today view."""


class CreateTasksFromTextInput(BaseModel):
    """Schema for creating tasks from free text."""
    text: StrictStr = Field(
        ...,
        min_length=1,
        description="User’s free‑form description of what they need to do. Can be long.",
    )


class TaskStatusUpdate(BaseModel):
    """A single completion update."""
    id: StrictStr = Field(..., description="Snaptask task id")
    isCompleted: StrictBool = Field(..., description="true to mark done, false to mark not done")


class UpdateTaskStatusInput(BaseModel):
    """Schema for updating task completion."""
    updates: List[TaskStatusUpdate] = Field(
        ...,
        min_length=1,
        description="List of task completion updates.",
    )


class WeekOverviewInput(BaseModel):
    """Schema for the week overview."""
    referenceDateIso: Optional[StrictStr] = Field(
        None,
        description="Optional ISO timestamp to anchor the week. Defaults to now if omitted.",
        json_schema_extra={"format": "date-time"},
    )

    @field_validator("referenceDateIso")
    @classmethod
    def check_iso_datetime(cls, value: Optional[str]) -> Optional[str]:
        # Forwarded unchanged; only checked here
        if value is None:
            return value
        if not ISO_DATETIME_PREFIX.match(value):
            raise ValueError(ISO_DATETIME_ERROR)
        try:
            AWARE_DATETIME.validate_python(value)
        except ValidationError:
            raise ValueError(ISO_DATETIME_ERROR)
        return value


class SuggestNextTasksInput(BaseModel):
    """Schema for next-task suggestions."""
    daysAhead: Optional[StrictInt] = Field(
        None, ge=1, le=14, description="How many days ahead to consider (default 3)."
    )
    limit: Optional[StrictInt] = Field(
        None, ge=1, le=20, description="Max number of suggestions to return (default 5)."
    )
