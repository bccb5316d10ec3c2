"""
Pydantic models for the LMS to Reminder translation boundary.

Raw LMS event shapes are validated on the way in; ``ReminderCommand`` is the
canonical record handed to the reminder-scheduling service. Python attributes
are snake_case, the wire names are the camelCase aliases.
"""
from __future__ import annotations

import math
import typing as t
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


# Values allowed inside ReminderCommand.metadata
MetadataValue = t.Union[str, int, float, bool, None]


class EventCategory(str, Enum):
    """Kind of LMS event; selects both the mapping rule and the lead time."""
    ASSIGNMENT = "assignment"
    CALENDAR = "calendar"


class RawLMSEvent(BaseModel):
    """
    Base for inbound LMS payloads.

    Every declared field is required. Unknown fields are dropped so newer LMS
    versions can add data without breaking the transform. Numeric ids are kept
    as their text form; numbers too large for a float are rejected.
    """
    model_config = ConfigDict(extra="ignore", frozen=True, coerce_numbers_to_str=True)

    @field_validator("*", mode="before")
    @classmethod
    def reject_non_finite(cls, value: t.Any) -> t.Any:
        # 1e400 parses as inf; its text would collapse distinct ids together
        if isinstance(value, float) and not math.isfinite(value):
            raise ValueError("must be a finite number")
        return value


class RawLMSAssignmentEvent(RawLMSEvent):
    """An assignment-due notice from the LMS."""
    assignment_id: str
    student_id: str
    assignment_title: str
    due_date: str           # ISO-8601, passed through untouched
    course_id: str
    course_name: str
    assignment_type: str


class RawLMSWebhookEvent(RawLMSEvent):
    """A calendar webhook event from the LMS."""
    event_id: str
    user_id: str            # already an internal user id
    title: str
    start_time: str         # ISO-8601, passed through untouched
    event_type: str


class ReminderCommand(BaseModel):
    """
    Command consumed by the reminder-scheduling service.

    Field order here is the field order on the wire.
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    user_id: str = Field(alias="userId")
    title: str
    due_at: str = Field(alias="dueAt")
    source: str
    advance_minutes: int = Field(alias="advanceMinutes")
    metadata: dict[str, MetadataValue] = Field(default_factory=dict)


class TransformResult(t.NamedTuple):
    """A transformed command plus the idempotency key of its source event."""
    command: ReminderCommand
    idempotency_key: str
