"""Traceability metadata attached to each ReminderCommand."""
from __future__ import annotations

from lms_acl.models import MetadataValue, RawLMSAssignmentEvent, RawLMSWebhookEvent


def assignment_metadata(event: RawLMSAssignmentEvent) -> dict[str, MetadataValue]:
    """Identifiers that trace a reminder back to its LMS assignment."""
    return {
        "lmsAssignmentId": event.assignment_id,
        "courseId": event.course_id,
        "courseName": event.course_name,
        "assignmentType": event.assignment_type,
    }


def webhook_metadata(event: RawLMSWebhookEvent) -> dict[str, MetadataValue]:
    """Identifiers that trace a reminder back to its LMS calendar event."""
    return {
        "lmsEventId": event.event_id,
        "eventType": event.event_type,
    }
