"""Shared payload fixtures for LMS adapter tests."""
import json
import typing as t

import pytest


ASSIGNMENT_EVENT: dict[str, t.Any] = {
    "assignment_id": "A1",
    "student_id": "S1",
    "assignment_title": "Essay",
    "due_date": "2024-05-01T00:00:00Z",
    "course_id": "C1",
    "course_name": "History",
    "assignment_type": "essay",
}

WEBHOOK_EVENT: dict[str, t.Any] = {
    "event_id": "E9",
    "user_id": "U2",
    "title": "Standup",
    "start_time": "2024-05-02T09:00:00Z",
    "event_type": "meeting",
}


@pytest.fixture
def assignment_event() -> dict[str, t.Any]:
    """A fresh copy of the reference assignment event."""
    return dict(ASSIGNMENT_EVENT)


@pytest.fixture
def webhook_event() -> dict[str, t.Any]:
    """A fresh copy of the reference webhook event."""
    return dict(WEBHOOK_EVENT)


@pytest.fixture
def assignment_payload(assignment_event: dict[str, t.Any]) -> str:
    return json.dumps(assignment_event)


@pytest.fixture
def webhook_payload(webhook_event: dict[str, t.Any]) -> str:
    return json.dumps(webhook_event)
