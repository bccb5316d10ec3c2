"""Error types raised by the LMS adapter."""
from __future__ import annotations

import typing as t


class LMSAdapterError(Exception):
    """Base class for every error raised by this package."""


class MalformedPayload(LMSAdapterError, ValueError):
    """The payload could not be decoded or lacks a required field."""

    def __init__(self, reason: str, missing_fields: t.Iterable[str] = ()) -> None:
        self.reason = reason
        self.missing_fields: tuple[str, ...] = tuple(missing_fields)
        message = reason
        if self.missing_fields:
            message = f"{reason}: missing required fields {list(self.missing_fields)}"
        super().__init__(message)


class UnknownStudent(LMSAdapterError, LookupError):
    """No internal user is mapped to the given LMS student id."""

    def __init__(self, external_id: str) -> None:
        self.external_id = external_id
        super().__init__(f"No internal user mapped to LMS student '{external_id}'")


class EncodingError(LMSAdapterError, RuntimeError):
    """A ReminderCommand could not be serialized. Always a bug."""


class UnsupportedCategory(LMSAdapterError, KeyError):
    """No mapping rule or lead time is registered for the category."""

    def __init__(self, category: t.Any) -> None:
        self.category = category
        super().__init__(category)

    def __str__(self) -> str:
        return f"Unsupported event category: {self.category!r}"
