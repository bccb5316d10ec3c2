"""Wire encoding for ReminderCommand."""
from __future__ import annotations

import typing as t

from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from lms_acl.errors import EncodingError, MalformedPayload
from lms_acl.models import ReminderCommand


def encode_reminder(command: ReminderCommand) -> str:
    """Serialize a command to compact JSON using the wire field names.

    :raises EncodingError: if serialization fails, which indicates a bug.
    """
    try:
        return command.model_dump_json(by_alias=True)
    except (PydanticSerializationError, TypeError, ValueError) as exc:
        raise EncodingError(f"Could not encode ReminderCommand: {exc}") from exc


def decode_reminder(text: t.Union[str, bytes]) -> ReminderCommand:
    """Parse wire JSON back into a ReminderCommand.

    :raises MalformedPayload: if the text is not a valid ReminderCommand.
    """
    try:
        return ReminderCommand.model_validate_json(text)
    except ValidationError as exc:
        raise MalformedPayload(f"Invalid ReminderCommand: {exc.error_count()} validation error(s)") from exc
