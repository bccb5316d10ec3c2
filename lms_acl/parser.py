"""Decode raw LMS payloads into validated event models."""
from __future__ import annotations

import logging
import typing as t

from pydantic import ValidationError

from lms_acl.errors import MalformedPayload
from lms_acl.models import EventCategory, RawLMSAssignmentEvent, RawLMSEvent, RawLMSWebhookEvent
from lms_acl.registry import get_rule

logger = logging.getLogger(__name__)

Payload = t.Union[str, bytes, bytearray]


def parse_payload(payload: Payload, category: t.Union[EventCategory, str]) -> RawLMSEvent:
    """Decode a JSON payload into the raw event model for ``category``.

    Decoding either fully succeeds or raises; extra fields are ignored.

    :param payload: JSON text or UTF-8 bytes.
    :param category: Which LMS event shape to expect.
    :return: The validated raw event.
    :raises MalformedPayload: on invalid JSON, a non-object document, a
        missing required field or a field of the wrong type.
    """
    rule = get_rule(category)
    if isinstance(payload, (bytes, bytearray)):
        try:
            payload = bytes(payload).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise MalformedPayload(f"{rule.event_model.__name__} payload is not valid UTF-8") from exc
    try:
        return rule.event_model.model_validate_json(payload)
    except ValidationError as exc:
        error = _to_malformed(exc, rule.event_model.__name__)
        logger.debug("Rejected %s payload: %s", rule.category.value, error)
        raise error from exc


def parse_assignment(payload: Payload) -> RawLMSAssignmentEvent:
    """Decode an LMS assignment-due payload."""
    return t.cast(RawLMSAssignmentEvent, parse_payload(payload, EventCategory.ASSIGNMENT))


def parse_webhook(payload: Payload) -> RawLMSWebhookEvent:
    """Decode an LMS calendar webhook payload."""
    return t.cast(RawLMSWebhookEvent, parse_payload(payload, EventCategory.CALENDAR))


def _to_malformed(exc: ValidationError, model_name: str) -> MalformedPayload:
    errors = exc.errors(include_url=False)
    if any(e["type"] == "json_invalid" for e in errors):
        return MalformedPayload(f"{model_name} payload is not valid JSON")

    missing = [str(e["loc"][0]) for e in errors if e["type"] == "missing" and e["loc"]]
    if missing:
        return MalformedPayload(f"{model_name} payload is incomplete", missing_fields=missing)

    details = "; ".join(
        f"{'.'.join(str(part) for part in e['loc']) or '<root>'}: {e['msg']}" for e in errors
    )
    return MalformedPayload(f"{model_name} payload is invalid ({details})")
