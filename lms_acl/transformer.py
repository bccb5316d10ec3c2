"""
End-to-end LMS event transformation.

``Transformer.transform`` runs parse, map and key derivation and returns the
command together with its idempotency key. The key is never part of the
encoded reminder; callers use it for deduplication.
"""
from __future__ import annotations

import logging
import typing as t

from lms_acl.config import TransformerSettings
from lms_acl.encoder import encode_reminder
from lms_acl.identity import IdentityResolver, PrefixIdentityResolver, derive_idempotency_key
from lms_acl.mapper import map_event, natural_id_of
from lms_acl.models import EventCategory, TransformResult
from lms_acl.parser import Payload, parse_payload
from lms_acl.policy import as_category

logger = logging.getLogger(__name__)

# Exchange property the idempotency key is stored under by transform_exchange
IDEMPOTENCY_CONTEXT_KEY = "lmsAssignmentId"


class Transformer:
    """Stateless LMS to ReminderCommand transformer.

    Safe to share between threads: it holds only immutable settings and the
    resolver, and the resolver is the caller's responsibility.
    """

    def __init__(
            self,
            settings: t.Optional[TransformerSettings] = None,
            resolver: t.Optional[IdentityResolver] = None,
    ) -> None:
        self.settings = settings or TransformerSettings()
        self.resolver = resolver or PrefixIdentityResolver(self.settings.user_id_prefix)

    def transform(self, payload: Payload, category: t.Union[EventCategory, str]) -> TransformResult:
        """Transform one raw payload.

        :param payload: JSON text or bytes from the LMS.
        :param category: The LMS event category of the payload.
        :return: The command and the idempotency key of the source event.
        :raises MalformedPayload: if the payload cannot be parsed.
        :raises UnknownStudent: if the resolver cannot map the student.
        :raises UnsupportedCategory: if ``category`` names no registered category.
        """
        category = as_category(category)
        event = parse_payload(payload, category)
        command = map_event(event, category, resolver=self.resolver, settings=self.settings)
        key = derive_idempotency_key(natural_id_of(event, category))
        logger.debug("Transformed %s payload, idempotency key %s", category.value, key)
        return TransformResult(command=command, idempotency_key=key)

    def transform_assignment(self, payload: Payload) -> TransformResult:
        """Transform an LMS assignment-due payload."""
        return self.transform(payload, EventCategory.ASSIGNMENT)

    def transform_webhook(self, payload: Payload) -> TransformResult:
        """Transform an LMS calendar webhook payload."""
        return self.transform(payload, EventCategory.CALENDAR)

    def transform_to_wire(
            self, payload: Payload, category: t.Union[EventCategory, str]
    ) -> tuple[str, str]:
        """Transform and encode; returns ``(reminder_json, idempotency_key)``."""
        result = self.transform(payload, category)
        return encode_reminder(result.command), result.idempotency_key

    def transform_exchange(
            self,
            payload: Payload,
            category: t.Union[EventCategory, str],
            context: t.MutableMapping[str, t.Any],
    ) -> str:
        """Transform for routing layers that pass a per-message context bag.

        The idempotency key is written to ``context[IDEMPOTENCY_CONTEXT_KEY]``
        for both categories; the encoded reminder is returned. Nothing is
        written if the transform fails.
        """
        encoded, key = self.transform_to_wire(payload, category)
        context[IDEMPOTENCY_CONTEXT_KEY] = key
        return encoded


_default_transformer = Transformer()


def transform_assignment(payload: Payload) -> TransformResult:
    """Transform an assignment payload with default settings."""
    return _default_transformer.transform_assignment(payload)


def transform_webhook(payload: Payload) -> TransformResult:
    """Transform a calendar webhook payload with default settings."""
    return _default_transformer.transform_webhook(payload)
