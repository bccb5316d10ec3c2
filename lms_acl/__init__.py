# -*- coding: utf-8 -*-
"""Anti-corruption layer turning LMS events into reminder commands."""
from lms_acl.config import TransformerSettings
from lms_acl.encoder import decode_reminder, encode_reminder
from lms_acl.errors import (
    EncodingError,
    LMSAdapterError,
    MalformedPayload,
    UnknownStudent,
    UnsupportedCategory,
)
from lms_acl.identity import (
    IdentityResolver,
    MappingIdentityResolver,
    PrefixIdentityResolver,
    derive_idempotency_key,
    resolve_user_id,
)
from lms_acl.mapper import map_assignment, map_event, map_webhook
from lms_acl.models import (
    EventCategory,
    RawLMSAssignmentEvent,
    RawLMSWebhookEvent,
    ReminderCommand,
    TransformResult,
)
from lms_acl.parser import parse_assignment, parse_payload, parse_webhook
from lms_acl.policy import NOTIFICATION_POLICY, advance_minutes_for
from lms_acl.registry import MAPPING_RULES, MappingRule, get_rule, register_rule
from lms_acl.transformer import Transformer, transform_assignment, transform_webhook

__all__ = [
    "EncodingError",
    "EventCategory",
    "IdentityResolver",
    "LMSAdapterError",
    "MAPPING_RULES",
    "MalformedPayload",
    "MappingIdentityResolver",
    "MappingRule",
    "NOTIFICATION_POLICY",
    "PrefixIdentityResolver",
    "RawLMSAssignmentEvent",
    "RawLMSWebhookEvent",
    "ReminderCommand",
    "TransformResult",
    "Transformer",
    "TransformerSettings",
    "UnknownStudent",
    "UnsupportedCategory",
    "advance_minutes_for",
    "decode_reminder",
    "derive_idempotency_key",
    "encode_reminder",
    "get_rule",
    "map_assignment",
    "map_event",
    "map_webhook",
    "parse_assignment",
    "parse_payload",
    "parse_webhook",
    "register_rule",
    "resolve_user_id",
    "transform_assignment",
    "transform_webhook",
]
