"""
Field mapping from raw LMS events to ReminderCommand.

One generic ``map_event`` driven by the rule registered for each
``EventCategory``; ``map_assignment`` and ``map_webhook`` are the named entry
points for the two LMS event shapes.
"""
from __future__ import annotations

import logging
import typing as t

from lms_acl.config import TransformerSettings
from lms_acl.identity import IdentityResolver, PrefixIdentityResolver
from lms_acl.models import (
    EventCategory,
    RawLMSAssignmentEvent,
    RawLMSEvent,
    RawLMSWebhookEvent,
    ReminderCommand,
)
from lms_acl.policy import advance_minutes_for
from lms_acl.registry import get_rule

logger = logging.getLogger(__name__)

# Origin tag carried by every reminder this layer emits, whatever the category
SOURCE = "LMS"


def map_event(
        event: RawLMSEvent,
        category: t.Union[EventCategory, str],
        resolver: t.Optional[IdentityResolver] = None,
        settings: t.Optional[TransformerSettings] = None,
) -> ReminderCommand:
    """Map a validated raw event onto a ReminderCommand.

    :param event: Raw event produced by the parser.
    :param category: Category whose mapping rule applies.
    :param resolver: Resolver for rules that map user ids. Defaults to the
        prefix stub configured by ``settings``.
    :param settings: User id prefix and lead-time overrides.
    :return: A new ReminderCommand.
    :raises UnknownStudent: if the resolver has no mapping for the user.
    """
    settings = settings or TransformerSettings()
    rule = get_rule(category)
    if not isinstance(event, rule.event_model):
        raise TypeError(
            f"{rule.category.value} events must be {rule.event_model.__name__}, "
            f"got {type(event).__name__}"
        )

    user_id = getattr(event, rule.user_field)
    if rule.resolve_user:
        resolver = resolver or PrefixIdentityResolver(settings.user_id_prefix)
        user_id = resolver.resolve_user_id(user_id)

    command = ReminderCommand(
        user_id=user_id,
        title=f"{rule.title_label}{getattr(event, rule.title_field)}",
        due_at=getattr(event, rule.due_field),
        source=SOURCE,
        advance_minutes=advance_minutes_for(rule.category, settings.advance_minutes),
        metadata=rule.build_metadata(event),
    )
    logger.debug(
        "Mapped %s event %s to reminder for %s",
        rule.category.value, getattr(event, rule.natural_id_field), command.user_id,
    )
    return command


def map_assignment(
        event: RawLMSAssignmentEvent,
        resolver: t.Optional[IdentityResolver] = None,
        settings: t.Optional[TransformerSettings] = None,
) -> ReminderCommand:
    """Map an LMS assignment-due event; the student id is resolved."""
    return map_event(event, EventCategory.ASSIGNMENT, resolver=resolver, settings=settings)


def map_webhook(
        event: RawLMSWebhookEvent,
        settings: t.Optional[TransformerSettings] = None,
) -> ReminderCommand:
    """Map an LMS calendar webhook event; the user id passes through."""
    return map_event(event, EventCategory.CALENDAR, settings=settings)


def natural_id_of(event: RawLMSEvent, category: t.Union[EventCategory, str]) -> str:
    """Return the LMS natural identifier of an event."""
    return getattr(event, get_rule(category).natural_id_field)
