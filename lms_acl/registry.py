"""Mapping rules for each LMS event category.

A rule says which raw model a payload is validated against and where the
reminder fields come from. The mapper and parser look rules up here instead
of hard-coding one function per event type.
"""
from __future__ import annotations

import typing as t
from dataclasses import dataclass

from lms_acl.errors import UnsupportedCategory
from lms_acl.metadata import assignment_metadata, webhook_metadata
from lms_acl.models import (
    EventCategory,
    MetadataValue,
    RawLMSAssignmentEvent,
    RawLMSEvent,
    RawLMSWebhookEvent,
)
from lms_acl.policy import as_category


@dataclass(frozen=True)
class MappingRule:
    """How one event category maps onto a ReminderCommand."""
    category: EventCategory
    event_model: type[RawLMSEvent]
    title_label: str                # prepended verbatim to the title field
    title_field: str
    due_field: str
    user_field: str
    natural_id_field: str           # feeds the idempotency key
    build_metadata: t.Callable[[t.Any], dict[str, MetadataValue]]
    resolve_user: bool = False      # pass user_field through the IdentityResolver


MAPPING_RULES: dict[EventCategory, MappingRule] = {}


def register_rule(rule: MappingRule, replace: bool = False) -> None:
    """Install the mapping rule for ``rule.category``.

    :param rule: The rule to install.
    :param replace: Overwrite an existing rule for the same category.
    :raises ValueError: if a rule exists and ``replace`` is False.
    """
    if rule.category in MAPPING_RULES and not replace:
        raise ValueError(f"A mapping rule for '{rule.category.value}' is already registered")
    MAPPING_RULES[rule.category] = rule


def get_rule(category: t.Union[EventCategory, str]) -> MappingRule:
    """Return the mapping rule for a category."""
    category = as_category(category)
    rule = MAPPING_RULES.get(category)
    if rule is None:
        raise UnsupportedCategory(category)
    return rule


register_rule(MappingRule(
    category=EventCategory.ASSIGNMENT,
    event_model=RawLMSAssignmentEvent,
    title_label="Assignment Due: ",
    title_field="assignment_title",
    due_field="due_date",
    user_field="student_id",
    natural_id_field="assignment_id",
    build_metadata=assignment_metadata,
    resolve_user=True,
))

register_rule(MappingRule(
    category=EventCategory.CALENDAR,
    event_model=RawLMSWebhookEvent,
    title_label="Upcoming: ",
    title_field="title",
    due_field="start_time",
    user_field="user_id",
    natural_id_field="event_id",
    build_metadata=webhook_metadata,
))
