"""Notification lead time per event category."""
from __future__ import annotations

import typing as t

from lms_acl.errors import UnsupportedCategory
from lms_acl.models import EventCategory


# Minutes before dueAt at which the reminder fires
NOTIFICATION_POLICY: dict[EventCategory, int] = {
    EventCategory.ASSIGNMENT: 24 * 60,
    EventCategory.CALENDAR: 30,
}


def as_category(category: t.Union[EventCategory, str]) -> EventCategory:
    """Coerce a category name to ``EventCategory``.

    :raises UnsupportedCategory: if the name is not a known category.
    """
    try:
        return EventCategory(category)
    except ValueError as exc:
        raise UnsupportedCategory(category) from exc


def advance_minutes_for(
        category: t.Union[EventCategory, str],
        overrides: t.Optional[t.Mapping[EventCategory, int]] = None,
) -> int:
    """Return the lead time for a category.

    :param category: The event category.
    :param overrides: Optional per-category values that take precedence over
        ``NOTIFICATION_POLICY``.
    :return: Lead time in minutes.
    """
    category = as_category(category)
    if overrides and category in overrides:
        return overrides[category]
    try:
        return NOTIFICATION_POLICY[category]
    except KeyError as exc:
        raise UnsupportedCategory(category) from exc
