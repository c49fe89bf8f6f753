"""Trigger normalization.

An alarm stores its trigger in one of two shapes:

* an aware ``datetime``: fire at that instant;
* signed seconds: negative means "this long before the event starts",
  zero or positive means "this long after the event ends" (``RELATED=END``).

Callers think in "seconds before", so numbers passed to ``trigger`` and
``trigger_before`` are negated on the way in and negated again on the way
out. ``trigger_after`` takes "seconds after" and hands out the raw stored
value.
"""

from datetime import datetime, timedelta, timezone, tzinfo
from typing import Any, Union

from icalarm.errors import ValidationError
from icalarm.utils.text import format_date, format_duration, require_finite

StoredTrigger = Union[datetime, int, float]

_TYPE_ERROR = "`trigger` must be a number of seconds, a datetime or a timedelta"


def to_storage(value: Any) -> StoredTrigger | None:
    """Normalize a "seconds before start" style input; falsy clears."""
    if isinstance(value, bool):
        raise ValidationError(_TYPE_ERROR)
    if not value:
        return None
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value
    if isinstance(value, timedelta):
        return -_duration_seconds(value)
    if isinstance(value, (int, float)):
        require_finite("trigger", value)
        return -value
    raise ValidationError(_TYPE_ERROR)


def to_storage_after(value: Any) -> StoredTrigger | None:
    """Normalize a "seconds after end" style input; falsy clears."""
    if isinstance(value, timedelta):
        return to_storage(-_duration_seconds(value))
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return to_storage(-value)
    return to_storage(value)


def from_storage(stored: StoredTrigger | None) -> StoredTrigger | None:
    """Public reading of a stored trigger: instants as-is, numbers sign-flipped."""
    if stored is None or isinstance(stored, datetime):
        return stored
    return -stored


def render(stored: StoredTrigger, tz: str | tzinfo | None) -> str:
    """The TRIGGER property line, without line terminator."""
    if isinstance(stored, datetime):
        return f"TRIGGER;VALUE=DATE-TIME:{format_date(tz, stored)}"
    if stored >= 0:
        return f"TRIGGER;RELATED=END:{format_duration(stored)}"
    return f"TRIGGER:{format_duration(stored)}"


def _duration_seconds(value: timedelta) -> int | float:
    seconds = value.total_seconds()
    return int(seconds) if seconds.is_integer() else seconds
