"""Text helpers shared by iCalendar components: escaping, dates, durations."""

import math
import re
from datetime import datetime, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from icalarm.errors import ValidationError

_SPECIAL_CHARS = re.compile(r'([\\;,"])')
_NEWLINES = re.compile(r"\r\n|\r|\n")


def escape(text: str) -> str:
    """Escape a TEXT value (backslash, semicolon, comma, quote, newlines)."""
    return _NEWLINES.sub(r"\\n", _SPECIAL_CHARS.sub(r"\\\1", text))


def resolve_timezone(tz: str | tzinfo | None) -> tzinfo | None:
    """Turn a timezone name into a tzinfo; ``None`` stays ``None``."""
    if tz is None or isinstance(tz, tzinfo):
        return tz
    try:
        return ZoneInfo(tz)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValidationError(f"Unknown timezone: {tz!r}") from e


def format_date(tz: str | tzinfo | None, instant: datetime) -> str:
    """Format an instant as an iCalendar DATE-TIME.

    With a timezone the local wall time in that zone is returned (no suffix),
    without one the instant is given in UTC with a trailing ``Z``.
    Naive datetimes are taken as UTC.
    """
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)

    zone = resolve_timezone(tz)
    if zone is None:
        return instant.astimezone(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
    return instant.astimezone(zone).strftime("%Y%m%dT%H%M%S")


def require_finite(name: str, value: int | float) -> None:
    """Raise ValidationError unless ``value`` is a finite float-sized number."""
    try:
        finite = math.isfinite(value)
    except OverflowError:
        raise ValidationError(f"`{name}` is too large to be a number of seconds") from None
    if not finite:
        raise ValidationError(f"`{name}` must be finite, got {value!r}")


def format_duration(seconds: int | float) -> str:
    """Format signed seconds as an ISO-8601 duration, e.g. ``-PT1H30M``.

    Hours are never folded into days, so one day renders as ``PT24H``.
    """
    require_finite("duration", seconds)

    millis = round(abs(seconds) * 1000)
    if not millis:
        return "P0D"

    hours, millis = divmod(millis, 3_600_000)
    minutes, millis = divmod(millis, 60_000)

    out = "-P" if seconds < 0 else "P"
    out += "T"
    if hours:
        out += f"{hours}H"
    if minutes:
        out += f"{minutes}M"
    if millis:
        out += f"{millis / 1000:.3f}".rstrip("0").rstrip(".") + "S"
    return out
