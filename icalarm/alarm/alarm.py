"""The VALARM component of a calendar event."""

from collections.abc import Mapping
from datetime import timedelta
from typing import Any

from loguru import logger

from icalarm.alarm import trigger as triggers
from icalarm.alarm.models import AlarmAttachment, AlarmType, EventContext
from icalarm.alarm.trigger import StoredTrigger
from icalarm.config.schema import RenderConfig
from icalarm.errors import ConstructionError, SerializationPreconditionError, ValidationError
from icalarm.utils.custom_attributes import CRLF, CustomAttributeStore
from icalarm.utils.text import escape, format_duration, require_finite

# Keys accepted as initial data, in the order they are applied.
_FIELDS = (
    "type",
    "trigger",
    "trigger_before",
    "trigger_after",
    "repeat",
    "interval",
    "attach",
    "description",
    "x",
)
_ALIASES = {"triggerBefore": "trigger_before", "triggerAfter": "trigger_after"}


class Alarm:
    """A reminder attached to one calendar event.

    Fields are plain properties: read them to get the current value, assign
    to change it. Every setter validates its own input and raises
    ``ValidationError``; assigning ``None`` clears a field. Cross-field rules
    (type and trigger required, repeat and interval in pairs) are only
    enforced by ``to_ical()``.

    Example::

        alarm = Alarm(event, type="display", trigger=15 * 60)
        alarm.description = "Leave for the airport"
        text = alarm.to_ical()
    """

    def __init__(self, event: EventContext, data: Mapping[str, Any] | None = None, **kwargs: Any):
        """Create an alarm for ``event``.

        Args:
            event: Owning event, used for timezone and summary when rendering.
            data: Initial field values, e.g. the output of ``to_dict()``.
            **kwargs: More initial values; applied after ``data``.
        """
        if event is None:
            raise ConstructionError("An alarm needs the event it belongs to")

        self._event = event
        self._type: AlarmType | None = None
        self._trigger: StoredTrigger | None = None
        self._repeat: int | None = None
        self._interval: int | None = None
        self._attach: AlarmAttachment | None = None
        self._description: str | None = None
        self._x = CustomAttributeStore()

        initial = dict(data or {})
        initial.update(kwargs)
        if initial:
            self.set(**initial)

    @property
    def event(self) -> EventContext:
        return self._event

    def set(self, **fields: Any) -> "Alarm":
        """Assign several fields at once and return the alarm.

        Unknown names raise ``ValidationError`` before anything is changed.
        """
        normalized = {_ALIASES.get(name, name): value for name, value in fields.items()}
        unknown = sorted(set(normalized) - set(_FIELDS))
        if unknown:
            raise ValidationError(f"Unknown alarm field(s): {', '.join(unknown)}")

        for name in _FIELDS:
            if name not in normalized:
                continue
            if name == "x":
                if normalized[name]:
                    self.add_x(normalized[name])
            else:
                setattr(self, name, normalized[name])
        return self

    # -- type -----------------------------------------------------------

    @property
    def type(self) -> AlarmType | None:
        """``AlarmType.DISPLAY``, ``AlarmType.AUDIO`` or ``None``."""
        return self._type

    @type.setter
    def type(self, value: AlarmType | str | None) -> None:
        if not value:
            self._type = None
            return
        try:
            self._type = AlarmType(value)
        except ValueError:
            raise ValidationError(
                f"`type` must be either `display` or `audio`, got {value!r}"
            ) from None

    # -- trigger --------------------------------------------------------

    @property
    def trigger(self) -> StoredTrigger | None:
        """Seconds before the event starts, or an absolute ``datetime``.

        A negative number means the alarm fires after the event ends; see
        ``trigger_after``.
        """
        return triggers.from_storage(self._trigger)

    @trigger.setter
    def trigger(self, value: Any) -> None:
        self._trigger = triggers.to_storage(value)

    @property
    def trigger_before(self) -> StoredTrigger | None:
        """Same as ``trigger``."""
        return self.trigger

    @trigger_before.setter
    def trigger_before(self, value: Any) -> None:
        self.trigger = value

    @property
    def trigger_after(self) -> StoredTrigger | None:
        """Seconds after the event ends (negative: before it starts)."""
        return self._trigger

    @trigger_after.setter
    def trigger_after(self, value: Any) -> None:
        self._trigger = triggers.to_storage_after(value)

    # -- repeat / interval ----------------------------------------------

    @property
    def repeat(self) -> int | None:
        """How many more times the alarm fires after the first time."""
        return self._repeat

    @repeat.setter
    def repeat(self, value: Any) -> None:
        self._repeat = _positive_int("repeat", value)

    @property
    def interval(self) -> int | None:
        """Seconds between repetitions."""
        return self._interval

    @interval.setter
    def interval(self, value: Any) -> None:
        if isinstance(value, timedelta):
            value = value.total_seconds()
        self._interval = _positive_int("interval", value)

    # -- attach / description -------------------------------------------

    @property
    def attach(self) -> AlarmAttachment | None:
        return self._attach

    @attach.setter
    def attach(self, value: str | Mapping[str, Any] | AlarmAttachment | None) -> None:
        if not value:
            self._attach = None
            return

        if isinstance(value, AlarmAttachment):
            uri, mime = value.uri, value.mime
        elif isinstance(value, str):
            uri, mime = value, None
        elif isinstance(value, Mapping):
            uri, mime = value.get("uri"), value.get("mime") or None
        else:
            raise ValidationError(
                "`attach` must be a URI string or a mapping with `uri` and optional `mime`"
            )

        if not uri:
            raise ValidationError("`attach.uri` is empty")
        if not isinstance(uri, str) or not (mime is None or isinstance(mime, str)):
            raise ValidationError("`attach.uri` and `attach.mime` must be strings")
        self._attach = AlarmAttachment(uri=uri, mime=mime)

    @property
    def description(self) -> str | None:
        return self._description

    @description.setter
    def description(self, value: str | None) -> None:
        if value is not None and not isinstance(value, str):
            raise ValidationError(f"`description` must be a string, got {type(value).__name__}")
        self._description = value or None

    # -- custom attributes ------------------------------------------------

    @property
    def x(self) -> list[dict[str, str]]:
        """All X- attributes, in the order they were added."""
        return self._x.to_list()

    def add_x(self, key_or_pairs: Any, value: str | None = None) -> "Alarm":
        """Add X- attributes.

        Either ``add_x("X-KEY", "value")`` for one pair, or
        ``add_x({...})`` / ``add_x([{"key": ..., "value": ...}])`` for
        several. Keys already added by other means are not filtered, so the
        same property may be rendered twice.
        """
        if isinstance(key_or_pairs, str):
            if not isinstance(value, str):
                raise ValidationError("Either key or value is not a string")
            self._x.add(key_or_pairs, value)
        elif value is None:
            self._x.merge(key_or_pairs)
        else:
            raise ValidationError("Either key or value is not a string")
        return self

    # -- export -----------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        """Plain snapshot; ``Alarm(event, alarm.to_dict())`` rebuilds the alarm."""
        return {
            "type": self._type.value if self._type else None,
            "trigger": self.trigger,
            "repeat": self._repeat,
            "interval": self._interval,
            "attach": self._attach.model_dump() if self._attach else None,
            "description": self._description,
            "x": self.x,
        }

    def to_ical(self, config: RenderConfig | None = None) -> str:
        """Render the VALARM block.

        Raises:
            SerializationPreconditionError: type or trigger missing, or only
                one of repeat/interval set.
        """
        config = config or RenderConfig()

        if not self._type:
            raise SerializationPreconditionError("No value for `type` in alarm given")
        if self._trigger is None:
            raise SerializationPreconditionError("No value for `trigger` in alarm given")
        if self._repeat and not self._interval:
            raise SerializationPreconditionError("`interval` is required for `repeat`")
        if self._interval and not self._repeat:
            raise SerializationPreconditionError("`repeat` is required for `interval`")

        lines = [
            "BEGIN:VALARM",
            f"ACTION:{self._type.value.upper()}",
            triggers.render(self._trigger, self._event.timezone()),
        ]

        if self._repeat:
            lines.append(f"REPEAT:{self._repeat}")
        if self._interval:
            lines.append(f"DURATION:{format_duration(self._interval)}")

        if self._type is AlarmType.AUDIO:
            if self._attach and self._attach.mime:
                lines.append(f"ATTACH;FMTTYPE={self._attach.mime}:{self._attach.uri}")
            elif self._attach:
                lines.append(f"ATTACH;VALUE=URI:{self._attach.uri}")
            else:
                lines.append(f"ATTACH;VALUE=URI:{config.default_audio_attachment}")

        if self._type is AlarmType.DISPLAY:
            text = self._description or self._event.summary()
            lines.append(f"DESCRIPTION:{escape(text)}")

        body = CRLF.join(lines) + CRLF + self._x.render() + "END:VALARM" + CRLF
        logger.debug(f"Rendered {self._type.value} alarm ({len(self._x)} custom attributes)")
        return body

    def __str__(self) -> str:
        return self.to_ical()

    def __repr__(self) -> str:
        kind = self._type.value if self._type else None
        return f"Alarm(type={kind!r}, trigger={self.trigger!r})"


def _positive_int(name: str, value: Any) -> int | None:
    if isinstance(value, bool):
        raise ValidationError(f"`{name}` must be a positive integer, got {value!r}")
    if not value:
        return None
    if isinstance(value, (int, float)):
        require_finite(name, value)
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if not isinstance(value, int) or value < 0:
        raise ValidationError(f"`{name}` must be a positive integer, got {value!r}")
    return value
