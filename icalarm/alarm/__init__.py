"""VALARM component: reminders attached to a calendar event."""

from icalarm.alarm.alarm import Alarm
from icalarm.alarm.models import AlarmAttachment, AlarmType, EventContext, StaticEventContext

__all__ = [
    "Alarm",
    "AlarmAttachment",
    "AlarmType",
    "EventContext",
    "StaticEventContext",
]
