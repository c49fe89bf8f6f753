"""Models for the alarm component."""

from dataclasses import dataclass
from datetime import tzinfo
from enum import Enum
from typing import Protocol, runtime_checkable

from pydantic import BaseModel, Field


class AlarmType(str, Enum):
    """What the client does when the alarm fires."""
    DISPLAY = "display"
    AUDIO = "audio"


class AlarmAttachment(BaseModel):
    """Sound resource for an audio alarm."""

    uri: str = Field(min_length=1)
    mime: str | None = None

    model_config = {"frozen": True}


@runtime_checkable
class EventContext(Protocol):
    """The part of the owning event an alarm needs when rendering."""

    def timezone(self) -> str | tzinfo | None:
        """Timezone used for absolute triggers; ``None`` means UTC."""
        ...

    def summary(self) -> str:
        """Fallback text for display alarms without a description."""
        ...


@dataclass(frozen=True)
class StaticEventContext:
    """EventContext backed by fixed values."""

    summary_text: str = ""
    tz: str | tzinfo | None = None

    def timezone(self) -> str | tzinfo | None:
        return self.tz

    def summary(self) -> str:
        return self.summary_text
