"""
icalarm - iCalendar VALARM generation
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

from loguru import logger


def _get_version() -> str:
    """Installed version, falling back to pyproject.toml for source checkouts."""
    try:
        return version("icalarm")
    except PackageNotFoundError:
        pass
    pyproject_path = Path(__file__).parent.parent / "pyproject.toml"
    if pyproject_path.exists():
        import tomllib

        data = tomllib.loads(pyproject_path.read_text())
        return data["project"]["version"]
    return "0.0.0-unknown"


__version__ = _get_version()

# Silent unless the application opts in (see icalarm.logging_config).
logger.disable("icalarm")

from icalarm.alarm import Alarm, AlarmAttachment, AlarmType, EventContext, StaticEventContext  # noqa: E402
from icalarm.errors import (  # noqa: E402
    ConstructionError,
    IcalAlarmError,
    SerializationPreconditionError,
    ValidationError,
)

__all__ = [
    "Alarm",
    "AlarmAttachment",
    "AlarmType",
    "EventContext",
    "StaticEventContext",
    "IcalAlarmError",
    "ConstructionError",
    "ValidationError",
    "SerializationPreconditionError",
    "__version__",
]
