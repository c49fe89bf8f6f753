"""Shared fixtures for alarm tests."""

import pytest
from loguru import logger

from icalarm.alarm import Alarm, StaticEventContext


@pytest.fixture
def event():
    """Event without timezone, with a summary that needs escaping."""
    return StaticEventContext(summary_text="Standup; room 4, floor 2")


@pytest.fixture
def berlin_event():
    """Event pinned to Europe/Berlin."""
    return StaticEventContext(summary_text="Lunch", tz="Europe/Berlin")


@pytest.fixture
def alarm(event):
    """Empty alarm bound to ``event``."""
    return Alarm(event)


@pytest.fixture
def display_alarm(event):
    """Display alarm firing 10 minutes before the event."""
    return Alarm(event, type="display", trigger=600)


@pytest.fixture
def audio_alarm(event):
    """Audio alarm firing 5 minutes before the event."""
    return Alarm(event, type="audio", trigger=300)


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo setup_logging() so sinks never outlive a test's captured stderr."""
    yield
    logger.remove()
    logger.disable("icalarm")
