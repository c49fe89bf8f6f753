"""Tests for Alarm construction and field setters."""

from datetime import timedelta

import pytest

from icalarm.alarm import Alarm, AlarmAttachment, AlarmType, StaticEventContext
from icalarm.errors import ConstructionError, ValidationError


# ============================================================================
# Construction
# ============================================================================


def test_requires_event():
    with pytest.raises(ConstructionError):
        Alarm(None)


def test_defaults(alarm):
    assert alarm.type is None
    assert alarm.trigger is None
    assert alarm.repeat is None
    assert alarm.interval is None
    assert alarm.attach is None
    assert alarm.description is None
    assert alarm.x == []


def test_initial_data_and_kwargs(event):
    alarm = Alarm(event, {"type": "audio", "triggerBefore": 120}, repeat=2, interval=30)

    assert alarm.type is AlarmType.AUDIO
    assert alarm.trigger == 120
    assert alarm.repeat == 2
    assert alarm.interval == 30


def test_initial_data_unknown_key(event):
    with pytest.raises(ValidationError, match="summary"):
        Alarm(event, {"type": "display", "summary": "nope"})


def test_set_returns_alarm(alarm):
    assert alarm.set(type="display", description="Hi") is alarm
    assert alarm.description == "Hi"


def test_event_is_kept(event):
    assert Alarm(event).event is event


# ============================================================================
# type
# ============================================================================


@pytest.mark.parametrize("value", ["display", "audio", AlarmType.DISPLAY, AlarmType.AUDIO])
def test_type_roundtrip(alarm, value):
    alarm.type = value
    assert alarm.type == AlarmType(value)


def test_type_none_clears(alarm):
    alarm.type = "display"
    alarm.type = None
    assert alarm.type is None


@pytest.mark.parametrize("value", ["email", "DISPLAY", 1])
def test_type_invalid(alarm, value):
    with pytest.raises(ValidationError):
        alarm.type = value


def test_type_invalid_keeps_previous(alarm):
    alarm.type = "audio"
    with pytest.raises(ValidationError):
        alarm.type = "procedure"
    assert alarm.type is AlarmType.AUDIO


# ============================================================================
# repeat / interval
# ============================================================================


def test_repeat_and_interval(alarm):
    alarm.repeat = 3
    alarm.interval = 60
    assert alarm.repeat == 3
    assert alarm.interval == 60


def test_repeat_clear(alarm):
    alarm.repeat = 3
    alarm.repeat = None
    assert alarm.repeat is None
    alarm.repeat = 3
    alarm.repeat = 0
    assert alarm.repeat is None


def test_interval_accepts_timedelta_and_integral_float(alarm):
    alarm.interval = timedelta(minutes=2)
    assert alarm.interval == 120
    alarm.interval = 90.0
    assert alarm.interval == 90
    assert isinstance(alarm.interval, int)


@pytest.mark.parametrize("value", [-1, 1.5, float("inf"), float("nan"), "3", True])
def test_repeat_invalid(alarm, value):
    with pytest.raises(ValidationError):
        alarm.repeat = value


@pytest.mark.parametrize("value", [-60, 0.5, float("inf"), "60", [60]])
def test_interval_invalid(alarm, value):
    with pytest.raises(ValidationError):
        alarm.interval = value


# ============================================================================
# attach
# ============================================================================


def test_attach_string(alarm):
    alarm.attach = "http://x/y.mp3"
    assert alarm.attach == AlarmAttachment(uri="http://x/y.mp3", mime=None)


def test_attach_mapping(alarm):
    alarm.attach = {"uri": "http://x/y.mp3", "mime": "audio/mpeg"}
    assert alarm.attach.uri == "http://x/y.mp3"
    assert alarm.attach.mime == "audio/mpeg"


def test_attach_model(alarm):
    attachment = AlarmAttachment(uri="file:///tmp/ding.wav")
    alarm.attach = attachment
    assert alarm.attach == attachment


def test_attach_clear(alarm):
    alarm.attach = "http://x/y.mp3"
    alarm.attach = None
    assert alarm.attach is None


@pytest.mark.parametrize("value", [{"uri": ""}, {"mime": "audio/mpeg"}, {"uri": None}])
def test_attach_empty_uri(alarm, value):
    with pytest.raises(ValidationError, match="empty"):
        alarm.attach = value


@pytest.mark.parametrize("value", [42, ["http://x/y.mp3"], {"uri": 5}])
def test_attach_wrong_shape(alarm, value):
    with pytest.raises(ValidationError):
        alarm.attach = value


# ============================================================================
# description
# ============================================================================


def test_description(alarm):
    alarm.description = "Bring slides"
    assert alarm.description == "Bring slides"
    alarm.description = None
    assert alarm.description is None


def test_description_not_validated_for_content(alarm):
    alarm.description = "semi;colon, comma\nnewline"
    assert alarm.description == "semi;colon, comma\nnewline"


def test_description_must_be_string(alarm):
    with pytest.raises(ValidationError):
        alarm.description = 12


# ============================================================================
# Snapshot
# ============================================================================


def test_to_dict(event):
    alarm = Alarm(
        event,
        type="audio",
        trigger_after=300,
        repeat=2,
        interval=60,
        attach={"uri": "http://x/y.mp3", "mime": "audio/mpeg"},
    )
    alarm.add_x("X-ONE", "1")

    assert alarm.to_dict() == {
        "type": "audio",
        "trigger": -300,
        "repeat": 2,
        "interval": 60,
        "attach": {"uri": "http://x/y.mp3", "mime": "audio/mpeg"},
        "description": None,
        "x": [{"key": "X-ONE", "value": "1"}],
    }


def test_to_dict_rebuilds_same_alarm(event):
    original = Alarm(event, type="display", trigger_after=900, description="Wrap up")
    original.add_x("X-A", "1")

    rebuilt = Alarm(event, original.to_dict())

    assert rebuilt.to_dict() == original.to_dict()
    assert rebuilt.to_ical() == original.to_ical()


def test_to_dict_is_a_copy(display_alarm):
    snapshot = display_alarm.to_dict()
    snapshot["x"].append({"key": "X-LATE", "value": "1"})
    assert display_alarm.x == []


def test_repr(display_alarm):
    assert repr(display_alarm) == "Alarm(type='display', trigger=600)"


def test_static_event_context_satisfies_protocol():
    from icalarm.alarm import EventContext

    assert isinstance(StaticEventContext(), EventContext)


@pytest.mark.parametrize("name", ["repeat", "interval"])
def test_repeat_interval_too_large_int(alarm, name):
    with pytest.raises(ValidationError, match="too large"):
        setattr(alarm, name, 10**400)
    assert getattr(alarm, name) is None
