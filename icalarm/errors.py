"""Shared error types for icalarm.

Every error signals a caller mistake: fix the input and call again.
Nothing in the library catches or retries these.
"""


class IcalAlarmError(Exception):
    """Base error for icalarm."""


class ConstructionError(IcalAlarmError):
    """An alarm was created without its owning event."""


class ValidationError(IcalAlarmError, ValueError):
    """A field was given a malformed or out-of-range value."""


class SerializationPreconditionError(IcalAlarmError):
    """The alarm is incomplete or inconsistent and cannot be rendered."""
