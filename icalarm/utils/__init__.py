"""Utility functions for icalarm."""

from icalarm.utils.custom_attributes import CustomAttributeStore, property_name
from icalarm.utils.text import escape, format_date, format_duration, resolve_timezone

__all__ = [
    "CustomAttributeStore",
    "property_name",
    "escape",
    "format_date",
    "format_duration",
    "resolve_timezone",
]
