"""Ordered store for X- extension properties."""

import re
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from icalarm.errors import ValidationError
from icalarm.utils.text import escape

CRLF = "\r\n"
_X_NAME = re.compile(r"[A-Za-z0-9-]+")


class CustomAttributeStore:
    """Ordered list of (key, value) pairs rendered as ``X-`` lines.

    Keys are kept exactly as given; duplicates are allowed and all of them
    are rendered, in insertion order.
    """

    def __init__(self, pairs: Any = None):
        self._pairs: list[tuple[str, str]] = []
        if pairs:
            self.merge(pairs)

    def add(self, key: str, value: str) -> None:
        """Append one pair."""
        if not isinstance(key, str) or not isinstance(value, str):
            raise ValidationError("Custom attribute key and value must both be strings")
        if not key or key.upper() == "X-":
            raise ValidationError("Custom attribute key must not be empty")
        if not _X_NAME.fullmatch(key):
            raise ValidationError(f"Custom attribute key may only hold letters, digits and `-`: {key!r}")
        self._pairs.append((key, value))

    def merge(self, pairs: Mapping[str, str] | Iterable[Any]) -> None:
        """Append several pairs from a mapping or a list.

        List items may be ``{"key": ..., "value": ...}`` dicts or
        ``(key, value)`` tuples.
        """
        if isinstance(pairs, Mapping):
            items = list(pairs.items())
        elif isinstance(pairs, (str, bytes)) or not isinstance(pairs, Iterable):
            raise ValidationError(
                "Custom attributes must be a mapping or a list of key/value pairs"
            )
        else:
            items = [self._as_pair(item) for item in pairs]

        # validate everything before touching the store
        staged = CustomAttributeStore()
        for key, value in items:
            staged.add(key, value)
        self._pairs.extend(staged._pairs)

    @staticmethod
    def _as_pair(item: Any) -> tuple[Any, Any]:
        if isinstance(item, Mapping):
            if "key" not in item or "value" not in item:
                raise ValidationError("Custom attribute entries need `key` and `value`")
            return item["key"], item["value"]
        if isinstance(item, (tuple, list)) and len(item) == 2:
            return item[0], item[1]
        raise ValidationError(f"Not a key/value pair: {item!r}")

    def to_list(self) -> list[dict[str, str]]:
        """Plain copy as ``[{"key": ..., "value": ...}]``."""
        return [{"key": key, "value": value} for key, value in self._pairs]

    def render(self) -> str:
        """Render one ``X-KEY:VALUE`` line per pair, CRLF-terminated."""
        return "".join(
            f"{property_name(key)}:{escape(value)}{CRLF}" for key, value in self._pairs
        )

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)


def property_name(key: str) -> str:
    """Upper-cased property name, adding the ``X-`` prefix when missing."""
    name = key.upper()
    return name if name.startswith("X-") else f"X-{name}"
