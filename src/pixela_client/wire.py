"""Wire-format helpers: enum strings, dates and quantities.

All functions are pure (no I/O, no network calls).
"""

from __future__ import annotations

import numbers
from datetime import date, datetime
from enum import Enum
from typing import TypeVar, Union

from pixela_client.enums import (
    DisplayMode,
    GraphColor,
    GraphType,
    SufficientType,
    WebhookType,
)

E = TypeVar("E", bound=Enum)

Quantity = Union[int, float]

_GRAPH_TYPE_KEYS = {
    GraphType.INT: "int",
    GraphType.FLOAT: "float",
}

# Pixela names its colors after Japanese seasonal motifs.
_GRAPH_COLOR_KEYS = {
    GraphColor.GREEN: "shibafu",
    GraphColor.RED: "momiji",
    GraphColor.BLUE: "sora",
    GraphColor.YELLOW: "ichou",
    GraphColor.PURPLE: "ajisai",
    GraphColor.BLACK: "kuro",
}

_SUFFICIENT_TYPE_KEYS = {
    SufficientType.INCREMENT: "increment",
    SufficientType.DECREMENT: "decrement",
    SufficientType.NONE: "none",
}

_DISPLAY_MODE_KEYS = {
    DisplayMode.SHORT: "short",
    DisplayMode.BADGE: "badge",
    DisplayMode.LINE: "line",
}

_WEBHOOK_TYPE_KEYS = {
    WebhookType.INCREMENT: "increment",
    WebhookType.DECREMENT: "decrement",
    WebhookType.ADD: "add",
    WebhookType.SUBTRACT: "subtract",
}

_KEYS_BY_ENUM: dict[type, dict] = {
    GraphType: _GRAPH_TYPE_KEYS,
    GraphColor: _GRAPH_COLOR_KEYS,
    SufficientType: _SUFFICIENT_TYPE_KEYS,
    DisplayMode: _DISPLAY_MODE_KEYS,
    WebhookType: _WEBHOOK_TYPE_KEYS,
}


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


def as_wire(member: Enum) -> str:
    """Return the string Pixela expects for *member*."""
    try:
        return _KEYS_BY_ENUM[type(member)][member]
    except KeyError:
        raise ValueError(f"No wire string for {member!r}") from None


def from_wire(enum_cls: type[E], value: str) -> E:
    """Inverse of :func:`as_wire`. Raises ``ValueError`` on unknown strings."""
    keys = _KEYS_BY_ENUM.get(enum_cls)
    if keys is None:
        raise ValueError(f"{enum_cls.__name__} has no wire mapping")
    for member, key in keys.items():
        if key == value:
            return member
    raise ValueError(f"Unknown {enum_cls.__name__} value: {value!r}")


# ---------------------------------------------------------------------------
# Dates
# ---------------------------------------------------------------------------


def format_date(value: date) -> str:
    """Format a calendar date as ``yyyyMMdd`` (e.g. 2024-03-05 → ``20240305``).

    ``datetime`` values are accepted; their time-of-day is dropped.
    """
    if isinstance(value, datetime):
        value = value.date()
    return f"{value.year:04d}{value.month:02d}{value.day:02d}"


def parse_date(value: str) -> date:
    """Parse a ``yyyyMMdd`` string into a :class:`date`.

    ``yyyy-MM-dd`` is tolerated; some stats fields come back in that form.
    """
    text = str(value).strip()
    if len(text) == 10 and text[4] == text[7] == "-":
        text = text[:4] + text[5:7] + text[8:]
    if len(text) != 8 or not text.isdigit():
        raise ValueError(f"Not a yyyyMMdd date: {value!r}")
    return date(int(text[:4]), int(text[4:6]), int(text[6:]))


# ---------------------------------------------------------------------------
# Quantities
# ---------------------------------------------------------------------------


def format_quantity(quantity: Quantity) -> str:
    """Serialize an integer or floating quantity as its textual form."""
    if isinstance(quantity, bool) or not isinstance(quantity, numbers.Real):
        raise TypeError(f"quantity must be int or float, got {type(quantity).__name__}")
    return str(quantity)


def parse_quantity(value: str | int | float) -> Quantity:
    """Parse a wire quantity: ``"5"`` → 5, ``"1.5"`` → 1.5."""
    if isinstance(value, bool):
        raise ValueError(f"Not a quantity: {value!r}")
    if isinstance(value, (int, float)):
        return value
    text = str(value).strip()
    try:
        return int(text)
    except ValueError:
        return float(text)
