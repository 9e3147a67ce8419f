"""Request parameter assembly.

Optional arguments in the Pixela API are "include only if present": an
absent or blank value must not appear in the request at all, since the
server treats an empty string as a real value.
"""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Any, Optional

from pixela_client.wire import as_wire, format_date


def _to_wire(value: Any) -> Any:
    """Convert dates and enum members to their wire strings; pass others through."""
    if isinstance(value, Enum):
        return as_wire(value)
    if isinstance(value, date):
        return format_date(value)
    return value


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


class ParameterBuilder:
    """Collects key → wire-value pairs for one request."""

    def __init__(self, required: Optional[dict[str, Any]] = None) -> None:
        self._params: dict[str, Any] = {}
        for key, value in (required or {}).items():
            self.add(key, value)

    def add(self, key: str, value: Any) -> ParameterBuilder:
        """Always include *key*."""
        self._params[key] = _to_wire(value)
        return self

    def add_optional(self, key: str, value: Any) -> ParameterBuilder:
        """Include *key* unless *value* is None or a blank string."""
        if not _is_blank(value):
            self._params[key] = _to_wire(value)
        return self

    def build(self) -> dict[str, Any]:
        return dict(self._params)

    def __len__(self) -> int:
        return len(self._params)
