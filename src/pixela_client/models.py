"""Response records for the Pixela API.

Each record is a frozen dataclass with a ``from_dict`` factory that takes
the decoded JSON object. Factories raise ``KeyError``, ``TypeError`` or
``ValueError`` on a malformed payload; :class:`~pixela_client.client.PixelaClient`
turns those into :class:`~pixela_client.exceptions.PixelaDecodeError`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Mapping, Optional

from pixela_client.enums import GraphColor, GraphType, SufficientType, WebhookType
from pixela_client.wire import Quantity, from_wire, parse_date, parse_quantity


def _require_mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise TypeError(f"{what} payload must be a JSON object, got {type(data).__name__}")
    return data


@dataclass(frozen=True)
class ApiResponse:
    """Generic envelope: ``{"message": ..., "isSuccess": ...}`` plus extra fields.

    Resource-specific fields (``graphs``, ``pixels``, ``webhookHash`` ...)
    land in ``extends`` untouched.
    """

    message: str = ""
    is_success: bool = True
    extends: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> ApiResponse:
        data = _require_mapping(data, "ApiResponse")
        extends = {k: v for k, v in data.items() if k not in ("message", "isSuccess")}
        return cls(
            message=str(data.get("message", "")),
            is_success=bool(data.get("isSuccess", True)),
            extends=extends,
        )

    def extension(self, key: str) -> Any:
        """Return an extension field, raising ``KeyError`` if the server omitted it."""
        if key not in self.extends:
            raise KeyError(f"Response has no {key!r} field")
        return self.extends[key]


@dataclass(frozen=True)
class Graph:
    """A pixelation graph definition."""

    id: str
    name: str
    unit: str
    type: GraphType
    color: GraphColor
    timezone: str = "UTC"
    self_sufficient: SufficientType = SufficientType.NONE
    purge_cache_urls: tuple[str, ...] = ()
    is_secret: bool = False
    publish_optional_data: bool = False

    @classmethod
    def from_dict(cls, data: Any) -> Graph:
        data = _require_mapping(data, "Graph")
        return cls(
            id=data["id"],
            name=data["name"],
            unit=data["unit"],
            type=from_wire(GraphType, data["type"]),
            color=from_wire(GraphColor, data["color"]),
            timezone=data.get("timezone") or "UTC",
            self_sufficient=from_wire(
                SufficientType, data.get("selfSufficient") or "none"
            ),
            purge_cache_urls=tuple(data.get("purgeCacheURLs") or ()),
            is_secret=bool(data.get("isSecret", False)),
            publish_optional_data=bool(data.get("publishOptionalData", False)),
        )


@dataclass(frozen=True)
class Pixel:
    """One day's recorded quantity on a graph."""

    graph_id: str
    date: date
    quantity: Quantity
    optional_data: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any, graph_id: str, pixel_date: date) -> Pixel:
        data = _require_mapping(data, "Pixel")
        return cls(
            graph_id=graph_id,
            date=pixel_date,
            quantity=parse_quantity(data["quantity"]),
            optional_data=data.get("optionalData") or None,
        )


@dataclass(frozen=True)
class GraphStats:
    """Aggregate statistics for a graph. Read-only."""

    total_pixels_count: int
    max_quantity: Quantity
    min_quantity: Quantity
    total_quantity: Quantity
    avg_quantity: float
    todays_quantity: Quantity
    max_date: Optional[date] = None
    min_date: Optional[date] = None

    @classmethod
    def from_dict(cls, data: Any) -> GraphStats:
        data = _require_mapping(data, "GraphStats")
        return cls(
            total_pixels_count=int(data["totalPixelsCount"]),
            max_quantity=parse_quantity(data["maxQuantity"]),
            min_quantity=parse_quantity(data["minQuantity"]),
            total_quantity=parse_quantity(data["totalQuantity"]),
            avg_quantity=float(data["avgQuantity"]),
            todays_quantity=parse_quantity(data.get("todaysQuantity", 0)),
            max_date=_optional_date(data.get("maxDate")),
            min_date=_optional_date(data.get("minDate")),
        )


@dataclass(frozen=True)
class Webhook:
    """A registered webhook that adjusts today's pixel when invoked."""

    webhook_hash: str
    graph_id: str
    type: WebhookType
    quantity: Optional[Quantity] = None

    @classmethod
    def from_dict(cls, data: Any) -> Webhook:
        data = _require_mapping(data, "Webhook")
        quantity = data.get("quantity")
        return cls(
            webhook_hash=data["webhookHash"],
            graph_id=data["graphID"],
            type=from_wire(WebhookType, data["type"]),
            quantity=parse_quantity(quantity) if quantity not in (None, "") else None,
        )


def _optional_date(value: Any) -> Optional[date]:
    if not value:
        return None
    return parse_date(value)
