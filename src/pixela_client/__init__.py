"""Pixela API client — all Pixela network I/O lives here."""

from pixela_client.client import PixelaClient
from pixela_client.enums import (
    DisplayMode,
    GraphColor,
    GraphType,
    SufficientType,
    WebhookType,
)
from pixela_client.exceptions import (
    PixelaAPIError,
    PixelaAuthError,
    PixelaClientError,
    PixelaDecodeError,
    PixelaTransportError,
)
from pixela_client.models import ApiResponse, Graph, GraphStats, Pixel, Webhook

__all__ = [
    "PixelaClient",
    "DisplayMode",
    "GraphColor",
    "GraphType",
    "SufficientType",
    "WebhookType",
    "PixelaAPIError",
    "PixelaAuthError",
    "PixelaClientError",
    "PixelaDecodeError",
    "PixelaTransportError",
    "ApiResponse",
    "Graph",
    "GraphStats",
    "Pixel",
    "Webhook",
]
