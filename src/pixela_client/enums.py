"""Enumerations for Pixela graph and webhook settings.

Members carry no wire representation of their own; see
:mod:`pixela_client.wire` for the strings the API expects.
"""

from enum import Enum, auto


class GraphType(Enum):
    """Type of quantity a graph records."""

    INT = auto()
    FLOAT = auto()


class GraphColor(Enum):
    """Display color of a graph's pixels."""

    GREEN = auto()
    RED = auto()
    BLUE = auto()
    YELLOW = auto()
    PURPLE = auto()
    BLACK = auto()


class SufficientType(Enum):
    """Self-sufficient mode.

    When the SVG of a self-sufficient graph is viewed, today's pixel is
    incremented or decremented by the server itself.
    """

    INCREMENT = auto()
    DECREMENT = auto()
    NONE = auto()


class DisplayMode(Enum):
    """SVG rendering variants accepted by the graph ``mode`` query."""

    SHORT = auto()
    BADGE = auto()
    LINE = auto()


class WebhookType(Enum):
    """Action a webhook performs on today's pixel when invoked."""

    INCREMENT = auto()
    DECREMENT = auto()
    ADD = auto()
    SUBTRACT = auto()
