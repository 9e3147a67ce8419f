"""Graph definitions: create, list, render, update, delete, inspect."""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from pixela_client.api_client import ApiClient
from pixela_client.enums import DisplayMode, GraphColor, GraphType, SufficientType
from pixela_client.models import ApiResponse, Graph, GraphStats
from pixela_client.params import ParameterBuilder
from pixela_client.wire import parse_date

logger = logging.getLogger(__name__)


class GraphsClient(ApiClient):
    """Operations on ``/v1/users/{username}/graphs``."""

    def create(
        self,
        id: str,
        name: str,
        unit: str,
        type: GraphType,
        color: GraphColor,
        timezone: Optional[str] = None,
        self_sufficient: Optional[SufficientType] = None,
    ) -> ApiResponse:
        """Create a new pixelation graph definition.

        Parameters
        ----------
        id : str
            Graph ID, ``^[a-z][a-z0-9-]{1,16}$``. Validated by the server.
        name : str
            Display name of the graph.
        unit : str
            Unit of the quantity (e.g. ``"steps"``).
        type : GraphType
            Whether quantities are integers or floats.
        color : GraphColor
            Display color of the pixels.
        timezone : str, optional
            Timezone for handling this graph; the server defaults to UTC.
        self_sufficient : SufficientType, optional
            Increment / decrement today's pixel whenever the SVG is viewed.
        """
        params = (
            ParameterBuilder({"id": id, "name": name, "unit": unit, "type": type, "color": color})
            .add_optional("timezone", timezone)
            .add_optional("selfSufficient", self_sufficient)
            .build()
        )
        response = self.client.send("POST", self._user_path("graphs"), params)
        logger.info("Created graph %s", id)
        return response

    def list(self) -> list[Graph]:
        """Return all graph definitions of the user."""
        return self.client.get(self._user_path("graphs"), parse=_parse_graphs)

    def show(
        self,
        graph_id: str,
        date: Optional[date] = None,
        mode: Optional[DisplayMode | str] = None,
    ) -> str:
        """Render the graph as an SVG document.

        *date* back-dates the rendering so that it ends on that day; *mode*
        selects a display variant.
        """
        params = (
            ParameterBuilder()
            .add_optional("date", date)
            .add_optional("mode", mode)
            .build()
        )
        return self.client.get_text(self._user_path("graphs", graph_id), params)

    def update(
        self,
        graph_id: str,
        name: Optional[str] = None,
        unit: Optional[str] = None,
        color: Optional[GraphColor] = None,
        timezone: Optional[str] = None,
        purge_cache_urls: Optional[Sequence[str]] = None,
        self_sufficient: Optional[SufficientType] = None,
    ) -> ApiResponse:
        """Update a graph definition. Only the given fields are sent.

        Pass an empty *purge_cache_urls* to clear the registered URLs.
        """
        params = (
            ParameterBuilder()
            .add_optional("name", name)
            .add_optional("unit", unit)
            .add_optional("color", color)
            .add_optional("timezone", timezone)
            .add_optional(
                "purgeCacheURLs",
                list(purge_cache_urls) if purge_cache_urls is not None else None,
            )
            .add_optional("selfSufficient", self_sufficient)
            .build()
        )
        response = self.client.send("PUT", self._user_path("graphs", graph_id), params)
        logger.info("Updated graph %s (%s)", graph_id, ", ".join(sorted(params)) or "no fields")
        return response

    def destroy(self, graph_id: str) -> ApiResponse:
        """Delete a graph definition and all of its pixels."""
        response = self.client.send("DELETE", self._user_path("graphs", graph_id))
        logger.info("Deleted graph %s", graph_id)
        return response

    def details(self, graph_id: str) -> str:
        """Return the URL of the graph's HTML detail page. No request is made."""
        return f"{self.client.base_url}{self._user_path('graphs', graph_id)}.html"

    def pixels(
        self,
        graph_id: str,
        from_: Optional[date] = None,
        to: Optional[date] = None,
    ) -> list[date]:
        """Return the dates that have a pixel registered.

        The server picks the window from the bounds that are sent:

        - neither: the 365 days ending today
        - only *from_*: 365 days forward from *from_*
        - only *to*: 365 days back from *to*
        - both: exactly ``[from_, to]``; spans over 365 days are rejected
          by the server
        """
        params = (
            ParameterBuilder()
            .add_optional("from", from_)
            .add_optional("to", to)
            .build()
        )
        return self.client.get(
            self._user_path("graphs", graph_id, "pixels"), params, parse=_parse_pixel_dates
        )

    def stats(self, graph_id: str) -> GraphStats:
        """Return aggregate statistics of the graph."""
        return self.client.get(
            self._user_path("graphs", graph_id, "stats"), parse=GraphStats.from_dict
        )


def _parse_graphs(data: object) -> list[Graph]:
    return [Graph.from_dict(g) for g in ApiResponse.from_dict(data).extension("graphs")]


def _parse_pixel_dates(data: object) -> list[date]:
    return [parse_date(d) for d in ApiResponse.from_dict(data).extension("pixels")]
