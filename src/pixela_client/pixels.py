"""Pixels: one recorded quantity per graph per day."""

from __future__ import annotations

import logging
from datetime import date
from functools import partial
from typing import Optional

from pixela_client.api_client import ApiClient
from pixela_client.models import ApiResponse, Pixel
from pixela_client.params import ParameterBuilder
from pixela_client.wire import Quantity, format_date, format_quantity

logger = logging.getLogger(__name__)


class PixelClient(ApiClient):
    """Operations on ``/v1/users/{username}/graphs/{graph_id}/...`` pixels.

    Quantities may be ``int`` or ``float``; either is sent as its string
    form, which is what Pixela expects for both graph types.
    """

    def create(
        self,
        graph_id: str,
        date: date,
        quantity: Quantity,
        optional_data: Optional[str] = None,
    ) -> ApiResponse:
        """Record *quantity* for *date* as a pixel.

        *optional_data* is free-form extra information (usually JSON) stored
        next to the quantity.
        """
        params = (
            ParameterBuilder({"date": date, "quantity": format_quantity(quantity)})
            .add_optional("optionalData", optional_data)
            .build()
        )
        response = self.client.send("POST", self._user_path("graphs", graph_id), params)
        logger.info("Recorded %s on %s for %s", params["quantity"], params["date"], graph_id)
        return response

    def show(self, graph_id: str, date: date) -> Pixel:
        """Fetch the pixel registered on *date*."""
        return self.client.get(
            self._pixel_path(graph_id, date),
            parse=partial(Pixel.from_dict, graph_id=graph_id, pixel_date=date),
        )

    def update(
        self,
        graph_id: str,
        date: date,
        quantity: Quantity,
        optional_data: Optional[str] = None,
    ) -> ApiResponse:
        """Overwrite the quantity (and optional data) of an existing pixel."""
        params = (
            ParameterBuilder({"quantity": format_quantity(quantity)})
            .add_optional("optionalData", optional_data)
            .build()
        )
        response = self.client.send("PUT", self._pixel_path(graph_id, date), params)
        logger.info("Updated %s on %s to %s", graph_id, format_date(date), params["quantity"])
        return response

    def increment(self, graph_id: str) -> ApiResponse:
        """Increment today's pixel by one unit (the day is taken in UTC)."""
        return self.client.send("PUT", self._user_path("graphs", graph_id, "increment"))

    def decrement(self, graph_id: str) -> ApiResponse:
        """Decrement today's pixel by one unit (the day is taken in UTC)."""
        return self.client.send("PUT", self._user_path("graphs", graph_id, "decrement"))

    def destroy(self, graph_id: str, date: date) -> ApiResponse:
        """Delete the pixel registered on *date*."""
        response = self.client.send("DELETE", self._pixel_path(graph_id, date))
        logger.info("Deleted pixel %s on %s", graph_id, format_date(date))
        return response

    def _pixel_path(self, graph_id: str, pixel_date: date) -> str:
        return self._user_path("graphs", graph_id, format_date(pixel_date))
