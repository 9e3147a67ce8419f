"""Webhooks: hashed URLs that adjust today's pixel without a token."""

from __future__ import annotations

import logging
from typing import Any, Optional

from pixela_client.api_client import ApiClient
from pixela_client.enums import WebhookType
from pixela_client.models import ApiResponse, Webhook
from pixela_client.params import ParameterBuilder
from pixela_client.wire import Quantity, format_quantity

logger = logging.getLogger(__name__)

# Only these types carry a quantity; increment / decrement always move by one.
_QUANTITY_TYPES = frozenset({WebhookType.ADD, WebhookType.SUBTRACT})


class WebhooksClient(ApiClient):
    """Operations on ``/v1/users/{username}/webhooks``."""

    def create(
        self,
        graph_id: str,
        type: WebhookType,
        quantity: Optional[Quantity] = None,
    ) -> str:
        """Register a webhook for *graph_id* and return its hash."""
        if type in _QUANTITY_TYPES and quantity is None:
            raise ValueError(f"{type.name} webhooks need a quantity")
        builder = ParameterBuilder({"graphID": graph_id, "type": type})
        if type in _QUANTITY_TYPES:
            builder.add("quantity", format_quantity(quantity))
        webhook_hash = self.client.send(
            "POST", self._user_path("webhooks"), builder.build(), parse=_parse_hash
        )
        logger.info("Created %s webhook for %s", type.name.lower(), graph_id)
        return webhook_hash

    def list(self) -> list[Webhook]:
        """Return all webhooks of the user."""
        return self.client.get(self._user_path("webhooks"), parse=_parse_webhooks)

    def invoke(self, webhook_hash: str) -> ApiResponse:
        """Fire a webhook. No token is sent; the hash is the credential."""
        return self.client.send(
            "POST", self._user_path("webhooks", webhook_hash), authenticated=False
        )

    def delete(self, webhook_hash: str) -> ApiResponse:
        response = self.client.send("DELETE", self._user_path("webhooks", webhook_hash))
        logger.info("Deleted webhook %s", webhook_hash)
        return response


def _parse_hash(data: Any) -> str:
    return str(ApiResponse.from_dict(data).extension("webhookHash"))


def _parse_webhooks(data: Any) -> list[Webhook]:
    return [Webhook.from_dict(w) for w in ApiResponse.from_dict(data).extension("webhooks")]
