"""Base class for the resource clients."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pixela_client.client import PixelaClient


class ApiClient:
    """Holds the shared :class:`PixelaClient` and builds user-scoped paths."""

    def __init__(self, client: PixelaClient) -> None:
        self.client = client

    def _user_path(self, *parts: str) -> str:
        """Return ``/v1/users/{username}`` followed by ``/part`` for each part."""
        path = f"/v1/users/{self.client.username}"
        for part in parts:
            path += f"/{part}"
        return path
