"""Shared Pixela client: configuration plus the HTTP send primitives.

All Pixela network I/O goes through :meth:`PixelaClient.send`. Resource
clients (graphs, pixels, users, webhooks) hang off a ``PixelaClient``
instance and only build paths and parameters.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Callable, Optional, TypeVar

import requests

from pixela_client.exceptions import (
    PixelaAPIError,
    PixelaAuthError,
    PixelaClientError,
    PixelaDecodeError,
    PixelaTransportError,
)
from pixela_client.graphs import GraphsClient
from pixela_client.models import ApiResponse
from pixela_client.pixels import PixelClient
from pixela_client.users import UsersClient
from pixela_client.webhooks import WebhooksClient

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_BASE_URL = "https://pixe.la"
TOKEN_HEADER = "X-USER-TOKEN"

# Methods whose parameters travel in the query string rather than a JSON body.
_QUERY_METHODS = frozenset({"GET", "DELETE"})


class PixelaClient:
    """Facade over the Pixela REST API for one user.

    The username, token and base URL are fixed at construction; to switch
    tokens (see :meth:`UsersClient.update_token`) build a new client.

    Each client wraps one ``requests.Session``, which is not thread-safe.
    Use one client per thread rather than sharing an instance.
    """

    def __init__(
        self,
        username: str,
        token: str,
        base_url: str = DEFAULT_BASE_URL,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ) -> None:
        if not username:
            raise ValueError("username is required")
        self._username = username
        self._token = token
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._owns_session = session is None
        self._session = session if session is not None else requests.Session()

        self.graphs = GraphsClient(self)
        self.pixels = PixelClient(self)
        self.users = UsersClient(self)
        self.webhooks = WebhooksClient(self)

    @classmethod
    def from_env(cls, session: Optional[requests.Session] = None) -> PixelaClient:
        """Construct from ``PIXELA_USERNAME`` / ``PIXELA_TOKEN`` / ``PIXELA_BASE_URL`` / ``PIXELA_TIMEOUT``."""
        username = os.environ.get("PIXELA_USERNAME", "")
        token = os.environ.get("PIXELA_TOKEN", "")
        if not username or not token:
            raise PixelaClientError("PIXELA_USERNAME and PIXELA_TOKEN must be set")
        timeout_raw = os.environ.get("PIXELA_TIMEOUT", "")
        try:
            timeout = float(timeout_raw) if timeout_raw else None
        except ValueError as exc:
            raise PixelaClientError(f"PIXELA_TIMEOUT must be a number, got {timeout_raw!r}") from exc
        return cls(
            username=username,
            token=token,
            base_url=os.environ.get("PIXELA_BASE_URL", DEFAULT_BASE_URL),
            session=session,
            timeout=timeout,
        )

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def username(self) -> str:
        return self._username

    @property
    def token(self) -> str:
        return self._token

    @property
    def base_url(self) -> str:
        return self._base_url

    def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> PixelaClient:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"PixelaClient(username={self._username!r}, base_url={self._base_url!r})"

    # ------------------------------------------------------------------
    # Send primitives
    # ------------------------------------------------------------------

    def send(
        self,
        method: str,
        path: str,
        params: Optional[dict[str, Any]] = None,
        parse: Optional[Callable[[Any], T]] = ApiResponse.from_dict,
        authenticated: bool = True,
    ) -> Any:
        """Perform one request and decode the JSON body.

        Returns ``parse(json)``, or the decoded JSON itself when *parse* is
        None. Raises :class:`PixelaAPIError` on a non-2xx status,
        :class:`PixelaTransportError` when no response arrives and
        :class:`PixelaDecodeError` when the body does not fit *parse*.
        """
        response = self._request(method, path, params, authenticated)
        try:
            data = response.json()
        except ValueError as exc:
            raise PixelaDecodeError(
                f"{method} {path} returned a non-JSON body",
                status_code=response.status_code,
                body=response.text,
            ) from exc

        if parse is None:
            return data
        try:
            return parse(data)
        except (KeyError, TypeError, ValueError) as exc:
            raise PixelaDecodeError(
                f"{method} {path} returned an unexpected payload: {exc}",
                status_code=response.status_code,
                body=response.text,
            ) from exc

    def get(
        self,
        path: str,
        params: Optional[dict[str, Any]] = None,
        parse: Optional[Callable[[Any], T]] = ApiResponse.from_dict,
    ) -> Any:
        """GET *path* and decode the JSON body with *parse*."""
        return self.send("GET", path, params, parse=parse)

    def get_text(self, path: str, params: Optional[dict[str, Any]] = None) -> str:
        """GET *path* and return the raw body (e.g. an SVG document)."""
        return self._request(
            "GET", path, params, authenticated=True, accept="image/svg+xml"
        ).text

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _request(
        self,
        method: str,
        path: str,
        params: Optional[dict[str, Any]],
        authenticated: bool,
        accept: str = "application/json",
    ) -> requests.Response:
        method = method.upper()
        url = f"{self._base_url}{path}"
        headers = {"Accept": accept}
        if authenticated:
            headers[TOKEN_HEADER] = self._token

        kwargs: dict[str, Any] = {"headers": headers, "timeout": self._timeout}
        if params is not None:
            if method in _QUERY_METHODS:
                kwargs["params"] = params
            else:
                kwargs["json"] = params

        logger.debug("%s %s params=%s", method, path, sorted(params or {}))
        try:
            response = self._session.request(method, url, **kwargs)
        except requests.RequestException as exc:
            raise PixelaTransportError(f"{method} {path} failed: {exc}") from exc

        status = response.status_code
        logger.debug("%s %s -> %d", method, path, status)
        if not 200 <= status < 300:
            raise self._error_for(method, path, response)
        return response

    @staticmethod
    def _error_for(method: str, path: str, response: requests.Response) -> PixelaAPIError:
        """Build the exception for a non-2xx response."""
        status = response.status_code
        body = response.text
        message = body or f"HTTP {status}"
        try:
            payload = response.json()
        except ValueError:
            payload = None
        if isinstance(payload, dict) and payload.get("message"):
            message = str(payload["message"])

        logger.warning("%s %s failed with %d: %s", method, path, status, message)
        error_cls = PixelaAuthError if status in (401, 403) else PixelaAPIError
        return error_cls(message, status_code=status, body=body)
