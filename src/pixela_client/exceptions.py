"""Custom exception hierarchy for the Pixela client."""

from __future__ import annotations


class PixelaClientError(Exception):
    """Base exception for all pixela_client errors."""


class PixelaTransportError(PixelaClientError):
    """The request never produced a response (connection refused, timeout, etc.)."""


class PixelaAPIError(PixelaClientError):
    """Pixela answered with a non-success HTTP status."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body

    def __str__(self) -> str:
        base = super().__str__()
        if self.status_code is None:
            return base
        return f"[{self.status_code}] {base}"


class PixelaAuthError(PixelaAPIError):
    """HTTP 401 / 403 — the username or token was rejected."""


class PixelaDecodeError(PixelaClientError):
    """A response body could not be decoded into the expected shape."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body
