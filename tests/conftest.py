"""Shared test fixtures: a PixelaClient wired to a mock HTTP session."""

from __future__ import annotations

import json
from typing import Any, Callable
from unittest.mock import MagicMock

import pytest

from pixela_client.client import PixelaClient

USERNAME = "a-know"
TOKEN = "thisissecret"


def make_response(
    status_code: int = 200,
    payload: Any = None,
    text: str | None = None,
) -> MagicMock:
    """Build a stand-in for ``requests.Response``.

    *payload* is returned by ``.json()``; when only *text* is given,
    ``.json()`` raises ``ValueError`` like requests does for non-JSON bodies.
    """
    response = MagicMock()
    response.status_code = status_code
    if payload is not None:
        response.json.return_value = payload
        response.text = json.dumps(payload) if text is None else text
    else:
        response.json.side_effect = ValueError("Expecting value: line 1 column 1 (char 0)")
        response.text = text or ""
    return response


@pytest.fixture
def success_payload() -> dict:
    """Pixela's standard success envelope."""
    return {"message": "Success.", "isSuccess": True}


@pytest.fixture
def mock_session(success_payload) -> MagicMock:
    """Session whose request() answers with the success envelope by default."""
    session = MagicMock()
    session.request.return_value = make_response(200, success_payload)
    return session


@pytest.fixture
def client(mock_session) -> PixelaClient:
    return PixelaClient(USERNAME, TOKEN, session=mock_session)


@pytest.fixture
def respond(mock_session) -> Callable[..., MagicMock]:
    """Set the next response of the mock session.

    Usage:
        respond(200, {"graphs": []})
        respond(404, {"message": "Not found", "isSuccess": False})
    """

    def _respond(status_code: int = 200, payload: Any = None, text: str | None = None) -> MagicMock:
        response = make_response(status_code, payload, text)
        mock_session.request.return_value = response
        return response

    return _respond


@pytest.fixture
def last_request(mock_session) -> Callable[[], tuple[str, str, dict]]:
    """Return (method, url, kwargs) of the most recent session.request call."""

    def _last() -> tuple[str, str, dict]:
        args, kwargs = mock_session.request.call_args
        method, url = args
        return method, url, kwargs

    return _last
