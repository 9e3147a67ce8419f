"""Fixtures with realistic Pixela API response dicts for testing."""

from __future__ import annotations

import pytest


@pytest.fixture
def pixela_graph_data() -> dict:
    """Single graph definition as returned inside GET /graphs."""
    return {
        "id": "test-graph",
        "name": "graph-name",
        "unit": "commit",
        "type": "int",
        "color": "shibafu",
        "timezone": "Asia/Tokyo",
        "purgeCacheURLs": ["https://camo.githubusercontent.com/a.png"],
        "selfSufficient": "increment",
        "isSecret": False,
        "publishOptionalData": True,
    }


@pytest.fixture
def pixela_graphs_response(pixela_graph_data) -> dict:
    """GET /graphs response with two graphs, the second one minimal."""
    return {
        "graphs": [
            pixela_graph_data,
            {
                "id": "weight",
                "name": "Body weight",
                "unit": "kg",
                "type": "float",
                "color": "sora",
            },
        ]
    }


@pytest.fixture
def pixela_pixels_response() -> dict:
    """GET /graphs/{id}/pixels response."""
    return {"pixels": ["20180331", "20180401", "20180402", "20180403"]}


@pytest.fixture
def pixela_stats_response() -> dict:
    """GET /graphs/{id}/stats response."""
    return {
        "totalPixelsCount": 4,
        "maxQuantity": 5,
        "minQuantity": 0,
        "totalQuantity": 11,
        "avgQuantity": 2.75,
        "todaysQuantity": 1,
        "maxDate": "2018-04-02",
        "minDate": "20180331",
    }


@pytest.fixture
def pixela_pixel_response() -> dict:
    """GET /graphs/{id}/{yyyyMMdd} response."""
    return {"quantity": "5", "optionalData": "{\"key\":\"value\"}"}


@pytest.fixture
def pixela_webhooks_response() -> dict:
    """GET /webhooks response."""
    return {
        "webhooks": [
            {
                "webhookHash": "<webhookHash1>",
                "graphID": "test-graph",
                "type": "increment",
            },
            {
                "webhookHash": "<webhookHash2>",
                "graphID": "weight",
                "type": "add",
                "quantity": "0.5",
            },
        ]
    }


@pytest.fixture
def pixela_error_response() -> dict:
    """Error envelope Pixela returns with 4xx / 5xx statuses."""
    return {
        "message": "Specified graph not found.",
        "isSuccess": False,
    }
