"""Tests for pixela_client.params.ParameterBuilder."""

from __future__ import annotations

from datetime import date

import pytest

from pixela_client.enums import GraphColor, SufficientType
from pixela_client.params import ParameterBuilder


class TestParameterBuilder:
    def test_required_values_always_present(self):
        params = ParameterBuilder({"id": "g1", "name": ""}).build()
        assert params == {"id": "g1", "name": ""}

    @pytest.mark.parametrize("blank", [None, "", "   ", "\t\n"])
    def test_optional_blank_is_omitted(self, blank):
        params = ParameterBuilder().add_optional("timezone", blank).build()
        assert "timezone" not in params

    def test_optional_present_is_included(self):
        params = ParameterBuilder().add_optional("timezone", "Asia/Tokyo").build()
        assert params == {"timezone": "Asia/Tokyo"}

    def test_enum_and_date_converted(self):
        params = (
            ParameterBuilder()
            .add("color", GraphColor.PURPLE)
            .add_optional("selfSufficient", SufficientType.DECREMENT)
            .add_optional("date", date(2024, 3, 5))
            .build()
        )
        assert params == {"color": "ajisai", "selfSufficient": "decrement", "date": "20240305"}

    def test_empty_list_is_kept(self):
        params = ParameterBuilder().add_optional("purgeCacheURLs", []).build()
        assert params == {"purgeCacheURLs": []}

    def test_zero_is_kept(self):
        params = ParameterBuilder().add_optional("quantity", 0).build()
        assert params == {"quantity": 0}

    def test_build_returns_copy(self):
        builder = ParameterBuilder({"id": "g1"})
        first = builder.build()
        first["extra"] = 1
        assert builder.build() == {"id": "g1"}
        assert len(builder) == 1
