"""Tests for pixela_client.wire — pure functions, no mocking needed."""

from __future__ import annotations

from datetime import date, datetime

import pytest

from pixela_client.enums import (
    DisplayMode,
    GraphColor,
    GraphType,
    SufficientType,
    WebhookType,
)
from pixela_client.wire import (
    as_wire,
    format_date,
    format_quantity,
    from_wire,
    parse_date,
    parse_quantity,
)


# ---------------------------------------------------------------------------
# Enum ↔ wire strings
# ---------------------------------------------------------------------------


class TestAsWire:
    @pytest.mark.parametrize(
        "member, expected",
        [
            (GraphColor.GREEN, "shibafu"),
            (GraphColor.RED, "momiji"),
            (GraphColor.BLUE, "sora"),
            (GraphColor.YELLOW, "ichou"),
            (GraphColor.PURPLE, "ajisai"),
            (GraphColor.BLACK, "kuro"),
        ],
    )
    def test_colors(self, member, expected):
        assert as_wire(member) == expected

    def test_graph_types(self):
        assert as_wire(GraphType.INT) == "int"
        assert as_wire(GraphType.FLOAT) == "float"

    def test_sufficient_types(self):
        assert as_wire(SufficientType.INCREMENT) == "increment"
        assert as_wire(SufficientType.DECREMENT) == "decrement"
        assert as_wire(SufficientType.NONE) == "none"

    def test_display_mode_and_webhook_type(self):
        assert as_wire(DisplayMode.SHORT) == "short"
        assert as_wire(WebhookType.SUBTRACT) == "subtract"

    def test_every_member_has_a_string(self):
        for enum_cls in (GraphType, GraphColor, SufficientType, DisplayMode, WebhookType):
            for member in enum_cls:
                assert isinstance(as_wire(member), str)


class TestFromWire:
    def test_inverse_of_as_wire(self):
        for enum_cls in (GraphType, GraphColor, SufficientType, DisplayMode, WebhookType):
            for member in enum_cls:
                assert from_wire(enum_cls, as_wire(member)) is member

    def test_unknown_string(self):
        with pytest.raises(ValueError, match="Unknown GraphColor"):
            from_wire(GraphColor, "green")

    def test_unmapped_enum(self):
        from enum import Enum

        class Other(Enum):
            A = 1

        with pytest.raises(ValueError, match="no wire mapping"):
            from_wire(Other, "a")


# ---------------------------------------------------------------------------
# Dates
# ---------------------------------------------------------------------------


class TestFormatDate:
    def test_zero_padded_no_separators(self):
        assert format_date(date(2024, 3, 5)) == "20240305"

    def test_always_eight_digits(self):
        assert format_date(date(1999, 12, 31)) == "19991231"
        assert len(format_date(date(2024, 1, 1))) == 8
        assert format_date(date(999, 3, 5)) == "09990305"
        assert format_date(date(1, 1, 1)) == "00010101"

    def test_datetime_drops_time(self):
        assert format_date(datetime(2024, 3, 5, 23, 59, 59)) == "20240305"


class TestParseDate:
    def test_compact(self):
        assert parse_date("20180331") == date(2018, 3, 31)

    def test_dashed(self):
        assert parse_date("2018-04-02") == date(2018, 4, 2)

    def test_early_year(self):
        assert parse_date("09990305") == date(999, 3, 5)

    @pytest.mark.parametrize(
        "bad",
        ["", "2018331", "2018-3-31", "abcdefgh", "20181332", "2024030-5", "20-240305", "2024-0305"],
    )
    def test_rejects_malformed(self, bad):
        with pytest.raises(ValueError):
            parse_date(bad)


# ---------------------------------------------------------------------------
# Quantities
# ---------------------------------------------------------------------------


class TestFormatQuantity:
    def test_int(self):
        assert format_quantity(5) == "5"

    def test_float(self):
        assert format_quantity(1.5) == "1.5"

    def test_negative(self):
        assert format_quantity(-3) == "-3"

    def test_rejects_bool(self):
        with pytest.raises(TypeError):
            format_quantity(True)

    def test_rejects_string(self):
        with pytest.raises(TypeError):
            format_quantity("5")  # type: ignore[arg-type]


class TestParseQuantity:
    def test_int_string(self):
        assert parse_quantity("5") == 5
        assert isinstance(parse_quantity("5"), int)

    def test_float_string(self):
        assert parse_quantity("0.5") == 0.5

    def test_numbers_pass_through(self):
        assert parse_quantity(7) == 7
        assert parse_quantity(2.25) == 2.25

    def test_garbage(self):
        with pytest.raises(ValueError):
            parse_quantity("many")
