"""
Tests for path serialization and the parse/serialize round trip.
"""

import pytest

from linepath.core.commands import ClosePath, HorizontalLineTo, LineTo, MoveTo, VerticalLineTo
from linepath.parsing.parser import parse_path
from linepath.serialization.serializer import format_int, serialize, serialize_command

ROUND_TRIP_PATHS = [
    "M 10 20",
    "m -5 7 l 1 1 -2 -2 z",
    "M 50 50 L 150 50 L 100 150 z",
    "M 0 0 L 100 100 200 100 400 300",
    "M 50 50 H 100 125 150",
    "m 1 2 l 3 4 h 5 v 6 L 7 8 H 9 V 10 Z",
    "M +007 -0 v +3",
    "  M 1 1 h 2  ",
]


class TestSerializeCommand:
    """Single record rendering."""

    @pytest.mark.parametrize(
        "command,expected",
        [
            (MoveTo(1, 2), "M 1 2"),
            (MoveTo(1, 2, relative=True), "m 1 2"),
            (LineTo(-3, 4), "L -3 4"),
            (HorizontalLineTo(5, relative=True), "h 5"),
            (VerticalLineTo(-6), "V -6"),
            (ClosePath("Z"), "Z"),
            (ClosePath("z"), "z"),
        ],
    )
    def test_renders_letter_and_coordinates(self, command, expected):
        assert serialize_command(command) == expected


class TestSerialize:
    """Sequence rendering."""

    def test_expanded_runs_are_written_per_record(self):
        """Runs are not re-collapsed: every record repeats its letter."""
        assert str(parse_path("M 50 50 H 100 125 150")) == "M 50 50 H 100 H 125 H 150"

    def test_no_trailing_space(self):
        result = serialize([MoveTo(0, 0), ClosePath()])
        assert result == "M 0 0 z"
        assert not result.endswith(" ")

    def test_empty(self):
        assert serialize([]) == ""

    def test_invalid_sequence_is_written_as_is(self):
        """Serialization never fails, even without a leading moveto."""
        assert serialize([ClosePath(), LineTo(1, 1), MoveTo(2, 2)]) == "z L 1 1 M 2 2"

    def test_numbers_are_canonical(self):
        assert serialize(parse_path("M +007 -0")) == "M 7 0"


class TestRoundTrip:
    """parse(serialize(parse(s))) == parse(s)."""

    @pytest.mark.parametrize("path", ROUND_TRIP_PATHS)
    def test_round_trip(self, path):
        parsed = parse_path(path)
        assert parse_path(serialize(parsed)) == parsed

    @pytest.mark.parametrize("path", ROUND_TRIP_PATHS)
    def test_serialized_form_is_stable(self, path):
        once = serialize(parse_path(path))
        assert serialize(parse_path(once)) == once

    def test_close_spelling_survives(self):
        assert serialize(parse_path("M 0 0 Z")).endswith("Z")


class TestFormatInt:
    """Integer formatting, including values past the int-to-str digit limit."""

    @pytest.mark.parametrize("value,expected", [(0, "0"), (-15, "-15"), (10**20, "1" + "0" * 20)])
    def test_small_values(self, value, expected):
        assert format_int(value) == expected

    def test_huge_positive_value(self):
        """Serialization stays total for coordinates with thousands of digits."""
        assert serialize([MoveTo(10**5000, 0)]) == "M 1" + "0" * 5000 + " 0"

    def test_huge_negative_value_keeps_inner_zeros(self):
        value = -(10**5000 + 7 * 10**2500 + 3)
        expected = "-1" + "0" * 2499 + "7" + "0" * 2499 + "3"

        assert format_int(value) == expected
        assert serialize_command(HorizontalLineTo(value)) == "H " + expected
