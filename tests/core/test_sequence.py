"""
Tests for the CommandSequence value type.

Focus Areas:
1. Sequence protocol and equality
2. map, filter and slice returning CommandSequence
3. Explicit invariant validation
"""

import pytest

from linepath.core.commands import ClosePath, HorizontalLineTo, LineTo, MoveTo
from linepath.core.sequence import CommandSequence
from linepath.exceptions import MisplacedCloseError, MissingLeadingMoveError


class TestSequenceProtocol:
    """Container behaviour."""

    def test_length_iteration_and_indexing(self, triangle):
        assert len(triangle) == 4
        assert list(triangle)[0] == MoveTo(50, 50)
        assert triangle[1] == LineTo(150, 50)
        assert triangle[-1] == ClosePath()

    def test_slice_index_returns_sequence(self, triangle):
        sliced = triangle[1:3]
        assert isinstance(sliced, CommandSequence)
        assert sliced == [LineTo(150, 50), LineTo(100, 150)]

    def test_contains(self, triangle):
        assert LineTo(100, 150) in triangle
        assert LineTo(0, 0) not in triangle

    def test_equality_and_hash(self):
        first = CommandSequence([MoveTo(0, 0), LineTo(1, 1)])
        second = CommandSequence((MoveTo(0, 0), LineTo(1, 1)))
        assert first == second
        assert hash(first) == hash(second)
        assert first == [MoveTo(0, 0), LineTo(1, 1)]
        assert first != CommandSequence([MoveTo(0, 0)])
        assert first != "M 0 0 L 1 1"

    def test_copies_input(self):
        commands = [MoveTo(0, 0)]
        sequence = CommandSequence(commands)
        commands.append(LineTo(1, 1))
        assert len(sequence) == 1

    def test_str_serializes(self, triangle):
        assert str(triangle) == "M 50 50 L 150 50 L 100 150 z"


class TestTransformations:
    """Operations that produce new sequences."""

    def test_map_shifts_x(self, triangle):
        """Adding 50 to every x keeps the result a CommandSequence."""
        mapped = triangle.map(
            lambda command: command.with_offset(dx=50) if command.x is not None else command
        )

        assert isinstance(mapped, CommandSequence)
        assert str(mapped) == "M 100 50 L 200 50 L 150 150 z"
        assert str(triangle) == "M 50 50 L 150 50 L 100 150 z"

    def test_filter_drops_low_points(self, triangle):
        """Removing points with y above 100 leaves a horizontal line."""
        filtered = triangle.filter(lambda command: command.y is None or command.y <= 100)

        assert isinstance(filtered, CommandSequence)
        assert str(filtered) == "M 50 50 L 150 50 z"

    def test_slice_can_break_invariants(self, triangle):
        """Slicing out the middle gives a sequence with no leading moveto."""
        sliced = triangle.slice(1, 3)

        assert isinstance(sliced, CommandSequence)
        assert str(sliced) == "L 150 50 L 100 150"
        assert not sliced.is_valid()

    def test_prepend_repairs_slice(self, triangle):
        repaired = triangle.slice(1, 3).prepend(MoveTo(25, 25, relative=True))

        assert repaired.is_valid()
        assert str(repaired) == "m 25 25 L 150 50 L 100 150"

    def test_slice_negative_indices(self, triangle):
        assert triangle.slice(-2) == [LineTo(100, 150), ClosePath()]
        assert triangle.slice(1, -1) == [LineTo(150, 50), LineTo(100, 150)]

    def test_append(self):
        sequence = CommandSequence([MoveTo(0, 0)]).append(HorizontalLineTo(5))
        assert sequence == [MoveTo(0, 0), HorizontalLineTo(5)]

    def test_clone_is_equal_but_distinct(self, triangle):
        clone = triangle.clone()
        assert clone == triangle
        assert clone is not triangle

    def test_offset(self):
        sequence = CommandSequence([MoveTo(0, 0), HorizontalLineTo(5), ClosePath()])
        assert str(sequence.offset(1, 2)) == "M 1 2 H 6 z"


class TestValidation:
    """Explicit invariant checks."""

    def test_empty_is_valid(self):
        assert CommandSequence().is_valid()

    def test_validate_returns_self(self, triangle):
        assert triangle.validate() is triangle

    def test_missing_leading_move(self):
        with pytest.raises(MissingLeadingMoveError) as exc_info:
            CommandSequence([LineTo(1, 1)]).validate()

        assert exc_info.value.position == 0

    def test_close_before_end(self):
        sequence = CommandSequence([MoveTo(0, 0), ClosePath(), LineTo(1, 1)])
        with pytest.raises(MisplacedCloseError) as exc_info:
            sequence.validate()

        assert exc_info.value.position == 1

    def test_two_closes(self):
        sequence = CommandSequence([MoveTo(0, 0), ClosePath(), ClosePath()])
        assert not sequence.is_valid()
