"""
Command records for the LinePath data model.

Every drawing instruction in a path is one immutable record. The record
classes form a tagged union over the nine command kinds: each variant only
carries the coordinates its command takes, and the absolute/relative axis is
kept as a flag so the original letter case survives a round trip.
"""

from abc import ABC, abstractmethod
from enum import Enum

from attrs import evolve, field, frozen
from attrs.validators import in_

from linepath.core.types import Point


class CommandKind(Enum):
    """Kind of a path command, valued by its canonical command letter."""

    MOVE_ABS = "M"
    MOVE_REL = "m"
    LINE_ABS = "L"
    LINE_REL = "l"
    HORIZ_ABS = "H"
    HORIZ_REL = "h"
    VERT_ABS = "V"
    VERT_REL = "v"
    CLOSE = "Z"

    @property
    def letter(self) -> str:
        """Canonical command letter for this kind."""
        return self.value

    @property
    def is_relative(self) -> bool:
        """Check if coordinates of this kind are offsets from the current point."""
        return self.value.islower()

    @property
    def is_move(self) -> bool:
        """Check if this kind is a moveto."""
        return self in (CommandKind.MOVE_ABS, CommandKind.MOVE_REL)


CLOSE_LETTERS = ("Z", "z")


def _coordinate(instance, attribute, value):
    # bool is an int subclass but never a meaningful coordinate
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(
            f"{type(instance).__name__}.{attribute.name} must be int, "
            f"got {type(value).__name__}: {value!r}"
        )


class _Command(ABC):
    """Behaviour shared by every command record."""

    x: int | None = None
    y: int | None = None

    @property
    @abstractmethod
    def kind(self) -> CommandKind:
        """Kind of this record, including its absolute/relative axis."""

    @property
    def letter(self) -> str:
        """Command letter used when the record is written back to text."""
        return self.kind.letter

    @property
    def is_relative(self) -> bool:
        return self.kind.is_relative

    def coordinates(self) -> tuple[int, ...]:
        """Return the coordinates this record carries, in text order."""
        return tuple(value for value in (self.x, self.y) if value is not None)

    def with_offset(self, dx: int = 0, dy: int = 0) -> "PathCommand":
        """Return a copy with the present coordinates shifted by (dx, dy)."""
        return self


@frozen
class MoveTo(_Command):
    """Moveto (``M``/``m``): set the current point without drawing."""

    x: int = field(validator=_coordinate)
    y: int = field(validator=_coordinate)
    relative: bool = False

    @property
    def kind(self) -> CommandKind:
        return CommandKind.MOVE_REL if self.relative else CommandKind.MOVE_ABS

    def coordinates(self) -> Point:
        return (self.x, self.y)

    def with_offset(self, dx: int = 0, dy: int = 0) -> "MoveTo":
        return evolve(self, x=self.x + dx, y=self.y + dy)


@frozen
class LineTo(_Command):
    """Lineto (``L``/``l``): draw a segment to (x, y)."""

    x: int = field(validator=_coordinate)
    y: int = field(validator=_coordinate)
    relative: bool = False

    @property
    def kind(self) -> CommandKind:
        return CommandKind.LINE_REL if self.relative else CommandKind.LINE_ABS

    def coordinates(self) -> Point:
        return (self.x, self.y)

    def with_offset(self, dx: int = 0, dy: int = 0) -> "LineTo":
        return evolve(self, x=self.x + dx, y=self.y + dy)


@frozen
class HorizontalLineTo(_Command):
    """Horizontal lineto (``H``/``h``): draw a segment to x, keeping y."""

    x: int = field(validator=_coordinate)
    relative: bool = False

    @property
    def kind(self) -> CommandKind:
        return CommandKind.HORIZ_REL if self.relative else CommandKind.HORIZ_ABS

    def with_offset(self, dx: int = 0, dy: int = 0) -> "HorizontalLineTo":
        return evolve(self, x=self.x + dx)


@frozen
class VerticalLineTo(_Command):
    """Vertical lineto (``V``/``v``): draw a segment to y, keeping x."""

    y: int = field(validator=_coordinate)
    relative: bool = False

    @property
    def kind(self) -> CommandKind:
        return CommandKind.VERT_REL if self.relative else CommandKind.VERT_ABS

    def with_offset(self, dx: int = 0, dy: int = 0) -> "VerticalLineTo":
        return evolve(self, y=self.y + dy)


@frozen
class ClosePath(_Command):
    """
    Closepath (``Z``/``z``): draw a segment back to the subpath start.

    Both spellings behave identically, so the spelling is kept only for
    writing the record back out and does not take part in equality.
    """

    spelling: str = field(default="z", eq=False, validator=in_(CLOSE_LETTERS))

    @property
    def kind(self) -> CommandKind:
        return CommandKind.CLOSE

    @property
    def letter(self) -> str:
        return self.spelling

    @property
    def is_relative(self) -> bool:
        return False


PathCommand = MoveTo | LineTo | HorizontalLineTo | VerticalLineTo | ClosePath

COMMAND_LETTERS = frozenset("MmLlHhVvZz")


def command_from_letter(letter: str, *coordinates: int) -> PathCommand:
    """
    Build a command record from its letter and coordinates.

    Params:
        letter: One of ``M m L l H h V v Z z``
        coordinates: The coordinates the command takes (two for M/L, one for
            H/V, none for Z)

    Returns:
        The matching command record

    Raises:
        ValueError: If the letter is unknown or the coordinate count is wrong
    """
    if letter not in COMMAND_LETTERS:
        raise ValueError(f"Unknown command letter: {letter!r}")

    upper = letter.upper()
    relative = letter.islower()
    expected = {"M": 2, "L": 2, "H": 1, "V": 1, "Z": 0}[upper]
    if len(coordinates) != expected:
        raise ValueError(
            f"{letter} command takes {expected} coordinate(s), got {len(coordinates)}"
        )

    if upper == "M":
        return MoveTo(*coordinates, relative=relative)
    if upper == "L":
        return LineTo(*coordinates, relative=relative)
    if upper == "H":
        return HorizontalLineTo(*coordinates, relative=relative)
    if upper == "V":
        return VerticalLineTo(*coordinates, relative=relative)
    return ClosePath(letter)
