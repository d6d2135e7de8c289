"""
Ordered, immutable sequence of path command records.

CommandSequence wraps a tuple rather than subclassing a built-in container, so
every sequence operation that produces a new collection (map, filter, slicing)
hands back another CommandSequence.
"""

import logging
from collections.abc import Callable, Iterable, Iterator
from typing import TYPE_CHECKING, overload

from linepath.core.commands import CommandKind, PathCommand
from linepath.exceptions import MisplacedCloseError, MissingLeadingMoveError
from linepath.serialization.serializer import serialize

if TYPE_CHECKING:
    from linepath.rendering.settings import RenderSettings

logger = logging.getLogger(__name__)


class CommandSequence:
    """
    Normalized representation of a parsed path, in draw order.

    A sequence is valid when it is empty, or starts with a moveto and holds at
    most one closepath, in last position. Sequences are never validated
    implicitly: transformations may produce invalid sequences, and callers that
    need a well-formed path call ``validate()`` first.
    """

    __slots__ = ("_commands",)

    def __init__(self, commands: Iterable[PathCommand] = ()):
        self._commands: tuple[PathCommand, ...] = tuple(commands)

    def __len__(self) -> int:
        return len(self._commands)

    def __iter__(self) -> Iterator[PathCommand]:
        return iter(self._commands)

    def __contains__(self, item: object) -> bool:
        return item in self._commands

    @overload
    def __getitem__(self, index: int) -> PathCommand: ...

    @overload
    def __getitem__(self, index: slice) -> "CommandSequence": ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return CommandSequence(self._commands[index])
        return self._commands[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, CommandSequence):
            return self._commands == other._commands
        if isinstance(other, (list, tuple)):
            return self._commands == tuple(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._commands)

    def __repr__(self) -> str:
        return f"CommandSequence({list(self._commands)!r})"

    def __str__(self) -> str:
        """Return the path string for this sequence."""
        return serialize(self)

    @property
    def commands(self) -> tuple[PathCommand, ...]:
        """The underlying records as a tuple."""
        return self._commands

    def map(self, fn: Callable[[PathCommand], PathCommand]) -> "CommandSequence":
        """Return a new sequence with ``fn`` applied to every record."""
        return CommandSequence(fn(command) for command in self._commands)

    def filter(self, predicate: Callable[[PathCommand], bool]) -> "CommandSequence":
        """Return a new sequence holding the records ``predicate`` accepts."""
        return CommandSequence(
            command for command in self._commands if predicate(command)
        )

    def slice(self, start: int | None = None, end: int | None = None) -> "CommandSequence":
        """
        Return the records between ``start`` and ``end``.

        Negative indices count from the end, as with list slicing.
        """
        return self[start:end]

    def clone(self) -> "CommandSequence":
        """Return a shallow copy. Records are immutable so they are shared."""
        return CommandSequence(self._commands)

    def prepend(self, command: PathCommand) -> "CommandSequence":
        """Return a new sequence with ``command`` inserted at the front."""
        return CommandSequence((command, *self._commands))

    def append(self, command: PathCommand) -> "CommandSequence":
        """Return a new sequence with ``command`` added at the end."""
        return CommandSequence((*self._commands, command))

    def offset(self, dx: int = 0, dy: int = 0) -> "CommandSequence":
        """Return a new sequence with every coordinate shifted by (dx, dy)."""
        return self.map(lambda command: command.with_offset(dx, dy))

    def validate(self) -> "CommandSequence":
        """
        Check the sequence-level invariants.

        Returns:
            This sequence, so calls can be chained

        Raises:
            MissingLeadingMoveError: If the first record is not a moveto
            MisplacedCloseError: If a closepath appears before the last record
        """
        if not self._commands:
            return self

        first = self._commands[0]
        if not first.kind.is_move:
            raise MissingLeadingMoveError(
                "move command (M or m) must appear at the beginning",
                token=first.letter,
                position=0,
            )

        last_index = len(self._commands) - 1
        for index, command in enumerate(self._commands):
            if command.kind is CommandKind.CLOSE and index != last_index:
                raise MisplacedCloseError(
                    "closepath (Z or z) must appear only at the end",
                    token=command.letter,
                    position=index,
                )
        return self

    def is_valid(self) -> bool:
        """Check the sequence-level invariants without raising."""
        try:
            self.validate()
        except (MissingLeadingMoveError, MisplacedCloseError) as e:
            logger.debug("Sequence failed validation: %s", e.reason)
            return False
        return True

    def to_svg(self, settings: "RenderSettings | None" = None) -> str:
        """Return a standalone SVG document drawing this path."""
        from linepath.rendering.markup import to_svg_markup

        return to_svg_markup(self, settings)
