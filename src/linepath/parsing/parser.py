"""
Parser for LinePath path strings.

This module converts path strings made of the M/m, L/l, H/h, V/v and Z/z
commands into a CommandSequence. Parsing is a single left-to-right pass over
the token stream; the first violation raises and nothing is returned.
"""

import logging

from linepath.core.commands import (
    ClosePath,
    HorizontalLineTo,
    LineTo,
    MoveTo,
    PathCommand,
    VerticalLineTo,
)
from linepath.core.sequence import CommandSequence
from linepath.exceptions import (
    ErrorLevel,
    MalformedNumericTokenError,
    MisplacedCloseError,
    MisplacedMoveError,
    MissingLeadingMoveError,
    PathSyntaxError,
    UnknownCommandError,
    UnsupportedInputTypeError,
)
from linepath.parsing.tokens import is_valid_int, parse_int, tokenize

logger = logging.getLogger(__name__)


class PathParser:
    """Parser for path strings restricted to moveto, lineto and closepath."""

    MOVE_LETTERS = frozenset("Mm")
    LINE_LETTERS = frozenset("Ll")
    HORIZONTAL_LETTERS = frozenset("Hh")
    VERTICAL_LETTERS = frozenset("Vv")
    CLOSE_LETTERS = frozenset("Zz")

    def __init__(self, error_level: ErrorLevel = ErrorLevel.USER):
        """
        Initialize the parser.

        Params:
            error_level: Detail level used for error messages
        """
        self.error_level = error_level

    def parse(self, path: str) -> CommandSequence:
        """
        Parse a path string into a command sequence.

        Params:
            path: Space separated path text, e.g. ``"M 10 10 L 20 20 z"``

        Returns:
            The parsed commands in draw order

        Raises:
            UnsupportedInputTypeError: If path is not a string
            MissingLeadingMoveError: If the path is empty or does not start with M/m
            MisplacedMoveError: If M/m appears after the first token
            MisplacedCloseError: If Z/z appears before the last token
            UnknownCommandError: If an unknown token appears where a command is expected
            MalformedNumericTokenError: If a coordinate is missing, empty or not an integer
        """
        if not isinstance(path, str):
            raise UnsupportedInputTypeError(path)

        tokens = tokenize(path)
        if tokens[0] not in self.MOVE_LETTERS:
            self._fail(
                MissingLeadingMoveError,
                "move command (M or m) must appear at the beginning",
                tokens,
                0,
                path,
            )

        commands: list[PathCommand] = []
        cursor = 0
        while cursor < len(tokens):
            letter = tokens[cursor]

            if letter in self.MOVE_LETTERS:
                cursor = self._parse_move(tokens, cursor, path, commands)
            elif letter in self.LINE_LETTERS:
                cursor = self._parse_line(tokens, cursor, path, commands)
            elif letter in self.HORIZONTAL_LETTERS or letter in self.VERTICAL_LETTERS:
                cursor = self._parse_axis_line(tokens, cursor, path, commands)
            elif letter in self.CLOSE_LETTERS:
                cursor = self._parse_close(tokens, cursor, path, commands)
            elif letter == "" or is_valid_int(letter):
                # A stray operand: either repeated spaces or more numbers than
                # the preceding command takes
                self._fail(
                    MalformedNumericTokenError,
                    "unexpected coordinate where a command was expected",
                    tokens,
                    cursor,
                    path,
                )
            else:
                self._fail(
                    UnknownCommandError,
                    f"{letter!r} is an invalid command",
                    tokens,
                    cursor,
                    path,
                )

        logger.debug("Parsed %d commands from %d tokens", len(commands), len(tokens))
        return CommandSequence(commands)

    def _parse_move(
        self, tokens: list[str], cursor: int, path: str, commands: list[PathCommand]
    ) -> int:
        """Parse a moveto and its single coordinate pair."""
        letter = tokens[cursor]
        if cursor != 0:
            self._fail(
                MisplacedMoveError,
                "move command (M or m) can only appear at the beginning",
                tokens,
                cursor,
                path,
            )

        x = self._read_int(tokens, cursor + 1, path)
        y = self._read_int(tokens, cursor + 2, path)
        commands.append(MoveTo(x, y, relative=letter == "m"))
        return cursor + 3

    def _parse_line(
        self, tokens: list[str], cursor: int, path: str, commands: list[PathCommand]
    ) -> int:
        """Parse a lineto and every coordinate pair that follows it."""
        letter = tokens[cursor]
        start = cursor + 1
        end = self._scan_integers(tokens, start)
        count = end - start

        # No pairs at all, or a dangling x without its y: report the token
        # where the missing coordinate should have been
        if count == 0 or count % 2:
            self._read_int(tokens, end, path)

        relative = letter == "l"
        for position in range(start, end, 2):
            commands.append(
                LineTo(
                    self._read_int(tokens, position, path),
                    self._read_int(tokens, position + 1, path),
                    relative=relative,
                )
            )
        return end

    def _parse_axis_line(
        self, tokens: list[str], cursor: int, path: str, commands: list[PathCommand]
    ) -> int:
        """Parse a horizontal or vertical lineto and its run of scalars."""
        letter = tokens[cursor]
        start = cursor + 1
        end = self._scan_integers(tokens, start)
        if end == start:
            self._read_int(tokens, start, path)

        relative = letter.islower()
        horizontal = letter in self.HORIZONTAL_LETTERS
        for position in range(start, end):
            value = self._read_int(tokens, position, path)
            if horizontal:
                commands.append(HorizontalLineTo(value, relative=relative))
            else:
                commands.append(VerticalLineTo(value, relative=relative))
        return end

    def _parse_close(
        self, tokens: list[str], cursor: int, path: str, commands: list[PathCommand]
    ) -> int:
        """Parse a closepath, which must be the final token."""
        if cursor != len(tokens) - 1:
            self._fail(
                MisplacedCloseError,
                "closepath (Z or z) must appear only at the end",
                tokens,
                cursor,
                path,
            )
        commands.append(ClosePath(tokens[cursor]))
        return cursor + 1

    @staticmethod
    def _scan_integers(tokens: list[str], start: int) -> int:
        """Return the index just past the run of integer tokens beginning at start."""
        end = start
        while end < len(tokens) and is_valid_int(tokens[end]):
            end += 1
        return end

    def _read_int(self, tokens: list[str], position: int, path: str) -> int:
        try:
            return parse_int(
                tokens, position, source=path, error_level=self.error_level
            )
        except MalformedNumericTokenError as e:
            logger.debug("Rejected path at token %d: %s", position, e.reason)
            raise

    def _fail(
        self,
        error_class: type[PathSyntaxError],
        reason: str,
        tokens: list[str],
        position: int,
        path: str,
    ) -> None:
        logger.debug("Rejected path at token %d: %s", position, reason)
        raise error_class(
            reason,
            token=tokens[position],
            position=position,
            source=path,
            error_level=self.error_level,
        )


def parse_path(path: str, error_level: ErrorLevel = ErrorLevel.USER) -> CommandSequence:
    """
    Convenience function to parse a path string.

    Params:
        path: The path string to parse
        error_level: Detail level used for error messages

    Returns:
        The parsed command sequence

    Raises:
        PathSyntaxError: If the path is malformed
        UnsupportedInputTypeError: If path is not a string
    """
    parser = PathParser(error_level=error_level)
    return parser.parse(path)
