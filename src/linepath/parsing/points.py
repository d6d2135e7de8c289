"""
Construction of command sequences from point pairs.

A list of ``[x, y]`` pairs describes a polyline: the first pair becomes an
absolute moveto and every following pair an absolute lineto.
"""

import logging

from linepath.core.commands import LineTo, MoveTo, PathCommand
from linepath.core.sequence import CommandSequence
from linepath.core.types import PathSource, PointPairs
from linepath.exceptions import ErrorLevel, UnsupportedInputTypeError
from linepath.parsing.parser import PathParser

logger = logging.getLogger(__name__)


def _is_coordinate(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def from_points(points: PointPairs) -> CommandSequence:
    """
    Convert point pairs to a command sequence.

    Params:
        points: Ordered ``[x, y]`` pairs of integers

    Returns:
        A sequence of one MoveTo followed by LineTo records; empty input gives
        an empty sequence

    Raises:
        UnsupportedInputTypeError: If any item is not a pair of integers
    """
    commands: list[PathCommand] = []
    for index, pair in enumerate(points):
        if (
            not isinstance(pair, (list, tuple))
            or len(pair) != 2
            or not all(_is_coordinate(value) for value in pair)
        ):
            raise UnsupportedInputTypeError(
                points, f"item {index} is not an [x, y] pair of integers: {pair!r}"
            )
        x, y = pair
        commands.append(MoveTo(x, y) if index == 0 else LineTo(x, y))

    logger.debug("Built %d commands from point pairs", len(commands))
    return CommandSequence(commands)


def build_path(
    source: PathSource, error_level: ErrorLevel = ErrorLevel.USER
) -> CommandSequence:
    """
    Build a command sequence from either supported input form.

    Params:
        source: A path string or a list of ``[x, y]`` pairs
        error_level: Detail level used for parse error messages

    Returns:
        The command sequence

    Raises:
        UnsupportedInputTypeError: If source is neither a string nor a list of pairs
        PathSyntaxError: If source is a malformed path string
    """
    if isinstance(source, str):
        return PathParser(error_level=error_level).parse(source)
    if isinstance(source, (list, tuple)):
        return from_points(source)
    raise UnsupportedInputTypeError(source)
