"""
Core LinePath components.

This package provides the command records and the command sequence value
type that make up the normalized path representation.
"""

from linepath.core.commands import (
    ClosePath,
    CommandKind,
    HorizontalLineTo,
    LineTo,
    MoveTo,
    PathCommand,
    VerticalLineTo,
    command_from_letter,
)
from linepath.core.sequence import CommandSequence
from linepath.core.types import PathSource, Point, PointPairs

__all__ = [
    "ClosePath",
    "CommandKind",
    "CommandSequence",
    "HorizontalLineTo",
    "LineTo",
    "MoveTo",
    "PathCommand",
    "VerticalLineTo",
    "command_from_letter",
    "PathSource",
    "Point",
    "PointPairs",
]
