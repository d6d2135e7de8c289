"""
LinePath - parse and serialize straight-line SVG path data

LinePath handles the moveto, lineto (including horizontal and vertical) and
closepath subset of the SVG path language, turning path strings or point
pairs into an immutable command sequence and writing it back out.
"""

import logging
from importlib.metadata import version

from linepath.core import (
    ClosePath,
    CommandKind,
    CommandSequence,
    HorizontalLineTo,
    LineTo,
    MoveTo,
    PathCommand,
    VerticalLineTo,
)
from linepath.exceptions import (
    ErrorKind,
    ErrorLevel,
    LinePathError,
    PathSyntaxError,
    UnsupportedInputTypeError,
)
from linepath.parsing import PathParser, build_path, from_points, parse_path
from linepath.rendering import RenderSettings, to_svg_markup
from linepath.serialization import serialize

__version__ = version("linepath")

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "ClosePath",
    "CommandKind",
    "CommandSequence",
    "ErrorKind",
    "ErrorLevel",
    "HorizontalLineTo",
    "LinePathError",
    "LineTo",
    "MoveTo",
    "PathCommand",
    "PathParser",
    "PathSyntaxError",
    "RenderSettings",
    "UnsupportedInputTypeError",
    "VerticalLineTo",
    "build_path",
    "from_points",
    "parse_path",
    "serialize",
    "to_svg_markup",
]
