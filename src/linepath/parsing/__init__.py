"""
LinePath parsing components.

This package provides the path string tokenizer and parser, and the adapter
that builds paths from point pairs.
"""

from linepath.parsing.parser import PathParser, parse_path
from linepath.parsing.points import build_path, from_points
from linepath.parsing.tokens import is_valid_int, parse_int, tokenize

__all__ = [
    "PathParser",
    "build_path",
    "from_points",
    "is_valid_int",
    "parse_int",
    "parse_path",
    "tokenize",
]
