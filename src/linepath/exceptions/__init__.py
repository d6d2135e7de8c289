"""
LinePath exception classes.

This package provides all exception types used throughout LinePath for
consistent error handling and reporting.
"""

from linepath.exceptions.core import (
    ErrorContext,
    ErrorKind,
    ErrorLevel,
    LinePathError,
    MalformedNumericTokenError,
    MisplacedCloseError,
    MisplacedMoveError,
    MissingLeadingMoveError,
    PathSyntaxError,
    UnknownCommandError,
    UnsupportedInputTypeError,
)

__all__ = [
    "ErrorContext",
    "ErrorKind",
    "ErrorLevel",
    "LinePathError",
    "PathSyntaxError",
    "MissingLeadingMoveError",
    "MisplacedMoveError",
    "MisplacedCloseError",
    "UnknownCommandError",
    "MalformedNumericTokenError",
    "UnsupportedInputTypeError",
]
