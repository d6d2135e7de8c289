"""
Exception classes for LinePath path processing.

This module defines specific exception types for the different error
conditions that can occur while parsing path strings or building paths
from point pairs.
"""

from dataclasses import dataclass
from enum import Enum


class ErrorLevel(Enum):
    """Error message detail level for end users vs developers."""

    USER = "user"  # Offending token and its position only
    DEVELOPER = "developer"  # Also echoes the source text with a caret


class ErrorKind(Enum):
    """Distinguishable reasons a path can be rejected."""

    MISSING_LEADING_MOVE = "MissingLeadingMove"
    MISPLACED_MOVE = "MisplacedMove"
    MISPLACED_CLOSE = "MisplacedClose"
    UNKNOWN_COMMAND = "UnknownCommand"
    MALFORMED_NUMERIC_TOKEN = "MalformedNumericToken"
    UNSUPPORTED_INPUT_TYPE = "UnsupportedInputType"


@dataclass
class ErrorContext:
    """
    Context information for error messages.

    Captures where in the token stream a path was rejected so callers can
    produce their own diagnostics.

    Params:
        token: The offending token, or None when the stream ended early
        position: Index of the offending token in the token stream
        source: The original path text, when available
    """

    token: str | None = None
    position: int | None = None
    source: str | None = None

    def format_location(self, error_level: ErrorLevel) -> str:
        """
        Format location information based on error level.

        Params:
            error_level: Whether to show USER or DEVELOPER level details

        Returns:
            Formatted location string with appropriate detail level
        """
        lines = []

        if self.position is not None:
            lines.append(f"  at token {self.position}")

        if self.token is not None:
            lines.append(f"  token: {self.token!r}")
        elif self.position is not None:
            lines.append("  token: <end of input>")

        if error_level == ErrorLevel.DEVELOPER and self.source is not None:
            lines.append(f"  source: {self.source}")
            offset = self.character_offset()
            if offset is not None:
                lines.append("          " + " " * offset + "^")

        return "\n".join(lines)

    def character_offset(self) -> int | None:
        """Return the column of the offending token within the stripped source."""
        if self.source is None or self.position is None:
            return None
        tokens = self.source.strip().split(" ")
        if self.position > len(tokens):
            return None
        # Leading whitespace removed by strip() still counts toward the column
        lead = len(self.source) - len(self.source.lstrip())
        return lead + sum(len(token) + 1 for token in tokens[: self.position])


class LinePathError(Exception):
    """Base exception for all LinePath errors."""

    pass


class PathSyntaxError(LinePathError):
    """Raised when a path string violates the path grammar."""

    kind: ErrorKind

    def __init__(
        self,
        reason: str,
        token: str | None = None,
        position: int | None = None,
        source: str | None = None,
        error_level: ErrorLevel = ErrorLevel.USER,
    ):
        """
        Initialize the exception.

        Params:
            reason: Human-readable description of the violation
            token: The offending token
            position: Index of the offending token in the token stream
            source: The original path text
            error_level: Level of detail to show in error message
        """
        self.reason = reason
        self.token = token
        self.position = position
        self.source = source
        self.context = ErrorContext(token=token, position=position, source=source)
        self.error_level = error_level

        location_info = self.context.format_location(error_level)
        if location_info:
            super().__init__(f"{reason}\n{location_info}")
        else:
            super().__init__(reason)


class MissingLeadingMoveError(PathSyntaxError):
    """Raised when a path is empty or does not begin with M or m."""

    kind = ErrorKind.MISSING_LEADING_MOVE


class MisplacedMoveError(PathSyntaxError):
    """Raised when M or m appears anywhere but the first token."""

    kind = ErrorKind.MISPLACED_MOVE


class MisplacedCloseError(PathSyntaxError):
    """Raised when Z or z appears anywhere but the last token."""

    kind = ErrorKind.MISPLACED_CLOSE


class UnknownCommandError(PathSyntaxError):
    """Raised when a command letter is expected but something else is found."""

    kind = ErrorKind.UNKNOWN_COMMAND


class MalformedNumericTokenError(PathSyntaxError):
    """Raised when a coordinate is missing, empty or not an integer."""

    kind = ErrorKind.MALFORMED_NUMERIC_TOKEN


class UnsupportedInputTypeError(LinePathError, TypeError):
    """Raised when a path source is neither a string nor a list of point pairs."""

    kind = ErrorKind.UNSUPPORTED_INPUT_TYPE

    def __init__(self, value: object, reason: str | None = None):
        """
        Initialize the exception.

        Params:
            value: The rejected input
            reason: Optional detail on why the input was rejected
        """
        self.value = value
        self.value_type = type(value).__name__
        message = (
            "path must be provided as a list of [x, y] points or a path string, "
            f"got {self.value_type}"
        )
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
