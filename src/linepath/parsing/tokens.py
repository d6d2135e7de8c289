"""
Tokenizer for path strings.

Path strings are split on single ASCII spaces. Runs of spaces therefore
produce empty tokens, which are never valid numbers and are reported as
malformed by the parser.
"""

import re

from linepath.exceptions import ErrorLevel, MalformedNumericTokenError

INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def tokenize(text: str) -> list[str]:
    """
    Split a path string into tokens.

    Params:
        text: Raw path text

    Returns:
        Tokens in order; an empty or blank string yields ``[""]``
    """
    return text.strip().split(" ")


def is_valid_int(token: str | None) -> bool:
    """Check if a token is a base-10 integer with an optional sign."""
    return token is not None and INTEGER_PATTERN.fullmatch(token) is not None


def parse_int(
    tokens: list[str],
    position: int,
    source: str | None = None,
    error_level: ErrorLevel = ErrorLevel.USER,
) -> int:
    """
    Read the integer at ``position`` in the token stream.

    Params:
        tokens: The token stream
        position: Index of the token to read
        source: Original path text, for error context
        error_level: Detail level of the error message

    Returns:
        The integer value

    Raises:
        MalformedNumericTokenError: If the token is missing or not an integer
    """
    token = tokens[position] if position < len(tokens) else None
    if token is None:
        reason = "expected an integer coordinate but the path ended"
    elif token == "":
        reason = "empty token where an integer was expected (repeated spaces?)"
    elif not is_valid_int(token):
        reason = f"expected an integer coordinate, got {token!r}"
    else:
        try:
            return int(token)
        except ValueError:
            # Digit string longer than the interpreter allows converting
            reason = f"integer coordinate too long ({len(token)} characters)"

    raise MalformedNumericTokenError(
        reason,
        token=token,
        position=position,
        source=source,
        error_level=error_level,
    )
