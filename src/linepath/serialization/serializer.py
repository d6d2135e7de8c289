"""
Serializer turning command records back into path text.

The output always uses each record's own letter, so absolute and relative
commands keep the case they were parsed with. Numbers are written in
canonical integer form.
"""

from collections.abc import Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from linepath.core.commands import PathCommand

_CHUNK_DIGITS = 1000
_CHUNK = 10**_CHUNK_DIGITS


def format_int(value: int) -> str:
    """
    Format an integer in base 10.

    Values past the interpreter's int-to-str digit limit are converted in
    fixed-size chunks, so any integer can be written.
    """
    try:
        return str(value)
    except ValueError:
        sign = "-" if value < 0 else ""
        value = abs(value)
        chunks = []
        while value:
            value, chunk = divmod(value, _CHUNK)
            chunks.append(chunk)
        head, *rest = reversed(chunks)
        return sign + str(head) + "".join(str(chunk).zfill(_CHUNK_DIGITS) for chunk in rest)


def serialize_command(command: "PathCommand") -> str:
    """
    Render a single record as its letter followed by its coordinates.

    Params:
        command: Any command record

    Returns:
        Text such as ``"L 10 -20"``, ``"h 5"`` or ``"z"``
    """
    parts = [command.letter]
    parts.extend(format_int(value) for value in command.coordinates())
    return " ".join(parts)


def serialize(commands: Iterable["PathCommand"]) -> str:
    """
    Render a sequence of records as a space separated path string.

    Sequence-level invariants are not checked: an invalid sequence is written
    out as-is and the result will not parse back.

    Params:
        commands: Records in draw order

    Returns:
        The path string, with no leading or trailing space
    """
    return " ".join(serialize_command(command) for command in commands)
