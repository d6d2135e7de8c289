"""
LinePath serialization components.

This package turns command records back into path strings.
"""

from linepath.serialization.serializer import format_int, serialize, serialize_command

__all__ = [
    "format_int",
    "serialize",
    "serialize_command",
]
