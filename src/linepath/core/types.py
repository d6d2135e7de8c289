"""
Core type definitions for LinePath.

This module contains type aliases shared across parsing, serialization and
rendering.
"""

from collections.abc import Sequence

Point = tuple[int, int]

PointPairs = Sequence[Sequence[int]]

PathSource = str | PointPairs
