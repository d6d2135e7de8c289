"""
LinePath rendering components.

This package provides render configuration and SVG markup export.
"""

from linepath.rendering.markup import to_svg_markup
from linepath.rendering.settings import RenderSettings

__all__ = [
    "RenderSettings",
    "to_svg_markup",
]
