"""
SVG markup export for command sequences.

Produces a standalone ``<svg>`` document containing a single ``<path>``
element whose ``d`` attribute is the serialized command sequence.
"""

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING
from xml.sax.saxutils import quoteattr

from linepath.rendering.settings import RenderSettings
from linepath.serialization.serializer import serialize

if TYPE_CHECKING:
    from linepath.core.commands import PathCommand

logger = logging.getLogger(__name__)

SVG_NAMESPACE = "http://www.w3.org/2000/svg"


def _format_attributes(attributes: dict[str, str]) -> str:
    return " ".join(f"{name}={quoteattr(value)}" for name, value in attributes.items())


def to_svg_markup(
    commands: Iterable["PathCommand"], settings: RenderSettings | None = None
) -> str:
    """
    Build an SVG document drawing the given commands.

    Params:
        commands: Records in draw order, usually a CommandSequence
        settings: Style and size; defaults to ``RenderSettings()``

    Returns:
        SVG markup, e.g. ``<svg xmlns="..." height="200" width="200"><path d="M 0 0 z" .../></svg>``
    """
    settings = settings or RenderSettings()
    path_data = serialize(commands)

    svg_attributes = {"xmlns": SVG_NAMESPACE, **settings.svg_attributes()}
    path_attributes = {"d": path_data, **settings.path_attributes()}

    logger.debug("Exporting path %r as SVG", path_data)
    return (
        f"<svg {_format_attributes(svg_attributes)}>"
        f"<path {_format_attributes(path_attributes)}/>"
        "</svg>"
    )
