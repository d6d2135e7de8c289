"""
Render configuration for SVG export.

Settings are an explicit value passed to each export call; there are no
process-wide defaults to mutate.
"""

from pydantic import BaseModel, ConfigDict, Field


class RenderSettings(BaseModel):
    """
    Style and size of an exported path.

    Accepts both ``stroke_width`` and the camelCase ``strokeWidth`` key so
    settings can be loaded straight from JSON style configuration.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    stroke: str = "blue"
    fill: str = "none"
    stroke_width: float = Field(default=2, gt=0, alias="strokeWidth")
    height: int = Field(default=200, gt=0)
    width: int = Field(default=200, gt=0)

    def svg_attributes(self) -> dict[str, str]:
        """Attributes of the outer ``<svg>`` element."""
        return {"height": str(self.height), "width": str(self.width)}

    def path_attributes(self) -> dict[str, str]:
        """Presentation attributes of the ``<path>`` element."""
        return {
            "stroke": self.stroke,
            "fill": self.fill,
            "stroke-width": _format_number(self.stroke_width),
        }


def _format_number(value: float) -> str:
    # 2.0 -> "2", 1.5 -> "1.5"
    return str(int(value)) if float(value).is_integer() else str(value)
