"""Minimal SVG canvas used to draw tag maps.

Authors: tagmap contributors
"""
from pathlib import Path
from typing import List, NamedTuple, Union


class SvgLine(NamedTuple):
    x1: float
    y1: float
    x2: float
    y2: float
    color: str


class SVG:
    """Collects line segments in map coordinates and renders them as an SVG document.

    Map coordinates grow upwards while SVG coordinates grow downwards, so the y axis is flipped on output.
    """

    def __init__(self, width: float = 1000.0, height: float = 1000.0, stroke_width: float = 1.0) -> None:
        """Initializes an empty canvas.

        Args:
            width: Width of the canvas in map units.
            height: Height of the canvas in map units.
            stroke_width: Width of every drawn line.
        """
        if width <= 0.0 or height <= 0.0:
            raise ValueError(f"SVG canvas must have a positive size, got {width}x{height}.")
        self.width = width
        self.height = height
        self.stroke_width = stroke_width
        self.lines: List[SvgLine] = []

    def line(self, x1: float, y1: float, x2: float, y2: float, color: str) -> None:
        """Draws a line from (x1, y1) to (x2, y2) in `color`."""
        self.lines.append(SvgLine(x1, y1, x2, y2, color))

    def to_string(self) -> str:
        """Renders the complete SVG document."""
        parts = [
            '<?xml version="1.0" standalone="no"?>\n',
            f'<svg xmlns="http://www.w3.org/2000/svg" width="{self.width:f}" height="{self.height:f}" '
            f'viewBox="0 0 {self.width:f} {self.height:f}">\n',
        ]
        for segment in self.lines:
            parts.append(
                f' <line x1="{segment.x1:f}" y1="{self.height - segment.y1:f}"'
                f' x2="{segment.x2:f}" y2="{self.height - segment.y2:f}"'
                f' style="stroke:{segment.color}; stroke-width:{self.stroke_width:f}"/>\n'
            )
        parts.append("</svg>\n")
        return "".join(parts)

    def write(self, file_path: Union[str, Path]) -> None:
        """Writes the document to `file_path`, creating parent directories as needed."""
        file_path = Path(file_path)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(self.to_string())
