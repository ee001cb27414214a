"""
Arrow geometry for wind vectors.

Turns a vector anchored at a cell center into a shaft and two head
strokes in pixel coordinates. Angles are measured from +x; with the
surface's y axis pointing down, positive angles turn clockwise on screen.
"""

import math
from dataclasses import dataclass
from typing import Optional, Tuple

from config.settings import GRID_CELL_SIZE, MAX_WIND_SPEED, ARROW_HEAD_SIZE

Point = Tuple[float, float]

# Below this magnitude a cell counts as calm
MIN_DRAW_MAGNITUDE = 0.01
# Shorter shafts than this (pixels) are not drawn
MIN_ARROW_LENGTH = 1.0
# Longest shaft as a fraction of the cell size
ARROW_LENGTH_FRACTION = 0.4
HEAD_ANGLE = math.pi / 6  # 30°
MIN_LINE_WIDTH = 1.0
MAX_LINE_WIDTH = 3.0


@dataclass(frozen=True)
class ArrowGeometry:
    """
    Drawable arrow.

    Attributes:
        shaft_start: Anchor point (cell center)
        shaft_end: Arrow tip
        head_strokes: Two (start, end) segments from the tip back
        line_width: Stroke width in pixels
    """
    shaft_start: Point
    shaft_end: Point
    head_strokes: Tuple[Tuple[Point, Point], Tuple[Point, Point]]
    line_width: float

    @property
    def length(self) -> float:
        return math.dist(self.shaft_start, self.shaft_end)


def arrow_geometry(
    center: Point,
    magnitude: float,
    angle_degrees: float,
    max_magnitude: float = MAX_WIND_SPEED,
    cell_size: float = GRID_CELL_SIZE,
    head_size: float = ARROW_HEAD_SIZE,
) -> Optional[ArrowGeometry]:
    """
    Compute the arrow for a vector.

    Args:
        center: (x, y) anchor in pixels
        magnitude: Vector magnitude
        angle_degrees: Direction in degrees from +x
        max_magnitude: Magnitude drawn at full length
        cell_size: Cell edge in pixels; full length is 0.4 of it
        head_size: Length of each head stroke in pixels

    Returns:
        ArrowGeometry, or None for calm or sub-pixel vectors
    """
    if magnitude <= MIN_DRAW_MAGNITUDE:
        return None

    ratio = magnitude / max_magnitude
    length = cell_size * ARROW_LENGTH_FRACTION * ratio
    if length < MIN_ARROW_LENGTH:
        return None

    theta = math.radians(angle_degrees)
    x, y = center
    tip = (x + length * math.cos(theta), y + length * math.sin(theta))

    heads = tuple(
        (tip, (
            tip[0] - head_size * math.cos(theta + offset),
            tip[1] - head_size * math.sin(theta + offset),
        ))
        for offset in (-HEAD_ANGLE, HEAD_ANGLE)
    )

    line_width = max(MIN_LINE_WIDTH, min(MAX_LINE_WIDTH, ratio * 3))

    return ArrowGeometry(
        shaft_start=(x, y),
        shaft_end=tip,
        head_strokes=heads,
        line_width=line_width,
    )
