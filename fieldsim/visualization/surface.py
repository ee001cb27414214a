"""
Surface renderer.

Composes a scenario into a list of immediate-mode draw commands: clear,
background fill, grid lines, then either colored cells (scalar) or wind
arrows (vector). Commands are plain data in pixel coordinates with the
origin at the top-left corner and y pointing down, so any 2D canvas API
can replay them.
"""

import logging
from dataclasses import dataclass
from typing import List, Union, Tuple

from config.settings import MIN_TEMP, MAX_TEMP, MAX_WIND_SPEED, ARROW_HEAD_SIZE
from fieldsim.data.grid import GridGeometry
from fieldsim.data.models import FieldType, Scenario, ScalarGrid, VectorGrid
from fieldsim.visualization.arrows import arrow_geometry
from fieldsim.visualization.colors import map_color, rgb_to_hex
from fieldsim.visualization.styles import (
    BACKGROUND_COLOR,
    GRID_LINE_COLOR,
    GRID_LINE_WIDTH,
    ARROW_COLOR,
    CELL_INSET,
)

logger = logging.getLogger(__name__)

Point = Tuple[float, float]


@dataclass(frozen=True)
class Clear:
    """Erase the whole surface."""
    width: float
    height: float


@dataclass(frozen=True)
class FillRect:
    """Filled axis-aligned rectangle; (x, y) is the top-left corner."""
    x: float
    y: float
    width: float
    height: float
    color: str


@dataclass(frozen=True)
class Line:
    """Straight stroke."""
    start: Point
    end: Point
    color: str
    width: float


DrawCommand = Union[Clear, FillRect, Line]


def grid_commands(geometry: GridGeometry) -> List[DrawCommand]:
    """Clear, paint background, and stroke every row and column boundary."""
    width, height = geometry.width, geometry.height
    commands: List[DrawCommand] = [
        Clear(width, height),
        FillRect(0, 0, width, height, BACKGROUND_COLOR),
    ]
    for r in range(geometry.rows + 1):
        y = r * geometry.cell_size
        commands.append(Line((0, y), (width, y), GRID_LINE_COLOR, GRID_LINE_WIDTH))
    for c in range(geometry.cols + 1):
        x = c * geometry.cell_size
        commands.append(Line((x, 0), (x, height), GRID_LINE_COLOR, GRID_LINE_WIDTH))
    return commands


def scalar_commands(grid: ScalarGrid, geometry: GridGeometry) -> List[DrawCommand]:
    """One inset, colored rectangle per cell."""
    commands: List[DrawCommand] = []
    size = geometry.cell_size - 2 * CELL_INSET
    for row in range(geometry.rows):
        for col in range(geometry.cols):
            x, y, _, _ = geometry.cell_rect(row, col)
            color = rgb_to_hex(map_color(grid.value(row, col), MIN_TEMP, MAX_TEMP))
            commands.append(FillRect(x + CELL_INSET, y + CELL_INSET, size, size, color))
    return commands


def vector_commands(grid: VectorGrid, geometry: GridGeometry) -> List[DrawCommand]:
    """Shaft and head strokes for every present, significant vector."""
    commands: List[DrawCommand] = []
    for row, col, vector in grid.iter_present():
        arrow = arrow_geometry(
            geometry.cell_center(row, col),
            vector.magnitude,
            vector.angle,
            max_magnitude=MAX_WIND_SPEED,
            cell_size=geometry.cell_size,
            head_size=ARROW_HEAD_SIZE,
        )
        if arrow is None:
            continue
        commands.append(Line(arrow.shaft_start, arrow.shaft_end, ARROW_COLOR, arrow.line_width))
        for start, end in arrow.head_strokes:
            commands.append(Line(start, end, ARROW_COLOR, arrow.line_width))
    return commands


def render_scenario(scenario: Scenario, geometry: GridGeometry) -> List[DrawCommand]:
    """
    Compose a scenario into draw commands.

    Args:
        scenario: Scenario to draw; its grid must match the geometry
        geometry: Grid geometry of the surface

    Returns:
        Ordered list of draw commands
    """
    if scenario.shape != geometry.shape:
        raise ValueError(
            f"Scenario shape {scenario.shape} does not match grid {geometry.shape}"
        )

    commands = grid_commands(geometry)
    if scenario.field_type == FieldType.SCALAR:
        commands.extend(scalar_commands(scenario.data, geometry))
    else:
        commands.extend(vector_commands(scenario.data, geometry))

    logger.debug(f"Rendered '{scenario.label}' into {len(commands)} draw commands")
    return commands
