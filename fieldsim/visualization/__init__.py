"""
Visualization module for field scenarios.

This module provides the color ramp, arrow geometry and surface renderer
that turn scenarios into draw commands, plus the matplotlib surface that
displays them.

Exports:
    - map_color: Temperature to RGB on the four-segment ramp
    - arrow_geometry: Shaft and head strokes for a wind vector
    - render_scenario: Scenario to draw commands
    - MatplotlibCanvas: Draw-command replay onto an Axes
    - save_scenario_image: Render a scenario to PNG
"""

from fieldsim.visualization.colors import (
    map_color,
    rgb_to_hex,
    create_temperature_colormap,
)
from fieldsim.visualization.arrows import ArrowGeometry, arrow_geometry
from fieldsim.visualization.surface import (
    Clear,
    FillRect,
    Line,
    render_scenario,
)
from fieldsim.visualization.canvas import (
    MatplotlibCanvas,
    plot_scenario,
    save_scenario_image,
)
from fieldsim.visualization.styles import (
    FIGURE_SIZES,
    DEFAULT_DPI,
    style_context,
)

__all__ = [
    # Color mapping
    "map_color",
    "rgb_to_hex",
    "create_temperature_colormap",
    # Arrows
    "ArrowGeometry",
    "arrow_geometry",
    # Surface rendering
    "Clear",
    "FillRect",
    "Line",
    "render_scenario",
    # Matplotlib surface
    "MatplotlibCanvas",
    "plot_scenario",
    "save_scenario_image",
    # Style utilities
    "FIGURE_SIZES",
    "DEFAULT_DPI",
    "style_context",
]
