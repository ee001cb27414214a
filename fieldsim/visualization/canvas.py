"""
Matplotlib drawing surface.

This module replays the renderer's draw commands onto a matplotlib Axes
laid out in pixel coordinates (x to the right, y downwards), and saves
rendered scenarios as static images.

Supports both the interactive viewer (an Axes inside a live figure) and
headless PNG output.
"""

import logging
from pathlib import Path
from typing import Optional, Sequence, List, Tuple

import matplotlib.pyplot as plt
from matplotlib.cm import ScalarMappable
from matplotlib.collections import LineCollection, PatchCollection
from matplotlib.colors import Normalize
from matplotlib.patches import Rectangle

from config.settings import MIN_TEMP, MAX_TEMP
from fieldsim.data.grid import GridGeometry, DEFAULT_GRID
from fieldsim.data.models import FieldType, Scenario
from fieldsim.visualization.colors import create_temperature_colormap
from fieldsim.visualization.styles import (
    FIGURE_SIZES,
    DEFAULT_DPI,
    FONT_SIZES,
    style_context,
)
from fieldsim.visualization.surface import (
    Clear, FillRect, Line, DrawCommand, render_scenario,
)

logger = logging.getLogger(__name__)


def setup_surface_axes(ax, geometry: GridGeometry) -> None:
    """
    Lay out an Axes as a pixel surface of the grid's size.

    The origin is the top-left corner and y grows downwards, matching
    the coordinates of the draw commands and of pointer queries.
    """
    ax.set_xlim(0, geometry.width)
    ax.set_ylim(geometry.height, 0)
    ax.set_aspect("equal")
    ax.set_xticks([])
    ax.set_yticks([])


class MatplotlibCanvas:
    """
    Drawing surface backed by a matplotlib Axes.

    Instances are callable with a command list so they can serve directly
    as the controller's render sink.
    """

    def __init__(self, ax, geometry: GridGeometry = DEFAULT_GRID):
        """
        Initialize the canvas.

        Args:
            ax: Axes to draw on
            geometry: Grid geometry; sets the pixel extent of the axes
        """
        self.ax = ax
        self.geometry = geometry
        self._artists: List = []
        setup_surface_axes(ax, geometry)

    def _points(self, pixels: float) -> float:
        """Convert a stroke width in surface pixels to points at the axes' current scale."""
        self.ax.apply_aspect()
        (x0, _), (x1, _) = self.ax.transData.transform([(0, 0), (1, 0)])
        return pixels * abs(x1 - x0) * 72.0 / self.ax.figure.dpi

    def clear(self) -> None:
        """Remove everything previously drawn by this canvas."""
        for artist in self._artists:
            artist.remove()
        self._artists.clear()

    def draw(self, commands: Sequence[DrawCommand]) -> None:
        """
        Replay draw commands in order.

        Consecutive rectangles and consecutive lines are batched into one
        collection each; batching never reorders commands.
        """
        rects: List[FillRect] = []
        lines: List[Line] = []

        for command in commands:
            if isinstance(command, Clear):
                self._flush_rects(rects)
                self._flush_lines(lines)
                self.clear()
            elif isinstance(command, FillRect):
                self._flush_lines(lines)
                rects.append(command)
            elif isinstance(command, Line):
                self._flush_rects(rects)
                lines.append(command)
            else:
                raise TypeError(f"Unsupported draw command: {command!r}")

        self._flush_rects(rects)
        self._flush_lines(lines)
        self.ax.figure.canvas.draw_idle()

    __call__ = draw

    def _flush_rects(self, rects: List[FillRect]) -> None:
        if not rects:
            return
        patches = [Rectangle((r.x, r.y), r.width, r.height) for r in rects]
        collection = PatchCollection(
            patches,
            facecolors=[r.color for r in rects],
            edgecolors="none",
            zorder=len(self._artists) + 1,
        )
        self._artists.append(self.ax.add_collection(collection))
        rects.clear()

    def _flush_lines(self, lines: List[Line]) -> None:
        if not lines:
            return
        collection = LineCollection(
            [(line.start, line.end) for line in lines],
            colors=[line.color for line in lines],
            linewidths=[self._points(line.width) for line in lines],
            capstyle="round",
            zorder=len(self._artists) + 1,
        )
        self._artists.append(self.ax.add_collection(collection))
        lines.clear()


def add_temperature_colorbar(fig, ax=None, cax=None):
    """
    Attach a temperature colorbar matching the cell colors.

    Args:
        fig: Figure to attach to
        ax: Axes to steal space from (ignored when cax is given)
        cax: Dedicated axes for the colorbar
    """
    mappable = ScalarMappable(
        norm=Normalize(vmin=MIN_TEMP, vmax=MAX_TEMP),
        cmap=create_temperature_colormap(),
    )
    if cax is not None:
        cbar = fig.colorbar(mappable, cax=cax)
    else:
        cbar = fig.colorbar(mappable, ax=ax, shrink=0.8, pad=0.03)
    cbar.set_label("Temperature (°C)", fontsize=FONT_SIZES["label"])
    return cbar


def plot_scenario(
    scenario: Scenario,
    geometry: GridGeometry = DEFAULT_GRID,
    title: Optional[str] = None,
    figsize: Optional[Tuple[float, float]] = None,
    show_colorbar: bool = True,
) -> plt.Figure:
    """
    Create a static figure of a scenario.

    Args:
        scenario: Scenario to draw
        geometry: Grid geometry of the scenario
        title: Plot title (defaults to the scenario label)
        figsize: Figure size (width, height) in inches
        show_colorbar: Whether to add a temperature colorbar (scalar only)

    Returns:
        Matplotlib Figure object
    """
    with style_context():
        fig, ax = plt.subplots(figsize=figsize or FIGURE_SIZES["snapshot"])
        canvas = MatplotlibCanvas(ax, geometry)

        if show_colorbar and scenario.field_type == FieldType.SCALAR:
            add_temperature_colorbar(fig, ax)

        ax.set_title(title or scenario.label, fontsize=FONT_SIZES["title"], fontweight="bold")
        fig.tight_layout()

        # Stroke widths follow the final axes size
        canvas.draw(render_scenario(scenario, geometry))

    return fig


def save_scenario_image(
    scenario: Scenario,
    output_path: Path,
    geometry: GridGeometry = DEFAULT_GRID,
    dpi: int = DEFAULT_DPI,
    **kwargs,
) -> Path:
    """
    Render and save a scenario to an image file.

    Args:
        scenario: Scenario to draw
        output_path: Output file path
        geometry: Grid geometry of the scenario
        dpi: Image DPI
        **kwargs: Additional arguments for plot_scenario

    Returns:
        Path to saved file
    """
    fig = plot_scenario(scenario, geometry, **kwargs)

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    fig.savefig(output_path, dpi=dpi, bbox_inches="tight", facecolor="white")
    plt.close(fig)

    logger.info(f"Saved scenario image to {output_path}")
    return output_path
