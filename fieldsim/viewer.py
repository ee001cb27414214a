"""
Interactive viewer for field scenarios.

A matplotlib figure with the pixel surface, a field-type selector, a
"Generate New Scenario" button, the active scenario's label, and a
tooltip that follows the pointer over the grid.
"""

import logging
from typing import Optional

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.widgets import Button, RadioButtons

from fieldsim.controller import ScenarioController, InitializationFailure
from fieldsim.data.grid import GridGeometry, DEFAULT_GRID
from fieldsim.data.models import FieldType
from fieldsim.visualization.canvas import MatplotlibCanvas, add_temperature_colorbar
from fieldsim.visualization.styles import (
    FIGURE_SIZES,
    FONT_SIZES,
    TOOLTIP_STYLE,
    TOOLTIP_TEXT_COLOR,
    TOOLTIP_OFFSET,
)

logger = logging.getLogger(__name__)

WINDOW_TITLE = "Field Scenario Simulator"

# Selector label -> field type
FIELD_TYPE_LABELS = {
    "Scalar (Temperature)": FieldType.SCALAR,
    "Vector (Wind)": FieldType.VECTOR,
}


class FieldViewer:
    """Window wiring between matplotlib events and the scenario controller."""

    def __init__(
        self,
        fig=None,
        geometry: GridGeometry = DEFAULT_GRID,
        field_type: FieldType = FieldType.SCALAR,
        rng: Optional[np.random.Generator] = None,
    ):
        """
        Build the viewer and draw the first scenario.

        Args:
            fig: Figure to build in (a new one is created if None)
            geometry: Grid geometry
            field_type: Initially selected field type
            rng: Random generator for the controller

        Raises:
            InitializationFailure: If the figure has no drawing canvas
        """
        self.fig = fig if fig is not None else plt.figure(figsize=FIGURE_SIZES["viewer"])
        if getattr(self.fig, "canvas", None) is None:
            logger.error("Essential UI elements not found: figure has no canvas")
            raise InitializationFailure("Figure has no drawing canvas")

        self.geometry = geometry
        self._setup_layout(FieldType(field_type))

        self.controller = ScenarioController(
            render_sink=MatplotlibCanvas(self.ax, geometry),
            geometry=geometry,
            field_type=field_type,
            rng=rng,
        )
        self._connect_events()

        self.controller.on_regenerate()
        self._update_scenario_info()

    def _setup_layout(self, field_type: FieldType) -> None:
        """Create the surface axes, colorbar, widgets, label and tooltip."""
        manager = getattr(self.fig.canvas, "manager", None)
        if manager is not None:
            manager.set_window_title(WINDOW_TITLE)

        self.ax = self.fig.add_axes([0.06, 0.2, 0.74, 0.7])
        self.cax = self.fig.add_axes([0.84, 0.2, 0.03, 0.7])
        add_temperature_colorbar(self.fig, cax=self.cax)

        self.label_text = self.fig.text(
            0.06, 0.94, "", fontsize=FONT_SIZES["title"], fontweight="bold",
        )

        ax_radio = self.fig.add_axes([0.06, 0.03, 0.3, 0.12])
        labels = list(FIELD_TYPE_LABELS)
        active = list(FIELD_TYPE_LABELS.values()).index(field_type)
        self.field_type_radio = RadioButtons(ax_radio, labels, active=active)

        ax_button = self.fig.add_axes([0.45, 0.06, 0.35, 0.06])
        self.generate_button = Button(ax_button, "Generate New Scenario")

        self.tooltip = self.ax.annotate(
            "",
            xy=(0, 0),
            xytext=TOOLTIP_OFFSET,
            textcoords="offset points",
            bbox=TOOLTIP_STYLE,
            color=TOOLTIP_TEXT_COLOR,
            fontsize=FONT_SIZES["tooltip"],
            zorder=100,
        )
        self.tooltip.set_visible(False)

    def _connect_events(self) -> None:
        self.field_type_radio.on_clicked(self._on_field_type_selected)
        self.generate_button.on_clicked(self._on_generate_clicked)
        self.fig.canvas.mpl_connect("motion_notify_event", self._on_mouse_move)
        self.fig.canvas.mpl_connect("axes_leave_event", self._on_mouse_out)

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------

    def _on_field_type_selected(self, label: str) -> None:
        """Regenerate for the newly selected field type."""
        self._hide_tooltip()
        self.controller.on_field_type_change(FIELD_TYPE_LABELS[label])
        self._update_scenario_info()

    def _on_generate_clicked(self, event=None) -> None:
        self._hide_tooltip()
        self.controller.on_regenerate()
        self._update_scenario_info()

    def _on_mouse_move(self, event) -> None:
        """Show the tooltip for the cell under the pointer."""
        if event.inaxes is not self.ax or event.xdata is None or event.ydata is None:
            self._hide_tooltip()
            return

        text = self.controller.on_pointer_query(event.xdata, event.ydata)
        if text is None:
            self._hide_tooltip()
            return

        self.tooltip.xy = (event.xdata, event.ydata)
        self.tooltip.set_text(text)
        self.tooltip.set_visible(True)
        self.fig.canvas.draw_idle()

    def _on_mouse_out(self, event=None) -> None:
        self._hide_tooltip()

    # ------------------------------------------------------------------
    # UI updates
    # ------------------------------------------------------------------

    def _hide_tooltip(self) -> None:
        if self.tooltip.get_visible():
            self.tooltip.set_visible(False)
            self.fig.canvas.draw_idle()

    def _update_scenario_info(self) -> None:
        """Show the active label; the colorbar only applies to temperatures."""
        self.label_text.set_text(f"Current Scenario: {self.controller.current_label}")
        self.cax.set_visible(self.controller.field_type == FieldType.SCALAR)
        self.fig.canvas.draw_idle()

    def show(self) -> None:
        """Block in the matplotlib event loop."""
        plt.show()
