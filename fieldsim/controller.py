"""
Scenario controller.

The controller owns the single active Scenario. On every trigger it
generates a fresh grid for the selected field type, swaps the new
Scenario in wholesale, and hands the rendered draw commands to its
render sink. Pointer queries read whichever Scenario is active.

Usage:
    from fieldsim.controller import ScenarioController

    controller = ScenarioController(render_sink=canvas)
    controller.on_regenerate()
    controller.on_field_type_change("vector")
    print(controller.current_label)
"""

import logging
from typing import Callable, Optional, Sequence, Union

import numpy as np

from fieldsim.data.grid import GridGeometry, DEFAULT_GRID
from fieldsim.data.models import FieldType, Scenario
from fieldsim.data.scalar_generator import generate_scalar_scenario
from fieldsim.data.vector_generator import generate_vector_scenario
from fieldsim.visualization.surface import DrawCommand, render_scenario

logger = logging.getLogger(__name__)


class FieldSimError(Exception):
    """Base exception for simulator errors."""
    pass


class InitializationFailure(FieldSimError):
    """Raised when the drawing surface or UI handles are unavailable."""
    pass


RenderSink = Callable[[Sequence[DrawCommand]], None]

GENERATORS = {
    FieldType.SCALAR: generate_scalar_scenario,
    FieldType.VECTOR: generate_vector_scenario,
}


class ScenarioController:
    """
    Two-state (scalar-mode / vector-mode) scenario orchestrator.

    Every field-type change and every explicit trigger regenerates before
    re-rendering; stale data is never redrawn under a new interpretation.
    """

    def __init__(
        self,
        render_sink: Optional[RenderSink],
        geometry: GridGeometry = DEFAULT_GRID,
        field_type: Union[FieldType, str] = FieldType.SCALAR,
        rng: Optional[np.random.Generator] = None,
    ):
        """
        Initialize the controller.

        Args:
            render_sink: Callable receiving draw commands after each regeneration
            geometry: Grid geometry
            field_type: Initial field type
            rng: Random generator (fresh entropy if None)

        Raises:
            InitializationFailure: If no render sink is available
        """
        if render_sink is None or not callable(render_sink):
            logger.error("Drawing surface not available")
            raise InitializationFailure("A drawing surface is required to render scenarios")

        self.render_sink = render_sink
        self.geometry = geometry
        self.field_type = FieldType(field_type)
        self.rng = rng if rng is not None else np.random.default_rng()
        self._scenario: Optional[Scenario] = None

    @property
    def scenario(self) -> Optional[Scenario]:
        """The active scenario, or None before the first generation."""
        return self._scenario

    @property
    def current_label(self) -> str:
        """Human-readable name of the active scenario."""
        if self._scenario is None:
            return "N/A"
        return self._scenario.label

    def on_regenerate(self, scenario: Optional[str] = None) -> Scenario:
        """
        Generate a new scenario for the current field type and render it.

        Args:
            scenario: Force a named strategy instead of drawing one

        Returns:
            The new active scenario
        """
        generate = GENERATORS[self.field_type]
        new_scenario = generate(self.geometry, self.rng, scenario)

        # Single reference swap; the previous grid is never mutated
        self._scenario = new_scenario
        logger.info(f"New {self.field_type.value} scenario: {new_scenario.label}")

        self.render_sink(render_scenario(new_scenario, self.geometry))
        return new_scenario

    def on_field_type_change(self, field_type: Union[FieldType, str]) -> Scenario:
        """Switch field type and regenerate."""
        self.field_type = FieldType(field_type)
        logger.debug(f"Field type set to {self.field_type.value}")
        return self.on_regenerate()

    def on_pointer_query(self, x: float, y: float) -> Optional[str]:
        """
        Describe the cell under a pixel position.

        Args:
            x: Horizontal pixel offset from the surface's left edge
            y: Vertical pixel offset from the surface's top edge

        Returns:
            Tooltip text, or None when the position is off the grid or
            the cell has nothing to show
        """
        scenario = self._scenario
        if scenario is None:
            return None

        cell = self.geometry.pixel_to_cell(x, y)
        if cell is None:
            return None
        return scenario.format_cell(*cell)
