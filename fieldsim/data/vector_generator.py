"""
Vector (wind) field generator.

Produces a grid of wind vectors using one of three randomly chosen
scenarios, each picked with probability of roughly one third:

- Uniform flow: one speed and direction everywhere
- Rotational flow: a clockwise or counter-clockwise vortex around the
  geometric center of the grid
- Converging/diverging flow: wind pointing toward or away from a random
  cell, weakening with distance

Angles are in degrees with 0 pointing right (+x). Every present vector has
magnitude >= 0 and angle in [0, 360).
"""

import logging
from typing import Optional, Tuple

import numpy as np

from config.settings import MAX_WIND_SPEED
from fieldsim.data.grid import GridGeometry
from fieldsim.data.models import FieldType, VectorGrid, Scenario
from fieldsim.data.scenarios import ScenarioStrategy, run_strategy

logger = logging.getLogger(__name__)

# Cells closer than this to a flow center get a zero vector (angle undefined)
CENTER_EPSILON = 0.1

# Uniform flow speed range as fractions of MAX_WIND_SPEED
UNIFORM_MIN_FRACTION = 0.2
UNIFORM_SPAN_FRACTION = 0.5

VORTEX_SPEED_FRACTION = 0.8
RADIAL_SPEED_FRACTION = 0.9


def uniform_flow(
    geometry: GridGeometry,
    rng: np.random.Generator,
) -> Tuple[VectorGrid, str]:
    """Single random direction and moderate speed for every cell."""
    common_angle = rng.random() * 360
    common_magnitude = (
        rng.random() * MAX_WIND_SPEED * UNIFORM_SPAN_FRACTION
        + MAX_WIND_SPEED * UNIFORM_MIN_FRACTION
    )
    grid = VectorGrid(
        magnitude=np.full(geometry.shape, common_magnitude),
        angle=np.full(geometry.shape, common_angle),
    )
    return grid, "Uniform Wind Flow"


def rotational_flow(
    geometry: GridGeometry,
    rng: np.random.Generator,
) -> Tuple[VectorGrid, str]:
    """
    Vortex around the point between the middle cells.

    Direction is tangential to circles around the center; speed grows
    linearly with distance up to 80% of MAX_WIND_SPEED at max(rows, cols) / 2.
    """
    direction = 1 if rng.random() < 0.5 else -1  # 1 = CCW, -1 = CW
    center_r = geometry.rows / 2 - 0.5
    center_c = geometry.cols / 2 - 0.5
    max_dist = geometry.max_extent / 2

    rr, cc = geometry.index_grids()
    dy = rr - center_r
    dx = cc - center_c
    dist = np.hypot(dx, dy)

    angle = np.degrees(np.arctan2(dy, dx)) + 90 * direction
    angle = np.where(angle < 0, angle + 360, angle)
    angle = np.where(angle >= 360, angle - 360, angle)
    magnitude = np.minimum(
        MAX_WIND_SPEED, (dist / max_dist) * MAX_WIND_SPEED * VORTEX_SPEED_FRACTION
    )

    at_center = dist < CENTER_EPSILON
    angle = np.where(at_center, 0.0, angle) + 0.0
    magnitude = np.where(at_center, 0.0, magnitude)

    label = f"Rotational Flow ({'CCW' if direction == 1 else 'CW'})"
    return VectorGrid(magnitude=magnitude, angle=angle), label


def radial_flow(
    geometry: GridGeometry,
    rng: np.random.Generator,
) -> Tuple[VectorGrid, str]:
    """
    Flow converging on or diverging from a random cell.

    Only negative angles are wrapped. atan2 never exceeds 180°, so the
    result stays within [0, 360).
    """
    converging = rng.random() < 0.5
    center_r = int(rng.integers(geometry.rows))
    center_c = int(rng.integers(geometry.cols))

    rr, cc = geometry.index_grids()
    dy = rr - center_r
    dx = cc - center_c
    dist = np.hypot(dx, dy)

    if converging:
        angle = np.degrees(np.arctan2(-dy, -dx))  # toward center
    else:
        angle = np.degrees(np.arctan2(dy, dx))    # away from center
    # + 0.0 folds signed zeros from atan2(-0.0, x) into +0.0
    angle = np.where(angle < 0, angle + 360, angle) + 0.0

    magnitude = MAX_WIND_SPEED * (1 - dist / geometry.max_extent) * RADIAL_SPEED_FRACTION
    magnitude = np.maximum(0.0, np.minimum(MAX_WIND_SPEED, magnitude))

    at_center = dist < CENTER_EPSILON
    angle = np.where(at_center, 0.0, angle)
    magnitude = np.where(at_center, 0.0, magnitude)

    flow_type = "Converging" if converging else "Diverging"
    logger.debug(f"{flow_type} flow centered on cell ({center_r}, {center_c})")
    return VectorGrid(magnitude=magnitude, angle=angle), f"{flow_type} Wind Flow"


# Cumulative thresholds partition one uniform draw
VECTOR_SCENARIOS = (
    ScenarioStrategy("uniform", 0.33, uniform_flow),
    ScenarioStrategy("rotational", 0.66, rotational_flow),
    ScenarioStrategy("radial", 1.0, radial_flow),
)


def generate_vector_field(
    geometry: GridGeometry,
    rng: np.random.Generator,
    scenario: Optional[str] = None,
) -> Tuple[VectorGrid, str]:
    """
    Generate a wind grid.

    Args:
        geometry: Grid to fill
        rng: Random generator
        scenario: Force a scenario by name ('uniform', 'rotational',
            'radial'); drawn at random if None

    Returns:
        Tuple of (VectorGrid, label)
    """
    _, grid, label = run_strategy(VECTOR_SCENARIOS, geometry, rng, scenario)
    return grid, label


def generate_vector_scenario(
    geometry: GridGeometry,
    rng: np.random.Generator,
    scenario: Optional[str] = None,
) -> Scenario:
    """Generate a wind grid wrapped in a Scenario."""
    kind, grid, label = run_strategy(VECTOR_SCENARIOS, geometry, rng, scenario)
    return Scenario(field_type=FieldType.VECTOR, label=label, data=grid, kind=kind)
