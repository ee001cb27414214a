"""
Scalar (temperature) field generator.

Produces a dense grid of temperatures using one of three randomly chosen
scenarios, each picked with probability of roughly one third:

- Random distribution: independent uniform noise per cell
- Linear gradient: horizontal or vertical ramp between two temperatures
- Central spot: radial hot or cold anomaly around the grid center

Every value is clamped into [MIN_TEMP, MAX_TEMP].

Usage:
    from fieldsim.data.scalar_generator import generate_scalar_field

    grid, label = generate_scalar_field(DEFAULT_GRID, np.random.default_rng())
"""

import logging
from typing import Optional, Tuple

import numpy as np

from config.settings import MIN_TEMP, MAX_TEMP
from fieldsim.data.grid import GridGeometry
from fieldsim.data.models import FieldType, ScalarGrid, Scenario
from fieldsim.data.scenarios import ScenarioStrategy, run_strategy

logger = logging.getLogger(__name__)

TEMP_RANGE = MAX_TEMP - MIN_TEMP

# Spot scenario shape
SPOT_STRENGTH_FRACTION = 0.8   # Spot amplitude as a fraction of TEMP_RANGE
SPOT_BASE_FRACTION = 0.3       # Base temperature spread above MIN_TEMP
SPOT_RADIUS_DIVISOR = 3.0      # Influence radius = max(rows, cols) / divisor


def clamp_temperature(values: np.ndarray) -> np.ndarray:
    """Clamp temperatures into [MIN_TEMP, MAX_TEMP]."""
    return np.clip(values, MIN_TEMP, MAX_TEMP)


def random_distribution(
    geometry: GridGeometry,
    rng: np.random.Generator,
) -> Tuple[ScalarGrid, str]:
    """Every cell independently uniform in [MIN_TEMP, MAX_TEMP]."""
    values = MIN_TEMP + rng.random(geometry.shape) * TEMP_RANGE
    return ScalarGrid(values=clamp_temperature(values)), "Random Temperature Distribution"


def gradient_progress(index: np.ndarray, extent: int) -> np.ndarray:
    """
    Normalized position along an axis of the given extent.

    A single-cell axis has nowhere to go, so its progress is 0.
    """
    if extent <= 1:
        return np.zeros_like(index)
    return index / (extent - 1)


def linear_gradient(
    geometry: GridGeometry,
    rng: np.random.Generator,
) -> Tuple[ScalarGrid, str]:
    """
    Linear ramp along a random axis.

    Start lies in the lower half of the temperature range; end lies at most
    half a range above start.
    """
    horizontal = rng.random() < 0.5
    start_temp = MIN_TEMP + rng.random() * (TEMP_RANGE / 2)
    end_temp = start_temp + rng.random() * (TEMP_RANGE / 2)

    rr, cc = geometry.index_grids()
    if horizontal:
        progress = gradient_progress(cc, geometry.cols)
    else:
        progress = gradient_progress(rr, geometry.rows)

    values = start_temp + (end_temp - start_temp) * progress
    orientation = "Horizontal" if horizontal else "Vertical"
    logger.debug(
        f"Gradient {orientation.lower()}: {start_temp:.1f}°C -> {end_temp:.1f}°C"
    )
    return (
        ScalarGrid(values=clamp_temperature(values)),
        f"Linear Temperature Gradient ({orientation})",
    )


def central_spot(
    geometry: GridGeometry,
    rng: np.random.Generator,
) -> Tuple[ScalarGrid, str]:
    """
    Hot or cold anomaly centered on the middle cell.

    Influence falls off linearly with Euclidean distance and vanishes at
    max(rows, cols) / 3 cells from the center.
    """
    hot = rng.random() < 0.5
    center_r = geometry.rows // 2
    center_c = geometry.cols // 2
    spot_strength = TEMP_RANGE * SPOT_STRENGTH_FRACTION
    base_temp = MIN_TEMP + TEMP_RANGE * SPOT_BASE_FRACTION * rng.random()
    max_radius = geometry.max_extent / SPOT_RADIUS_DIVISOR

    rr, cc = geometry.index_grids()
    distance = np.hypot(rr - center_r, cc - center_c)
    influence = np.maximum(0.0, 1.0 - distance / max_radius)

    if hot:
        values = base_temp + influence * spot_strength
    else:
        values = (base_temp + spot_strength) - influence * spot_strength

    spot_type = "Hot" if hot else "Cold"
    return ScalarGrid(values=clamp_temperature(values)), f"Central {spot_type} Spot"


# Cumulative thresholds partition one uniform draw
SCALAR_SCENARIOS = (
    ScenarioStrategy("random", 0.33, random_distribution),
    ScenarioStrategy("linear_gradient", 0.66, linear_gradient),
    ScenarioStrategy("central_spot", 1.0, central_spot),
)


def generate_scalar_field(
    geometry: GridGeometry,
    rng: np.random.Generator,
    scenario: Optional[str] = None,
) -> Tuple[ScalarGrid, str]:
    """
    Generate a temperature grid.

    Args:
        geometry: Grid to fill
        rng: Random generator
        scenario: Force a scenario by name ('random', 'linear_gradient',
            'central_spot'); drawn at random if None

    Returns:
        Tuple of (ScalarGrid, label)
    """
    _, grid, label = run_strategy(SCALAR_SCENARIOS, geometry, rng, scenario)
    return grid, label


def generate_scalar_scenario(
    geometry: GridGeometry,
    rng: np.random.Generator,
    scenario: Optional[str] = None,
) -> Scenario:
    """Generate a temperature grid wrapped in a Scenario."""
    kind, grid, label = run_strategy(SCALAR_SCENARIOS, geometry, rng, scenario)
    return Scenario(field_type=FieldType.SCALAR, label=label, data=grid, kind=kind)
