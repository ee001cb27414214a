"""
Weighted scenario dispatch.

Each field type owns a closed table of scenario strategies. A strategy is
a pure function ``(geometry, rng) -> (data, label)``; the table pairs it
with a cumulative threshold so a single uniform draw in [0, 1) selects
exactly one strategy.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Tuple, Sequence, Optional, Any

import numpy as np

from fieldsim.data.grid import GridGeometry

logger = logging.getLogger(__name__)


ScenarioFunc = Callable[[GridGeometry, np.random.Generator], Tuple[Any, str]]


@dataclass(frozen=True)
class ScenarioStrategy:
    """
    Table entry for one scenario kind.

    Attributes:
        name: Stable key, used by the CLI to force a scenario
        threshold: Upper bound (exclusive) of this entry's slice of [0, 1)
        generate: Strategy function
    """
    name: str
    threshold: float
    generate: ScenarioFunc


def select_strategy(
    table: Sequence[ScenarioStrategy],
    draw: float,
) -> ScenarioStrategy:
    """
    Pick the first strategy whose threshold lies above the draw.

    Args:
        table: Strategies ordered by ascending threshold
        draw: Uniform value in [0, 1)

    Returns:
        The selected strategy; the last entry absorbs any draw beyond
        the final threshold
    """
    for strategy in table:
        if draw < strategy.threshold:
            return strategy
    return table[-1]


def find_strategy(table: Sequence[ScenarioStrategy], name: str) -> ScenarioStrategy:
    """Look up a strategy by name, raising ValueError if unknown."""
    for strategy in table:
        if strategy.name == name:
            return strategy
    valid = [s.name for s in table]
    raise ValueError(f"Unknown scenario '{name}'. Choose from: {valid}")


def run_strategy(
    table: Sequence[ScenarioStrategy],
    geometry: GridGeometry,
    rng: np.random.Generator,
    scenario: Optional[str] = None,
) -> Tuple[str, Any, str]:
    """
    Select and run one strategy from a table.

    Args:
        table: Strategy table for a field type
        geometry: Grid to fill
        rng: Random generator consumed by selection and generation
        scenario: Force this strategy name instead of drawing one

    Returns:
        Tuple of (strategy name, data, label)
    """
    if scenario is None:
        strategy = select_strategy(table, rng.random())
    else:
        strategy = find_strategy(table, scenario)

    data, label = strategy.generate(geometry, rng)
    logger.debug(f"Generated '{strategy.name}' scenario: {label}")
    return strategy.name, data, label
