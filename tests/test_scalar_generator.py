import numpy as np
import pytest

from config.settings import MIN_TEMP, MAX_TEMP
from fieldsim.data.grid import GridGeometry
from fieldsim.data.models import FieldType
from fieldsim.data.scenarios import select_strategy, find_strategy
from fieldsim.data.scalar_generator import (
    SCALAR_SCENARIOS,
    generate_scalar_field,
    generate_scalar_scenario,
    gradient_progress,
)


@pytest.mark.parametrize("draw, expected", [
    (0.0, "random"),
    (0.3299, "random"),
    (0.33, "linear_gradient"),
    (0.6599, "linear_gradient"),
    (0.66, "central_spot"),
    (0.9999, "central_spot"),
])
def test_draw_partition(draw, expected):
    assert select_strategy(SCALAR_SCENARIOS, draw).name == expected


def test_unknown_scenario_name():
    with pytest.raises(ValueError):
        find_strategy(SCALAR_SCENARIOS, "rotational")


@pytest.mark.parametrize("name", [s.name for s in SCALAR_SCENARIOS])
def test_every_scenario_stays_in_bounds(geometry, rng, name):
    for _ in range(50):
        grid, label = generate_scalar_field(geometry, rng, name)
        assert grid.shape == (20, 20)
        assert np.all(grid.values >= MIN_TEMP)
        assert np.all(grid.values <= MAX_TEMP)
        assert label


def test_random_distribution_label(geometry, sequence_rng):
    grid, label = generate_scalar_field(geometry, sequence_rng([0.1, 0.5]))
    assert label == "Random Temperature Distribution"
    assert np.allclose(grid.values, 20.0)


def test_horizontal_gradient(geometry, sequence_rng):
    # dispatch draw, orientation, start fraction, end fraction
    grid, label = generate_scalar_field(geometry, sequence_rng([0.5, 0.1, 0.5, 0.5]))

    assert label == "Linear Temperature Gradient (Horizontal)"
    assert np.allclose(grid.values[:, 0], 10.0)
    assert np.allclose(grid.values[:, -1], 20.0)
    # constant down each column, increasing along rows
    assert np.allclose(grid.values, grid.values[0])
    assert np.all(np.diff(grid.values[0]) > 0)


def test_vertical_gradient(geometry, sequence_rng):
    grid, label = generate_scalar_field(
        geometry, sequence_rng([0.9, 0.0, 1.0]), "linear_gradient",
    )
    assert label == "Linear Temperature Gradient (Vertical)"
    assert np.allclose(grid.values[0], 0.0)
    assert np.allclose(grid.values[-1], 20.0)


def test_gradient_progress_single_cell_extent():
    assert np.all(gradient_progress(np.array([0.0]), 1) == 0.0)
    assert np.allclose(gradient_progress(np.array([0.0, 1.0, 2.0]), 3), [0.0, 0.5, 1.0])


@pytest.mark.parametrize("rows, cols", [(1, 1), (1, 6), (6, 1)])
def test_gradient_on_degenerate_axes(rows, cols, rng):
    geometry = GridGeometry(rows=rows, cols=cols)
    for _ in range(20):
        grid, _ = generate_scalar_field(geometry, rng, "linear_gradient")
        assert grid.shape == (rows, cols)
        assert np.all(np.isfinite(grid.values))


def test_central_hot_spot(geometry, sequence_rng):
    grid, label = generate_scalar_field(geometry, sequence_rng([0.1, 0.0]), "central_spot")

    assert label == "Central Hot Spot"
    assert grid.value(10, 10) == pytest.approx(32.0)
    assert grid.value(0, 0) == pytest.approx(0.0)
    assert grid.values.max() == grid.value(10, 10)


def test_central_cold_spot(geometry, sequence_rng):
    grid, label = generate_scalar_field(geometry, sequence_rng([0.9, 1.0]), "central_spot")

    assert label == "Central Cold Spot"
    # base 12 + strength 32 clamps to 40 away from the spot
    assert grid.value(0, 0) == pytest.approx(40.0)
    assert grid.value(10, 10) == pytest.approx(12.0)
    assert grid.values.min() == grid.value(10, 10)


def test_scenario_wrapper(geometry, rng):
    scenario = generate_scalar_scenario(geometry, rng, "random")
    assert scenario.field_type == FieldType.SCALAR
    assert scenario.kind == "random"
    assert scenario.label == "Random Temperature Distribution"
