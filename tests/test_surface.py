import numpy as np
import pytest

from fieldsim.data.grid import GridGeometry
from fieldsim.data.models import FieldType, Scenario, ScalarGrid, Vector, VectorGrid
from fieldsim.visualization.styles import BACKGROUND_COLOR, GRID_LINE_COLOR, ARROW_COLOR
from fieldsim.visualization.surface import Clear, FillRect, Line, render_scenario


def scalar_scenario(values):
    return Scenario(field_type=FieldType.SCALAR, label="Test", data=ScalarGrid(values=values))


def test_scalar_render_order_and_counts(geometry):
    commands = render_scenario(scalar_scenario(np.full((20, 20), 20.0)), geometry)

    assert commands[0] == Clear(500, 500)
    assert commands[1] == FillRect(0, 0, 500, 500, BACKGROUND_COLOR)
    grid_lines = commands[2:44]
    assert all(isinstance(c, Line) and c.color == GRID_LINE_COLOR for c in grid_lines)
    cells = commands[44:]
    assert len(cells) == 400
    assert all(isinstance(c, FillRect) for c in cells)


def test_grid_lines_cover_every_boundary(small_geometry):
    commands = render_scenario(scalar_scenario(np.zeros((5, 5))), small_geometry)
    lines = [c for c in commands if isinstance(c, Line)]

    horizontal = sorted(l.start[1] for l in lines if l.start[1] == l.end[1])
    vertical = sorted(l.start[0] for l in lines if l.start[0] == l.end[0])
    assert horizontal == [0, 25, 50, 75, 100, 125]
    assert vertical == [0, 25, 50, 75, 100, 125]


def test_scalar_cells_inset_and_colored():
    geometry = GridGeometry(rows=1, cols=2, cell_size=25)
    commands = render_scenario(scalar_scenario([[0.0, 40.0]]), geometry)
    cells = [c for c in commands if isinstance(c, FillRect)][1:]

    assert cells[0] == FillRect(1, 1, 23, 23, "#0000ff")
    assert cells[1] == FillRect(26, 1, 23, 23, "#ff0000")


def test_vector_render_skips_absent_and_calm():
    geometry = GridGeometry(rows=1, cols=3, cell_size=25)
    grid = VectorGrid.from_vectors([[
        Vector(magnitude=20.0, angle=0.0),
        None,
        Vector(magnitude=0.0, angle=0.0),
    ]])
    scenario = Scenario(field_type=FieldType.VECTOR, label="Test", data=grid)

    commands = render_scenario(scenario, geometry)
    arrows = [c for c in commands if isinstance(c, Line) and c.color == ARROW_COLOR]

    assert len(arrows) == 3  # shaft + two head strokes
    shaft = arrows[0]
    assert shaft.start == (12.5, 12.5)
    assert shaft.end == pytest.approx((22.5, 12.5))
    assert shaft.width == 3.0


def test_uniform_vector_field_draws_every_cell(geometry):
    grid = VectorGrid(magnitude=np.full((20, 20), 10.0), angle=np.zeros((20, 20)))
    scenario = Scenario(field_type=FieldType.VECTOR, label="Test", data=grid)

    commands = render_scenario(scenario, geometry)
    assert len(commands) == 2 + 42 + 400 * 3


def test_shape_mismatch_rejected(geometry):
    with pytest.raises(ValueError):
        render_scenario(scalar_scenario(np.zeros((3, 3))), geometry)
