import math

import pytest

from config.settings import MAX_WIND_SPEED
from fieldsim.visualization.arrows import arrow_geometry

CENTER = (12.5, 12.5)


@pytest.mark.parametrize("magnitude", [0.0, 0.005, 0.01])
def test_calm_vectors_produce_nothing(magnitude):
    assert arrow_geometry(CENTER, magnitude, 45.0) is None


def test_sub_pixel_arrow_skipped():
    # 0.4 * 25 * (1 / 20) = 0.5 px
    assert arrow_geometry(CENTER, 1.0, 0.0) is None


def test_one_pixel_arrow_drawn():
    arrow = arrow_geometry(CENTER, 2.0, 0.0)
    assert arrow is not None
    assert arrow.length == pytest.approx(1.0)
    assert arrow.line_width == 1.0


def test_full_speed_arrow_length():
    arrow = arrow_geometry(CENTER, MAX_WIND_SPEED, 0.0, cell_size=25)
    assert arrow.length == pytest.approx(0.4 * 25)
    assert arrow.shaft_start == CENTER
    assert arrow.shaft_end == pytest.approx((22.5, 12.5))
    assert arrow.line_width == 3.0


def test_angle_ninety_points_down_the_surface():
    arrow = arrow_geometry(CENTER, MAX_WIND_SPEED, 90.0)
    assert arrow.shaft_end == pytest.approx((12.5, 22.5))


def test_head_strokes():
    arrow = arrow_geometry(CENTER, MAX_WIND_SPEED, 0.0, head_size=6)
    tip = arrow.shaft_end
    back = 6 * math.cos(math.pi / 6)

    (s1, e1), (s2, e2) = arrow.head_strokes
    assert s1 == tip and s2 == tip
    assert e1 == pytest.approx((tip[0] - back, tip[1] + 3.0))
    assert e2 == pytest.approx((tip[0] - back, tip[1] - 3.0))
    assert math.dist(s1, e1) == pytest.approx(6.0)


def test_line_width_scales_with_magnitude():
    arrow = arrow_geometry(CENTER, 10.0, 0.0)
    assert arrow.line_width == pytest.approx(1.5)
