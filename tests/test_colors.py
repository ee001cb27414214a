import numpy as np
import pytest

from config.settings import MIN_TEMP, MAX_TEMP
from fieldsim.visualization.colors import (
    map_color,
    normalize,
    rgb_to_hex,
    create_temperature_colormap,
)


@pytest.mark.parametrize("value, expected", [
    (MIN_TEMP, (0, 0, 255)),     # blue
    (10.0, (0, 255, 255)),       # cyan
    (20.0, (0, 255, 0)),         # green
    (30.0, (255, 255, 0)),       # yellow
    (MAX_TEMP, (255, 0, 0)),     # red
])
def test_segment_boundaries(value, expected):
    assert map_color(value, MIN_TEMP, MAX_TEMP) == expected


def test_channels_are_floor_truncated():
    # t = 0.125 -> halfway blue to cyan, 127.5 truncates to 127
    assert map_color(5.0, MIN_TEMP, MAX_TEMP) == (0, 127, 255)


def test_out_of_range_values_clamp():
    assert map_color(-10.0) == map_color(MIN_TEMP)
    assert map_color(100.0) == map_color(MAX_TEMP)


def test_degenerate_range():
    assert normalize(5.0, 5.0, 5.0) == 0.0
    assert map_color(5.0, 5.0, 5.0) == (0, 0, 255)


@pytest.mark.parametrize("lo, hi, channel, direction", [
    (0.0, 0.2499, 1, 1),    # green rises
    (0.25, 0.4999, 2, -1),  # blue falls
    (0.5, 0.7499, 0, 1),    # red rises
    (0.75, 1.0, 1, -1),     # green falls
])
def test_channels_monotonic_within_segment(lo, hi, channel, direction):
    values = [map_color(t, 0.0, 1.0)[channel] for t in np.linspace(lo, hi, 50)]
    steps = np.diff(values) * direction
    assert np.all(steps >= 0)


def test_all_channels_within_byte_range():
    for value in np.linspace(-5, 45, 200):
        assert all(0 <= c <= 255 for c in map_color(value))


def test_rgb_to_hex():
    assert rgb_to_hex((255, 0, 0)) == "#ff0000"
    assert rgb_to_hex((0, 127, 255)) == "#007fff"


def test_colormap_matches_ramp_ends():
    cmap = create_temperature_colormap()
    assert cmap.N == 256
    assert cmap(0.0)[:3] == pytest.approx((0.0, 0.0, 1.0))
    assert cmap(1.0)[:3] == pytest.approx((1.0, 0.0, 0.0))
