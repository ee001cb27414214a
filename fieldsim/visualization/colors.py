"""
Temperature color mapping.

Maps scalar values onto a four-segment blue -> cyan -> green -> yellow -> red
ramp. The same ramp backs the matplotlib colormap used for the viewer's
colorbar, so cell fills and the colorbar always agree.
"""

import math
from typing import Tuple

import matplotlib.colors as mcolors

from config.settings import MIN_TEMP, MAX_TEMP

RGB = Tuple[int, int, int]


def normalize(value: float, vmin: float, vmax: float) -> float:
    """
    Normalize a value into [0, 1].

    A degenerate range (vmax == vmin) maps everything to 0.
    """
    if vmax == vmin:
        return 0.0
    return max(0.0, min(1.0, (value - vmin) / (vmax - vmin)))


def map_color(value: float, vmin: float = MIN_TEMP, vmax: float = MAX_TEMP) -> RGB:
    """
    Get the color for a value on the temperature ramp.

    Args:
        value: Value to color
        vmin: Value mapped to pure blue
        vmax: Value mapped to pure red

    Returns:
        (r, g, b) integers in [0, 255]
    """
    t = normalize(value, vmin, vmax)

    if t < 0.25:    # Cold: Blue to Cyan
        s = t / 0.25
        r, g, b = 0.0, 255 * s, 255.0
    elif t < 0.5:   # Cool: Cyan to Green
        s = (t - 0.25) / 0.25
        r, g, b = 0.0, 255.0, 255 * (1 - s)
    elif t < 0.75:  # Warm: Green to Yellow
        s = (t - 0.5) / 0.25
        r, g, b = 255 * s, 255.0, 0.0
    else:           # Hot: Yellow to Red
        s = (t - 0.75) / 0.25
        r, g, b = 255.0, 255 * (1 - s), 0.0

    return (_channel(r), _channel(g), _channel(b))


def _channel(x: float) -> int:
    return max(0, min(255, math.floor(x)))


def rgb_to_hex(rgb: RGB) -> str:
    """Convert an (r, g, b) tuple of 0-255 ints to a hex string."""
    return "#{:02x}{:02x}{:02x}".format(*rgb)


def create_temperature_colormap(n_colors: int = 256) -> mcolors.ListedColormap:
    """
    Create a matplotlib colormap sampled from map_color.

    Args:
        n_colors: Number of samples across [0, 1]

    Returns:
        Matplotlib colormap
    """
    colors = []
    for i in range(n_colors):
        r, g, b = map_color(i / (n_colors - 1), 0.0, 1.0)
        colors.append((r / 255, g / 255, b / 255))
    return mcolors.ListedColormap(colors, name="temperature")
