"""
Visualization styles and constants.

This module defines consistent styling for the simulator surface and the
viewer figure, including surface colors, figure sizes, and matplotlib
configurations.
"""

import matplotlib.pyplot as plt
from typing import Dict, Tuple

# =============================================================================
# Figure Sizes
# =============================================================================

# Standard figure sizes (width, height) in inches
FIGURE_SIZES: Dict[str, Tuple[float, float]] = {
    "viewer": (8, 7.5),
    "snapshot": (6, 6),
}

# Default DPI for exports
DEFAULT_DPI = 100

# =============================================================================
# Surface Colors
# =============================================================================

BACKGROUND_COLOR = "#f9f9f9"   # Very light grey behind the grid
GRID_LINE_COLOR = "#e0e0e0"    # Lighter grid lines
GRID_LINE_WIDTH = 0.5
ARROW_COLOR = "#333333"        # Dark grey arrows

# Scalar cells are drawn this many pixels inside their grid lines
CELL_INSET = 1

# Tooltip box
TOOLTIP_STYLE = {
    "boxstyle": "round,pad=0.3",
    "facecolor": "#333333",
    "edgecolor": "none",
    "alpha": 0.85,
}
TOOLTIP_TEXT_COLOR = "white"
TOOLTIP_OFFSET = (10, 20)  # points right of and above the cursor

# =============================================================================
# Typography
# =============================================================================

FONT_SIZES = {
    "title": 14,
    "label": 11,
    "tick_label": 9,
    "tooltip": 9,
}

FONT_FAMILY = "sans-serif"

# =============================================================================
# Plot Style Configuration
# =============================================================================

def get_plot_style() -> Dict:
    """
    Get matplotlib rcParams for consistent styling.

    Returns:
        Dictionary of rcParams settings
    """
    return {
        # Figure
        "figure.facecolor": "white",
        "figure.edgecolor": "white",
        "figure.dpi": 100,

        # Axes
        "axes.facecolor": BACKGROUND_COLOR,
        "axes.edgecolor": "#333333",
        "axes.linewidth": 0.8,
        "axes.grid": False,
        "axes.titlesize": FONT_SIZES["title"],
        "axes.labelsize": FONT_SIZES["label"],

        # Ticks
        "xtick.labelsize": FONT_SIZES["tick_label"],
        "ytick.labelsize": FONT_SIZES["tick_label"],

        # Font
        "font.family": FONT_FAMILY,
        "font.size": FONT_SIZES["tick_label"],
    }


def style_context():
    """
    Context manager for applying style temporarily.

    Usage:
        with style_context():
            fig, ax = plt.subplots()
            # ... plotting code
    """
    return plt.rc_context(get_plot_style())
