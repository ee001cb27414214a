"""
Grid geometry for synthetic field scenarios.

This module provides the fixed-size addressable grid used by the
generators and the renderer. It holds no state beyond its configured
constants: all methods are pure coordinate math.
"""

import math
from dataclasses import dataclass
from typing import Optional, Tuple, Dict, Any

import numpy as np

from config.settings import GRID_ROWS, GRID_COLS, GRID_CELL_SIZE


@dataclass(frozen=True)
class GridGeometry:
    """
    Rows × columns grid with square cells of a fixed pixel size.

    Attributes:
        rows: Number of rows (y direction, top to bottom)
        cols: Number of columns (x direction, left to right)
        cell_size: Edge length of a cell in pixels
    """
    rows: int = GRID_ROWS
    cols: int = GRID_COLS
    cell_size: float = GRID_CELL_SIZE

    def __post_init__(self):
        """Validate dimensions."""
        if self.rows < 1:
            raise ValueError(f"rows must be at least 1: {self.rows}")
        if self.cols < 1:
            raise ValueError(f"cols must be at least 1: {self.cols}")
        if self.cell_size <= 0:
            raise ValueError(f"cell_size must be positive: {self.cell_size}")

    @property
    def shape(self) -> Tuple[int, int]:
        """Get (rows, cols)."""
        return (self.rows, self.cols)

    @property
    def width(self) -> float:
        """Surface width in pixels."""
        return self.cols * self.cell_size

    @property
    def height(self) -> float:
        """Surface height in pixels."""
        return self.rows * self.cell_size

    @property
    def max_extent(self) -> int:
        """Larger of the two grid dimensions."""
        return max(self.rows, self.cols)

    def contains(self, row: int, col: int) -> bool:
        """Check if a cell index is within the grid."""
        return 0 <= row < self.rows and 0 <= col < self.cols

    def cell_rect(self, row: int, col: int) -> Tuple[float, float, float, float]:
        """Get (x, y, width, height) of a cell in pixels."""
        return (
            col * self.cell_size,
            row * self.cell_size,
            self.cell_size,
            self.cell_size,
        )

    def cell_center(self, row: int, col: int) -> Tuple[float, float]:
        """Get the (x, y) pixel center of a cell."""
        return (
            col * self.cell_size + self.cell_size / 2,
            row * self.cell_size + self.cell_size / 2,
        )

    def pixel_to_cell(self, x: float, y: float) -> Optional[Tuple[int, int]]:
        """
        Map a pixel position to the (row, col) of the cell under it.

        Args:
            x: Horizontal pixel offset from the left edge
            y: Vertical pixel offset from the top edge

        Returns:
            (row, col), or None when the position lies outside the grid
        """
        col = math.floor(x / self.cell_size)
        row = math.floor(y / self.cell_size)
        if not self.contains(row, col):
            return None
        return (row, col)

    def index_grids(self) -> Tuple[np.ndarray, np.ndarray]:
        """
        Get row and column index arrays with shape (rows, cols).

        Returns:
            Tuple of (row_index, col_index) float arrays
        """
        rr, cc = np.meshgrid(
            np.arange(self.rows, dtype=np.float64),
            np.arange(self.cols, dtype=np.float64),
            indexing="ij",
        )
        return rr, cc

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "rows": self.rows,
            "cols": self.cols,
            "cell_size": self.cell_size,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GridGeometry":
        """Create from dictionary."""
        return cls(
            rows=data.get("rows", GRID_ROWS),
            cols=data.get("cols", GRID_COLS),
            cell_size=data.get("cell_size", GRID_CELL_SIZE),
        )


# Grid used by the viewer and CLI
DEFAULT_GRID = GridGeometry()
