"""
Data models for field scenarios.

This module defines Pydantic models for wind vectors, the scalar and
vector grids produced by the generators, and the Scenario that pairs a
grid with its human-readable label.

Grids are immutable once produced: their backing arrays are copied on
construction and flagged read-only, so a grid handed to the renderer or
the tooltip lookup can never change underneath them.
"""

from enum import Enum
from typing import Optional, List, Tuple, Iterator, Union, Dict, Any

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, model_validator


class FieldType(str, Enum):
    """Kind of field a scenario carries."""

    SCALAR = "scalar"
    VECTOR = "vector"


class Vector(BaseModel):
    """
    Wind vector at a grid cell.

    Attributes:
        magnitude: Wind speed in m/s (non-negative)
        angle: Direction in degrees, 0 = +x (right), increasing clockwise
            on screen since the y axis points down
    """

    model_config = ConfigDict(frozen=True)

    magnitude: float = Field(..., ge=0, description="Wind speed in m/s")
    angle: float = Field(..., ge=0, lt=360, description="Direction in degrees")


def _readonly(values, dtype) -> np.ndarray:
    arr = np.array(values, dtype=dtype)
    arr.setflags(write=False)
    return arr


class ScalarGrid(BaseModel):
    """
    Dense rows × cols grid of temperatures.

    Attributes:
        values: 2D float array, read-only
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    values: np.ndarray

    @model_validator(mode="before")
    @classmethod
    def coerce_values(cls, data):
        """Copy values into a read-only 2D float array."""
        if isinstance(data, dict) and "values" in data:
            values = _readonly(data["values"], np.float64)
            if values.ndim != 2 or 0 in values.shape:
                raise ValueError(f"values must be a non-empty 2D array, got shape {values.shape}")
            if not np.all(np.isfinite(values)):
                raise ValueError("values must be finite")
            data = {**data, "values": values}
        return data

    @property
    def shape(self) -> Tuple[int, int]:
        return self.values.shape

    def value(self, row: int, col: int) -> float:
        """Get the temperature at a cell."""
        return float(self.values[row, col])

    def to_list(self) -> List[List[float]]:
        return self.values.tolist()


class VectorGrid(BaseModel):
    """
    Rows × cols grid of wind vectors; a cell may be absent (no wind).

    Attributes:
        magnitude: 2D float array of speeds, read-only
        angle: 2D float array of directions in degrees, read-only
        present: 2D bool mask, False where the cell holds no vector
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    magnitude: np.ndarray
    angle: np.ndarray
    present: np.ndarray

    @model_validator(mode="before")
    @classmethod
    def coerce_arrays(cls, data):
        """Copy the component arrays read-only and check they line up."""
        if not isinstance(data, dict):
            return data

        magnitude = _readonly(data["magnitude"], np.float64)
        angle = _readonly(data["angle"], np.float64)
        present = data.get("present")
        if present is None:
            present = np.ones(magnitude.shape, dtype=bool)
        present = _readonly(present, bool)

        if magnitude.ndim != 2 or 0 in magnitude.shape:
            raise ValueError(f"magnitude must be a non-empty 2D array, got shape {magnitude.shape}")
        if angle.shape != magnitude.shape or present.shape != magnitude.shape:
            raise ValueError(
                f"Component shapes differ: magnitude {magnitude.shape}, "
                f"angle {angle.shape}, present {present.shape}"
            )
        if np.any(magnitude[present] < 0):
            raise ValueError("magnitude must be non-negative")
        angles = angle[present]
        if np.any((angles < 0) | (angles >= 360)):
            raise ValueError("angle must be in [0, 360) degrees")

        return {**data, "magnitude": magnitude, "angle": angle, "present": present}

    @classmethod
    def from_vectors(cls, rows: List[List[Optional[Vector]]]) -> "VectorGrid":
        """
        Build a grid from nested rows of Vector or None.

        Args:
            rows: List of rows, each a list of Vector (or None for no wind)
        """
        magnitude = [[v.magnitude if v is not None else 0.0 for v in row] for row in rows]
        angle = [[v.angle if v is not None else 0.0 for v in row] for row in rows]
        present = [[v is not None for v in row] for row in rows]
        return cls(magnitude=magnitude, angle=angle, present=present)

    @property
    def shape(self) -> Tuple[int, int]:
        return self.magnitude.shape

    def get(self, row: int, col: int) -> Optional[Vector]:
        """Get the vector at a cell, or None if the cell is empty."""
        if not self.present[row, col]:
            return None
        return Vector(
            magnitude=float(self.magnitude[row, col]),
            angle=float(self.angle[row, col]),
        )

    def iter_present(self) -> Iterator[Tuple[int, int, Vector]]:
        """Yield (row, col, vector) for every non-empty cell in row-major order."""
        for row, col in zip(*np.nonzero(self.present)):
            yield int(row), int(col), self.get(row, col)


FieldData = Union[ScalarGrid, VectorGrid]


class Scenario(BaseModel):
    """
    One generation episode: a grid plus its descriptive label.

    Attributes:
        field_type: Whether data is a ScalarGrid or a VectorGrid
        label: Human-readable scenario name
        data: The generated grid
        kind: Key of the strategy that produced the grid
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    field_type: FieldType
    label: str
    data: FieldData
    kind: Optional[str] = None

    @model_validator(mode="after")
    def validate_data_type(self) -> "Scenario":
        """Ensure the grid matches the field type."""
        expected = ScalarGrid if self.field_type == FieldType.SCALAR else VectorGrid
        if not isinstance(self.data, expected):
            raise ValueError(
                f"{self.field_type.value} scenario requires {expected.__name__}, "
                f"got {type(self.data).__name__}"
            )
        return self

    @property
    def shape(self) -> Tuple[int, int]:
        return self.data.shape

    def format_cell(self, row: int, col: int) -> Optional[str]:
        """
        Format a cell's value for a tooltip.

        Returns:
            "Temp: 21.3°C" for scalar cells, "Wind: 7.5 m/s, 270°" for
            present vectors, None when there is nothing to show
        """
        rows, cols = self.shape
        if not (0 <= row < rows and 0 <= col < cols):
            return None

        if self.field_type == FieldType.SCALAR:
            return f"Temp: {self.data.value(row, col):.1f}°C"

        vector = self.data.get(row, col)
        if vector is None:
            return None
        return f"Wind: {vector.magnitude:.1f} m/s, {vector.angle:.0f}°"

    def get_statistics(self) -> Dict[str, Any]:
        """Get summary statistics for the scenario's grid."""
        if self.field_type == FieldType.SCALAR:
            values = self.data.values
            total = values.size
            valid = total
        else:
            values = self.data.magnitude[self.data.present]
            total = self.data.magnitude.size
            valid = int(values.size)

        stats = {
            "field_type": self.field_type.value,
            "label": self.label,
            "total_cells": int(total),
            "valid_cells": valid,
        }
        if valid == 0:
            return {**stats, "min": None, "max": None, "mean": None}

        return {
            **stats,
            "min": float(values.min()),
            "max": float(values.max()),
            "mean": float(values.mean()),
        }
