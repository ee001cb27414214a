"""
Data processing module for field scenarios.

This module provides functions for transforming generated scenarios into
analysis-ready pandas DataFrames.

Usage:
    from fieldsim.data.processor import scenario_to_dataframe, summarize_scenarios

    df = scenario_to_dataframe(scenario)
"""

import logging
from typing import Iterable

import pandas as pd

from fieldsim.data.models import FieldType, Scenario

logger = logging.getLogger(__name__)


SCALAR_COLUMNS = ["row", "col", "temperature"]
VECTOR_COLUMNS = ["row", "col", "magnitude", "angle", "present"]
SUMMARY_COLUMNS = [
    "kind", "label", "field_type", "total_cells", "valid_cells", "min", "max", "mean",
]


# =============================================================================
# DataFrame Conversion
# =============================================================================

def scenario_to_dataframe(scenario: Scenario) -> pd.DataFrame:
    """
    Convert a Scenario to a long-format DataFrame, one row per cell.

    Args:
        scenario: Scenario from a generator

    Returns:
        DataFrame with columns row, col, temperature (scalar) or
        row, col, magnitude, angle, present (vector). Absent vectors
        have NaN magnitude and angle.
    """
    rows, cols = scenario.shape
    row_idx = [r for r in range(rows) for _ in range(cols)]
    col_idx = [c for _ in range(rows) for c in range(cols)]

    if scenario.field_type == FieldType.SCALAR:
        df = pd.DataFrame({
            "row": row_idx,
            "col": col_idx,
            "temperature": scenario.data.values.ravel(),
        }, columns=SCALAR_COLUMNS)
    else:
        grid = scenario.data
        present = grid.present.ravel()
        df = pd.DataFrame({
            "row": row_idx,
            "col": col_idx,
            "magnitude": grid.magnitude.ravel(),
            "angle": grid.angle.ravel(),
            "present": present,
        }, columns=VECTOR_COLUMNS)
        df.loc[~df["present"], ["magnitude", "angle"]] = float("nan")

    # Add metadata as attributes
    df.attrs["label"] = scenario.label
    df.attrs["field_type"] = scenario.field_type.value
    df.attrs["kind"] = scenario.kind

    logger.debug(f"Created DataFrame with {len(df)} rows")

    return df


def summarize_scenarios(scenarios: Iterable[Scenario]) -> pd.DataFrame:
    """
    Summarize scenarios into one row each.

    Args:
        scenarios: Generated scenarios

    Returns:
        DataFrame with columns kind, label, field_type, total_cells,
        valid_cells, min, max, mean
    """
    records = []
    for scenario in scenarios:
        stats = scenario.get_statistics()
        records.append({"kind": scenario.kind, **stats})

    if not records:
        logger.warning("No scenarios to summarize - returning empty DataFrame")

    return pd.DataFrame(records, columns=SUMMARY_COLUMNS)


def label_frequencies(summary: pd.DataFrame) -> pd.Series:
    """Count how often each scenario label occurs in a summary."""
    return summary["label"].value_counts().sort_index()
