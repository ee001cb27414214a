"""
Data module for grid geometry, field models, and scenario generation.
"""

from fieldsim.data.grid import GridGeometry, DEFAULT_GRID
from fieldsim.data.models import FieldType, Vector, ScalarGrid, VectorGrid, Scenario
from fieldsim.data.scenarios import ScenarioStrategy, select_strategy
from fieldsim.data.scalar_generator import (
    SCALAR_SCENARIOS,
    generate_scalar_field,
    generate_scalar_scenario,
)
from fieldsim.data.vector_generator import (
    VECTOR_SCENARIOS,
    generate_vector_field,
    generate_vector_scenario,
)
from fieldsim.data.processor import (
    scenario_to_dataframe,
    summarize_scenarios,
    label_frequencies,
)

__all__ = [
    # Geometry
    "GridGeometry",
    "DEFAULT_GRID",
    # Models
    "FieldType",
    "Vector",
    "ScalarGrid",
    "VectorGrid",
    "Scenario",
    # Dispatch
    "ScenarioStrategy",
    "select_strategy",
    # Generators
    "SCALAR_SCENARIOS",
    "generate_scalar_field",
    "generate_scalar_scenario",
    "VECTOR_SCENARIOS",
    "generate_vector_field",
    "generate_vector_scenario",
    # Processing
    "scenario_to_dataframe",
    "summarize_scenarios",
    "label_frequencies",
]
