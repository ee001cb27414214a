#!/usr/bin/env python
"""
Command-line interface for the Field Scenario Simulator.

This module opens the interactive viewer, renders single scenarios to
image files, or generates batches of scenarios and prints a summary.

Usage:
    python -m fieldsim.cli
    python -m fieldsim.cli --field-type vector --seed 7 --output output/wind.png
    python -m fieldsim.cli --batch 1000 --field-type scalar
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

import numpy as np
import pandas as pd
from dotenv import load_dotenv
load_dotenv()

from config.settings import FIELD_TYPES, MIN_DPI, MAX_DPI, get_settings
from fieldsim.data.grid import GridGeometry, DEFAULT_GRID
from fieldsim.data.models import FieldType
from fieldsim.data.processor import summarize_scenarios, label_frequencies
from fieldsim.data.scalar_generator import SCALAR_SCENARIOS, generate_scalar_scenario
from fieldsim.data.vector_generator import VECTOR_SCENARIOS, generate_vector_scenario
from fieldsim.visualization.canvas import save_scenario_image


# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)
logger = logging.getLogger(__name__)

SCENARIO_NAMES = [s.name for s in SCALAR_SCENARIOS] + [s.name for s in VECTOR_SCENARIOS]


def positive_int(value: str) -> int:
    """Parse a strictly positive integer argument."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid integer: '{value}'")
    if number < 1:
        raise argparse.ArgumentTypeError(f"Must be at least 1: {number}")
    return number


def dpi_value(value: str) -> int:
    """Parse an image DPI within the range accepted by settings."""
    try:
        dpi = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid DPI: '{value}'")
    if not MIN_DPI <= dpi <= MAX_DPI:
        raise argparse.ArgumentTypeError(f"DPI must be between {MIN_DPI} and {MAX_DPI}: {dpi}")
    return dpi


def resolve_output_path(output: Path, output_dir: Path) -> Path:
    """Place a relative output path under the configured output directory."""
    output = Path(output)
    if output.is_absolute():
        return output
    return output_dir / output


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        description="Generate and view synthetic temperature and wind field scenarios.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Open the interactive viewer
  python -m fieldsim.cli

  # Render one wind scenario to PNG
  python -m fieldsim.cli --field-type vector --output output/wind.png

  # Force a vortex with a fixed seed
  python -m fieldsim.cli --field-type vector --scenario rotational --seed 3 --output vortex.png

  # Generate 1000 temperature scenarios and summarize them
  python -m fieldsim.cli --batch 1000
        """
    )

    gen_group = parser.add_argument_group('Generation')
    gen_group.add_argument(
        '--field-type',
        type=str,
        choices=list(FIELD_TYPES),
        default=None,
        help='Field type to generate. Default: from settings (scalar)'
    )
    gen_group.add_argument(
        '--scenario',
        type=str,
        choices=SCENARIO_NAMES,
        default=None,
        help='Force one scenario of the selected field type instead of drawing one'
    )
    gen_group.add_argument(
        '--seed',
        type=int,
        default=None,
        help='Random seed for reproducible scenarios'
    )

    output_group = parser.add_argument_group('Output Options')
    output_group.add_argument(
        '--output',
        type=Path,
        default=None,
        help='Render one scenario to this image file instead of opening the viewer. '
             'Relative paths are placed under the output directory from settings'
    )
    output_group.add_argument(
        '--batch',
        type=positive_int,
        default=None,
        help='Generate N scenarios and print a summary instead of opening the viewer'
    )
    output_group.add_argument(
        '--dpi',
        type=dpi_value,
        default=None,
        help='Image DPI for --output. Default: from settings'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose output'
    )

    return parser


def _generator_for(field_type: FieldType):
    if field_type == FieldType.SCALAR:
        return generate_scalar_scenario
    return generate_vector_scenario


def run_batch(
    count: int,
    field_type: FieldType,
    rng: np.random.Generator,
    scenario: Optional[str] = None,
    geometry: GridGeometry = DEFAULT_GRID,
) -> pd.DataFrame:
    """
    Generate a batch of scenarios and summarize them.

    Args:
        count: Number of scenarios
        field_type: Field type to generate
        rng: Random generator
        scenario: Force a named strategy
        geometry: Grid geometry

    Returns:
        Summary DataFrame, one row per scenario
    """
    generate = _generator_for(field_type)
    scenarios = [generate(geometry, rng, scenario) for _ in range(count)]
    logger.info(f"Generated {count} {field_type.value} scenarios")
    return summarize_scenarios(scenarios)


def run_snapshot(
    output_path: Path,
    field_type: FieldType,
    rng: np.random.Generator,
    scenario: Optional[str] = None,
    geometry: GridGeometry = DEFAULT_GRID,
    dpi: int = 100,
) -> Path:
    """
    Generate one scenario and save it as an image.

    Returns:
        Path to the saved image
    """
    generated = _generator_for(field_type)(geometry, rng, scenario)
    logger.info(f"Scenario: {generated.label}")

    stats = generated.get_statistics()
    logger.info(f"  Cells: {stats['valid_cells']}/{stats['total_cells']}")
    if stats['max'] is not None:
        logger.info(
            f"  Range: {stats['min']:.1f} to {stats['max']:.1f} "
            f"(mean {stats['mean']:.1f})"
        )

    return save_scenario_image(generated, output_path, geometry=geometry, dpi=dpi)


def main(argv: Optional[list] = None) -> int:
    """Main entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    # Get settings
    settings = get_settings()

    # Set log level
    logging.getLogger().setLevel(logging.DEBUG if args.verbose else settings.log_level)

    field_type = FieldType(args.field_type or settings.default_field_type)
    seed = args.seed if args.seed is not None else settings.random_seed
    rng = np.random.default_rng(seed)

    try:
        if args.batch:
            summary = run_batch(args.batch, field_type, rng, args.scenario)

            print("=" * 70)
            print(f"Scenario Summary ({args.batch} x {field_type.value})")
            print("=" * 70)
            print(label_frequencies(summary).to_string())
            print()
            print(summary[["min", "max", "mean"]].describe().to_string())
            return 0

        if args.output:
            settings.ensure_directories()
            path = run_snapshot(
                resolve_output_path(args.output, settings.output_dir),
                field_type,
                rng,
                args.scenario,
                dpi=args.dpi or settings.image_dpi,
            )
            print(f"Saved: {path}")
            return 0

        from fieldsim.viewer import FieldViewer

        viewer = FieldViewer(field_type=field_type, rng=rng)
        viewer.show()
        return 0

    except Exception as e:
        logger.error(f"Error running simulator: {e}")
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
