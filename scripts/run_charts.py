#!/usr/bin/env python3
"""
Iris Chart Script

Loads an Iris CSV file, computes per-species quartiles and renders the
scatter plot and side-by-side boxplot.
"""

import argparse
import sys
from pathlib import Path

import matplotlib
matplotlib.use('Agg')

# Add the project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from irisplot.data.loader import IrisLoader
from irisplot.geometry.layout import LAYOUTS
from irisplot.visualization.charts import ChartGenerator
from irisplot.utils.config_loader import ConfigLoader, DEFAULT_CONFIG, merge_config
from irisplot.utils.errors import DataFormatError
from irisplot.utils.logger import setup_logger


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Render Iris scatter plot and boxplot"
    )
    parser.add_argument(
        '--input',
        type=str,
        default='data/iris_sample.csv',
        help='CSV file with petal length, petal width and species columns'
    )
    parser.add_argument(
        '--output-dir',
        type=str,
        default=None,
        help='Output directory for charts (default: general.save_dir)'
    )
    parser.add_argument(
        '--config',
        type=str,
        default='config/chart_config.yaml',
        help='Path to chart configuration file'
    )
    parser.add_argument(
        '--layout',
        choices=sorted(LAYOUTS),
        help='Chart layout (overrides chart.layout)'
    )
    parser.add_argument(
        '--format',
        choices=['svg', 'png', 'pdf'],
        help='Output image format (overrides general.save_format)'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Verbose output'
    )
    return parser.parse_args(argv)


def main(argv=None):
    """Main execution function."""
    args = parse_args(argv)

    logger = setup_logger(
        name='irisplot',
        level='DEBUG' if args.verbose else 'INFO'
    )

    logger.info("Starting chart generation...")

    if Path(args.config).exists():
        config = ConfigLoader(args.config).load()
    else:
        logger.warning(f"Config file {args.config} not found, using defaults")
        config = merge_config(DEFAULT_CONFIG, {})

    if args.format:
        config['general']['save_format'] = args.format

    try:
        # Step 1: Load records
        logger.info("Step 1/2: Loading data...")
        data = IrisLoader(data_path=args.input, config=config).load()

        # Step 2: Summarise, map and render
        logger.info("Step 2/2: Rendering charts...")
        generator = ChartGenerator(config, layout=args.layout)
        outputs = generator.generate_all_charts(data, output_dir=args.output_dir)

    except (DataFormatError, FileNotFoundError) as e:
        logger.error(f"Chart generation failed: {e}")
        return 1

    for name, path in outputs.items():
        logger.info(f"  - {name}: {path}")

    logger.info("Chart generation completed successfully!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
