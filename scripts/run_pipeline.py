#!/usr/bin/env python3
"""
Report Pipeline Script

Runs the complete red wine quality report:
0. Verify the input file
1. Load data and derive the rating
2. Summaries, figures and models

Usage:
    # Full report
    python scripts/run_pipeline.py

    # Different input, Spearman correlations, no model fitting
    python scripts/run_pipeline.py --data winequality-red.csv --method spearman --skip-models
"""

import sys
import argparse
from pathlib import Path
from datetime import datetime

import pandera as pa

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.append(str(PROJECT_ROOT))

from analysis.wine_report import run_report
from config.paths import DEFAULT_WINE_FILE, OUTPUTS_ROOT
from config.settings import CORRELATION_METHODS
from scripts.verify_data import verify


def print_header(text):
    """Print a formatted header"""
    print('\n' + '=' * 80)
    print(text.center(80))
    print('=' * 80 + '\n')


def build_parser():
    parser = argparse.ArgumentParser(
        description='Run the red wine quality EDA report',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Full report
  python scripts/run_pipeline.py

  # Summaries only (no figures, no models)
  python scripts/run_pipeline.py --skip-plots --skip-models

  # Rank correlations
  python scripts/run_pipeline.py --method spearman
        """
    )

    parser.add_argument(
        '--data',
        type=Path,
        default=DEFAULT_WINE_FILE,
        help=f'Wine CSV (default: {DEFAULT_WINE_FILE})'
    )

    parser.add_argument(
        '--output-dir',
        type=Path,
        default=OUTPUTS_ROOT,
        help=f'Directory for figures/ and reports/ (default: {OUTPUTS_ROOT})'
    )

    parser.add_argument(
        '--method',
        choices=CORRELATION_METHODS,
        default='pearson',
        help='Correlation method (default: pearson)'
    )

    parser.add_argument(
        '--skip-plots',
        action='store_true',
        help='Do not write figures'
    )

    parser.add_argument(
        '--skip-models',
        action='store_true',
        help='Do not fit the regression models'
    )

    parser.add_argument(
        '--skip-verify',
        action='store_true',
        help='Skip data verification step'
    )

    return parser


def main(argv=None):
    """Main pipeline orchestration"""
    args = build_parser().parse_args(argv)

    print_header('RED WINE QUALITY - EDA REPORT')
    start_time = datetime.now()
    print(f'Started: {start_time.strftime("%Y-%m-%d %H:%M:%S")}')

    if not args.skip_verify and not verify(args.data):
        print('\n❌ Data verification failed. Pipeline aborted.')
        return 1

    try:
        run_report(
            data_path=args.data,
            output_root=args.output_dir,
            method=args.method,
            make_plots=not args.skip_plots,
            fit=not args.skip_models,
        )
    except (FileNotFoundError, KeyError, ValueError) as e:
        print(f'\n❌ Report failed: {e}')
        return 1
    except pa.errors.SchemaErrors as e:
        print(f'\n❌ Report failed: input does not match the wine schema '
              f'({len(e.failure_cases):,} failing values)')
        return 1

    duration = datetime.now() - start_time
    print_header('PIPELINE SUMMARY')
    print(f'Duration: {duration}')
    print(f'Outputs:  {args.output_dir}')
    print('\n✓ PIPELINE COMPLETED SUCCESSFULLY\n')
    return 0


if __name__ == '__main__':
    sys.exit(main())
