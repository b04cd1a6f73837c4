#!/usr/bin/env python3
"""
Data Verification Script

Checks that the wine CSV is present and has the expected columns
before running the report.

Usage:
    python scripts/verify_data.py
    python scripts/verify_data.py --data path/to/winequality-red.csv
"""

import sys
import argparse
from pathlib import Path

# Add project root to path
sys.path.append(str(Path(__file__).parent.parent))

from config.paths import DEFAULT_WINE_FILE
from config.settings import REQUIRED_COLUMNS
from data_engineering.load_wine import normalize_column_name, read_wine_csv


def check_file_exists(file_path, description):
    """Check if a file exists and print status"""
    if file_path.exists():
        size_kb = file_path.stat().st_size / 1024
        print(f'✓ {description}: {size_kb:.1f} KB')
        return True
    else:
        print(f'✗ {description}: NOT FOUND')
        print(f'  Expected: {file_path}')
        return False


def verify_wine_data(wine_file):
    """Verify wine data has the required columns and no missing values"""
    try:
        df = read_wine_csv(wine_file)
    except ValueError as e:
        print(f'  ✗ Error reading file: {e}')
        return False

    columns = [normalize_column_name(c) for c in df.columns]
    missing = [col for col in REQUIRED_COLUMNS if col not in columns]

    if missing:
        print(f'  ✗ Missing columns: {missing}')
        return False

    if df.empty:
        print('  ✗ No observations (header only)')
        return False

    print(f'  ✓ Contains {len(df):,} observations')
    print(f'  ✓ Required columns present')

    null_count = int(df.isnull().sum().sum())
    if null_count:
        print(f'  ⚠️  {null_count:,} missing values')

    return True


def verify(wine_file=None):
    """Run all checks; returns True when the report can run"""
    wine_file = Path(wine_file) if wine_file is not None else DEFAULT_WINE_FILE

    print('=' * 80)
    print('DATA VERIFICATION')
    print('=' * 80)

    if not check_file_exists(wine_file, 'Wine quality CSV'):
        print('\n  Download wineQualityReds.csv (or the UCI winequality-red.csv)')
        print(f'  and place it at {wine_file}')
        return False

    return verify_wine_data(wine_file)


def main():
    parser = argparse.ArgumentParser(description='Verify the wine quality input file')
    parser.add_argument('--data', type=Path, default=DEFAULT_WINE_FILE,
                        help=f'Wine CSV (default: {DEFAULT_WINE_FILE})')
    args = parser.parse_args()

    ok = verify(args.data)
    print('\n✓ Data verified' if ok else '\n✗ Data verification failed')
    return 0 if ok else 1


if __name__ == '__main__':
    sys.exit(main())
