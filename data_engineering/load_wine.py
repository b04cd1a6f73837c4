#!/usr/bin/env python3
"""
Wine Dataset Loader

Reads the red wine quality CSV into a DataFrame with a fixed schema:
- Headers normalised to snake_case ('fixed.acidity' -> 'fixed_acidity')
- Row-number column (X / Unnamed: 0) becomes the 'observation' index
- Semicolon-delimited UCI downloads are detected automatically

Usage:
    from data_engineering.load_wine import load_wine_data

    df = load_wine_data()                        # default: data/raw/wineQualityReds.csv
    df = load_wine_data('winequality-red.csv')   # UCI original
"""

from pathlib import Path

import pandas as pd

from config.paths import DEFAULT_WINE_FILE
from config.settings import INDEX_COLUMNS, INDEX_NAME, REQUIRED_COLUMNS
from data_engineering.utils.validation import validate_wine_dataset


def normalize_column_name(name) -> str:
    """'fixed.acidity' / 'fixed acidity' -> 'fixed_acidity'; 'pH' unchanged"""
    return str(name).strip().replace('.', '_').replace(' ', '_')


def read_wine_csv(path: Path) -> pd.DataFrame:
    """Read the raw CSV, falling back to ';' when the file is UCI-formatted"""
    try:
        df = pd.read_csv(path)
    except pd.errors.EmptyDataError:
        raise ValueError(f'Wine data file is empty: {path}')
    except pd.errors.ParserError as e:
        raise ValueError(f'Could not parse wine data file {path}: {e}')

    # A single column with ';' in its name means the wrong delimiter was used
    if df.shape[1] == 1 and ';' in str(df.columns[0]):
        df = pd.read_csv(path, sep=';')

    return df


def load_wine_data(path=None, validate: bool = True) -> pd.DataFrame:
    """
    Load the wine dataset

    Args:
        path: CSV path (default: config.paths.DEFAULT_WINE_FILE)
        validate: Run pandera schema validation after loading

    Returns:
        DataFrame with the eleven feature columns plus quality

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is empty, unparsable, or missing columns
    """
    path = Path(path) if path is not None else DEFAULT_WINE_FILE

    if not path.exists():
        raise FileNotFoundError(
            f'Wine data file not found: {path}\n'
            f'   Place wineQualityReds.csv under data/raw/ or pass --data.'
        )

    print(f'Loading wine dataset from {path}...')
    df = read_wine_csv(path)
    df.columns = [normalize_column_name(c) for c in df.columns]

    index_cols = [c for c in df.columns if c in INDEX_COLUMNS]
    if index_cols:
        df = df.set_index(index_cols[0])
        df.index.name = INDEX_NAME

    missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        raise ValueError(
            f'Wine data file {path} is missing required columns: {missing}\n'
            f'   Found: {list(df.columns)}'
        )

    if df.empty:
        raise ValueError(f'Wine data file has no observations: {path}')

    df = df[REQUIRED_COLUMNS]

    if validate:
        df = validate_wine_dataset(df, path.name)

    print(f'✓ Loaded {len(df):,} samples')
    return df
