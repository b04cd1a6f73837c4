#!/usr/bin/env python3
"""
Descriptive Statistics

Per-column summaries, rating balance, correlations, grouped statistics and
percentile-based outlier counts for the wine dataset. All functions are pure:
they never modify the input DataFrame.

Usage:
    from analysis.summary import summarize_column, summarize_dataset

    summarize_column(wine, 'alcohol')
    # {'min': 8.4, 'q1': 9.5, 'median': 10.2, 'mean': 10.42, ...}
"""

import numpy as np
import pandas as pd
from typing import Dict, List, Optional

from config.settings import RATING_COLUMN, RATING_LABELS, TARGET_COLUMN

SUMMARY_STATS = ['min', 'q1', 'median', 'mean', 'q3', 'max', 'std']


def _require_columns(df: pd.DataFrame, columns):
    missing = [col for col in columns if col not in df.columns]
    if missing:
        raise KeyError(f'Column not found: {", ".join(map(str, missing))}')


def _numeric_columns(df: pd.DataFrame, columns: Optional[List[str]] = None) -> List[str]:
    if columns is None:
        return df.select_dtypes(include=[np.number]).columns.tolist()
    _require_columns(df, columns)
    return list(columns)


def summarize_column(df: pd.DataFrame, column: str) -> Dict[str, float]:
    """
    Descriptive statistics for one numeric column

    Quartiles use linear interpolation and std uses ddof=1, matching
    R's summary() and sd().

    Args:
        df: Dataset
        column: Column name

    Returns:
        Dict with min, q1, median, mean, q3, max, std

    Raises:
        KeyError: If the column is absent
        TypeError: If the column is not numeric
    """
    _require_columns(df, [column])

    values = df[column]
    if not pd.api.types.is_numeric_dtype(values):
        raise TypeError(f'Column {column} is not numeric ({values.dtype})')

    q1, median, q3 = values.quantile([0.25, 0.5, 0.75])

    return {
        'min': float(values.min()),
        'q1': float(q1),
        'median': float(median),
        'mean': float(values.mean()),
        'q3': float(q3),
        'max': float(values.max()),
        'std': float(values.std()),
    }


def summarize_dataset(df: pd.DataFrame, columns: Optional[List[str]] = None) -> pd.DataFrame:
    """Summary statistics for every numeric column, one row per column"""
    columns = _numeric_columns(df, columns)
    rows = {col: summarize_column(df, col) for col in columns}
    return pd.DataFrame.from_dict(rows, orient='index', columns=SUMMARY_STATS)


def rating_distribution(df: pd.DataFrame, rating_col: str = RATING_COLUMN) -> pd.DataFrame:
    """Count and percent of observations per rating level (empty levels included)"""
    _require_columns(df, [rating_col])

    counts = df[rating_col].value_counts().reindex(RATING_LABELS, fill_value=0)
    total = counts.sum()
    percent = (counts / total * 100).round(2) if total else counts.astype(float)

    return pd.DataFrame({'count': counts, 'percent': percent})


def correlation_matrix(df: pd.DataFrame, columns: Optional[List[str]] = None,
                       method: str = 'pearson') -> pd.DataFrame:
    """Pairwise correlation matrix of the numeric columns"""
    columns = _numeric_columns(df, columns)
    return df[columns].corr(method=method)


def correlations_with_target(df: pd.DataFrame, target: str = TARGET_COLUMN,
                             method: str = 'pearson') -> pd.Series:
    """
    Correlation of every numeric column with the target

    Returns:
        Series of signed correlations, ordered by absolute strength
    """
    _require_columns(df, [target])

    numeric_cols = [col for col in _numeric_columns(df) if col != target]
    correlations = df[numeric_cols].corrwith(df[target], method=method)

    order = correlations.abs().sort_values(ascending=False).index
    return correlations.reindex(order)


def grouped_summary(df: pd.DataFrame, by: str = RATING_COLUMN,
                    columns: Optional[List[str]] = None,
                    stat: str = 'median') -> pd.DataFrame:
    """
    One statistic per group level (e.g. median alcohol per rating)

    Args:
        df: Dataset
        by: Grouping column
        columns: Numeric columns to aggregate (default: all numeric except by)
        stat: Any pandas aggregation name ('median', 'mean', 'std', ...)

    Returns:
        DataFrame indexed by group level, one column per aggregated column
    """
    _require_columns(df, [by])

    if columns is None:
        columns = [col for col in _numeric_columns(df) if col != by]
    else:
        _require_columns(df, columns)

    return df.groupby(by, observed=False)[columns].agg(stat)


def outlier_counts(df: pd.DataFrame, columns: Optional[List[str]] = None,
                   lower: float = 0.01, upper: float = 0.99) -> pd.DataFrame:
    """
    Count values outside the [lower, upper] percentile band per column

    Returns:
        DataFrame with count and percent per column, largest first
    """
    if not 0 <= lower < upper <= 1:
        raise ValueError(f'Invalid percentile band: [{lower}, {upper}]')

    columns = _numeric_columns(df, columns)

    rows = {}
    for col in columns:
        low, high = df[col].quantile([lower, upper])
        count = int(((df[col] < low) | (df[col] > high)).sum())
        rows[col] = {'count': count, 'percent': round(count / len(df) * 100, 2) if len(df) else 0.0}

    result = pd.DataFrame.from_dict(rows, orient='index', columns=['count', 'percent'])
    return result.sort_values('count', ascending=False, kind='stable')
