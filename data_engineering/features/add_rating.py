"""
Add Rating Category From Quality Score

Buckets the integer quality score into an ordered three-level rating:
- bad:     quality < 5
- average: 5 <= quality < 7
- good:    quality >= 7

Usage:
    from data_engineering.features.add_rating import add_rating

    wine = add_rating(wine)
    wine['rating'].value_counts()
"""

import numpy as np
import pandas as pd

from config.settings import (
    RATING_BAD_BELOW,
    RATING_COLUMN,
    RATING_GOOD_FROM,
    RATING_LABELS,
    TARGET_COLUMN,
)

RATING_DTYPE = pd.CategoricalDtype(categories=RATING_LABELS, ordered=True)


def rating_for_quality(score):
    """
    Classify a single quality score

    Args:
        score: Quality score (int or float)

    Returns:
        str: 'bad', 'average', or 'good' (None for a missing score)
    """
    if pd.isna(score):
        return None
    if score < RATING_BAD_BELOW:
        return 'bad'
    elif score < RATING_GOOD_FROM:
        return 'average'
    else:
        return 'good'


def add_rating(df: pd.DataFrame, quality_col: str = TARGET_COLUMN,
               rating_col: str = RATING_COLUMN) -> pd.DataFrame:
    """
    Add the ordered rating category

    Args:
        df: DataFrame with a quality column
        quality_col: Name of quality column
        rating_col: Name of the rating column to create

    Returns:
        Copy of df with rating_col as an ordered Categorical
    """
    if quality_col not in df.columns:
        raise KeyError(f'Column not found: {quality_col}')

    df = df.copy()

    # [-inf, 5) bad, [5, 7) average, [7, inf) good
    df[rating_col] = pd.cut(
        df[quality_col],
        bins=[-np.inf, RATING_BAD_BELOW, RATING_GOOD_FROM, np.inf],
        labels=RATING_LABELS,
        right=False,
    ).astype(RATING_DTYPE)

    return df
