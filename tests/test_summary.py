"""Tests for descriptive statistics"""

import numpy as np
import pandas as pd
import pytest

from analysis.summary import (
    SUMMARY_STATS,
    correlation_matrix,
    correlations_with_target,
    grouped_summary,
    outlier_counts,
    rating_distribution,
    summarize_column,
    summarize_dataset,
)
from config.settings import FEATURE_COLUMNS
from data_engineering.features.add_rating import add_rating
from data_engineering.load_wine import load_wine_data


def test_summarize_column_known_values():
    df = pd.DataFrame({'x': [1.0, 2.0, 3.0, 4.0, 5.0]})

    stats = summarize_column(df, 'x')

    assert stats['min'] == 1.0
    assert stats['q1'] == 2.0
    assert stats['median'] == 3.0
    assert stats['mean'] == 3.0
    assert stats['q3'] == 4.0
    assert stats['max'] == 5.0
    assert stats['std'] == pytest.approx(np.sqrt(2.5))  # sample std (ddof=1)


def test_summarize_column_interpolates_quartiles():
    df = pd.DataFrame({'x': [1.0, 2.0, 3.0, 4.0]})

    stats = summarize_column(df, 'x')

    assert stats['q1'] == pytest.approx(1.75)
    assert stats['median'] == pytest.approx(2.5)
    assert stats['q3'] == pytest.approx(3.25)


def test_summarize_column_absent(wine_df):
    with pytest.raises(KeyError, match='tannin'):
        summarize_column(wine_df, 'tannin')


def test_summarize_column_not_numeric(rated_wine):
    with pytest.raises(TypeError):
        summarize_column(rated_wine, 'rating')


def test_summarize_dataset_matches_columns(rated_wine):
    summary = summarize_dataset(rated_wine)

    # rating is categorical and excluded
    assert list(summary.index) == FEATURE_COLUMNS + ['quality']
    assert list(summary.columns) == SUMMARY_STATS
    assert summary.loc['alcohol'].to_dict() == summarize_column(rated_wine, 'alcohol')


def test_summarize_dataset_ordering(wine_df):
    summary = summarize_dataset(wine_df, ['pH', 'alcohol'])

    assert list(summary.index) == ['pH', 'alcohol']
    assert (summary['min'] <= summary['q1']).all()
    assert (summary['q1'] <= summary['median']).all()
    assert (summary['median'] <= summary['q3']).all()
    assert (summary['q3'] <= summary['max']).all()


def test_rating_distribution(rated_wine):
    dist = rating_distribution(rated_wine)

    assert list(dist.index) == ['bad', 'average', 'good']
    assert dist['count'].sum() == len(rated_wine)
    assert dist['percent'].sum() == pytest.approx(100, abs=0.05)


def test_rating_distribution_keeps_empty_levels(wine_df):
    rated = add_rating(wine_df[wine_df['quality'] >= 5])

    dist = rating_distribution(rated)

    assert dist.loc['bad', 'count'] == 0
    assert dist['count'].sum() == len(rated)


def test_correlation_signs(wine_df):
    correlations = correlations_with_target(wine_df)

    assert 'quality' not in correlations.index
    assert correlations['alcohol'] > 0
    assert correlations['volatile_acidity'] < 0


def test_correlations_sorted_by_strength(wine_df):
    correlations = correlations_with_target(wine_df)

    strengths = correlations.abs().tolist()
    assert strengths == sorted(strengths, reverse=True)


def test_spearman_correlation_signs(wine_df):
    correlations = correlations_with_target(wine_df, method='spearman')

    assert correlations['alcohol'] > 0
    assert correlations['volatile_acidity'] < 0


def test_correlation_matrix_symmetric(wine_df):
    corr = correlation_matrix(wine_df, ['alcohol', 'pH', 'quality'])

    assert corr.shape == (3, 3)
    np.testing.assert_allclose(np.diag(corr), 1.0)
    np.testing.assert_allclose(corr.values, corr.values.T)


def test_grouped_medians_by_rating(rated_wine):
    medians = grouped_summary(rated_wine, 'rating', ['alcohol', 'volatile_acidity'])

    assert list(medians.index) == ['bad', 'average', 'good']
    assert medians.loc['good', 'alcohol'] > medians.loc['bad', 'alcohol']
    assert medians.loc['good', 'volatile_acidity'] < medians.loc['bad', 'volatile_acidity']


def test_grouped_summary_absent_column(rated_wine):
    with pytest.raises(KeyError):
        grouped_summary(rated_wine, 'region')


def test_outlier_counts():
    df = pd.DataFrame({'x': np.arange(100, dtype=float)})

    outliers = outlier_counts(df, ['x'])

    # 1st / 99th percentiles are 0.99 and 98.01: only 0 and 99 fall outside
    assert outliers.loc['x', 'count'] == 2
    assert outliers.loc['x', 'percent'] == pytest.approx(2.0)


def test_outlier_counts_invalid_band(wine_df):
    with pytest.raises(ValueError):
        outlier_counts(wine_df, lower=0.9, upper=0.1)


def test_summary_is_idempotent(wine_csv):
    first = summarize_dataset(add_rating(load_wine_data(wine_csv)))
    second = summarize_dataset(add_rating(load_wine_data(wine_csv)))

    pd.testing.assert_frame_equal(first, second)
