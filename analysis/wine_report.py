#!/usr/bin/env python3
"""
Red Wine Quality Report - EDA and Illustrative Models

Runs the report sections in order:
- Dataset overview and rating balance
- Descriptive statistics and outliers
- Correlations with quality, medians by rating
- Figures (univariate, bivariate, multivariate)
- Linear and logistic models

Usage:
    from analysis.wine_report import run_report

    results = run_report('data/raw/wineQualityReds.csv', output_root='outputs')
"""

import matplotlib.pyplot as plt
import pandas as pd
from pathlib import Path
from typing import Any, Dict, Optional

from analysis.plots import (
    plot_boxplots_by_rating,
    plot_chart,
    plot_correlation_matrix,
    plot_histogram_grid,
    plot_roc_curve,
    plot_scatter,
)
from analysis.summary import (
    correlations_with_target,
    grouped_summary,
    outlier_counts,
    rating_distribution,
    summarize_dataset,
)
from config.paths import ensure_directories
from config.settings import FEATURE_COLUMNS, RATING_COLUMN, TARGET_COLUMN
from data_engineering.features.add_rating import add_rating
from data_engineering.load_wine import load_wine_data
from ml_engineering.regression import (
    fit_incremental_linear_models,
    fit_linear_model,
    fit_logistic_model,
)


def print_section(title):
    """Print a section banner"""
    print(f'\n{"="*70}')
    print(title)
    print(f'{"="*70}')


def dataset_overview(df: pd.DataFrame):
    """Print shape, missing values and rating balance"""
    print_section('1. DATASET OVERVIEW')

    print(f'\nObservations: {len(df):,}')
    print(f'Feature columns: {len([c for c in FEATURE_COLUMNS if c in df.columns])} + {TARGET_COLUMN}')

    missing = int(df.isnull().sum().sum())
    print('Missing values: none' if missing == 0 else f'⚠️  Missing values: {missing:,}')

    print(f'\nQuality scores:')
    for score, count in df[TARGET_COLUMN].value_counts().sort_index().items():
        print(f'  {score}: {count:5,} ({count/len(df)*100:5.1f}%)')

    distribution = rating_distribution(df)
    print(f'\nRating balance:')
    for label, row in distribution.iterrows():
        print(f'  {label:8s}: {int(row["count"]):5,} ({row["percent"]:5.1f}%)')

    return distribution


def descriptive_statistics(df: pd.DataFrame):
    """Print per-column statistics and percentile outliers"""
    print_section('2. DESCRIPTIVE STATISTICS')

    summary = summarize_dataset(df, FEATURE_COLUMNS + [TARGET_COLUMN])
    with pd.option_context('display.float_format', '{:.4f}'.format, 'display.width', 120):
        print(f'\n{summary}')

    outliers = outlier_counts(df, FEATURE_COLUMNS)
    print(f'\nOutliers (outside 1st-99th percentile):')
    for col, row in outliers.iterrows():
        print(f'  {col:25s}: {int(row["count"]):4,} ({row["percent"]:4.1f}%)')

    return summary, outliers


def quality_relationships(df: pd.DataFrame, method: str = 'pearson'):
    """Print correlations with quality and medians per rating"""
    print_section(f'3. RELATIONSHIPS WITH QUALITY ({method})')

    correlations = correlations_with_target(df, TARGET_COLUMN, method=method)
    print(f'\nCorrelation with {TARGET_COLUMN}:')
    for i, (feat, corr) in enumerate(correlations.items(), 1):
        print(f'{i:2d}. {feat:25s} {corr:+.4f}')

    medians = grouped_summary(df, RATING_COLUMN, FEATURE_COLUMNS, stat='median')
    with pd.option_context('display.float_format', '{:.3f}'.format, 'display.width', 120):
        print(f'\nMedian by {RATING_COLUMN}:\n{medians.T}')

    return correlations, medians


def generate_figures(df: pd.DataFrame, figures_dir: Path, method: str = 'pearson',
                     correlations: Optional[pd.Series] = None) -> Dict[str, Path]:
    """Write the report figures as PNG files"""
    print_section('4. FIGURES')

    figures_dir = Path(figures_dir)
    if correlations is None:
        correlations = correlations_with_target(df, TARGET_COLUMN, method=method)
    top_two = correlations.index[:2].tolist()

    paths = {
        'univariate': figures_dir / '01_univariate_histograms.png',
        'quality': figures_dir / '02_quality_distribution.png',
        'boxplots': figures_dir / '03_boxplots_by_rating.png',
        'quality_scatter': figures_dir / '04_quality_vs_top_feature.png',
        'multivariate': figures_dir / '05_top_features_by_rating.png',
        'correlation': figures_dir / '06_correlation_matrix.png',
    }

    plot_histogram_grid(df, FEATURE_COLUMNS, output_path=paths['univariate'])
    plot_chart(df, 'histogram', [TARGET_COLUMN], bins=df[TARGET_COLUMN].nunique(),
               output_path=paths['quality'])
    plot_boxplots_by_rating(df, FEATURE_COLUMNS, output_path=paths['boxplots'])
    plot_chart(df, 'scatter', [top_two[0], TARGET_COLUMN], jitter=0.3,
               output_path=paths['quality_scatter'])
    plot_scatter(df, top_two[0], top_two[1], hue=RATING_COLUMN,
                 output_path=paths['multivariate'])
    plot_correlation_matrix(df, FEATURE_COLUMNS + [TARGET_COLUMN], method=method,
                            output_path=paths['correlation'])

    for path in paths.values():
        print(f'  ✓ {path}')

    return paths


def fit_models(df: pd.DataFrame, figures_dir: Optional[Path] = None) -> Dict[str, Any]:
    """Fit the linear and logistic models; optionally write the ROC curve"""
    print_section('5. MODELS')

    _, linear_metrics = fit_linear_model(df)
    nested = fit_incremental_linear_models(df)
    _, logistic_metrics = fit_logistic_model(df)

    if figures_dir is not None:
        roc = logistic_metrics['roc']
        roc_path = Path(figures_dir) / '07_roc_curve.png'
        plot_roc_curve(roc['fpr'], roc['tpr'], roc['auc'], output_path=roc_path)
        print(f'\n  ✓ {roc_path}')

    return {
        'linear': linear_metrics,
        'nested_linear': nested,
        'logistic': logistic_metrics,
    }


def save_tables(results: Dict[str, Any], reports_dir: Path):
    """Write summary tables as CSV"""
    reports_dir = Path(reports_dir)
    reports_dir.mkdir(parents=True, exist_ok=True)

    results['summary'].to_csv(reports_dir / 'summary_statistics.csv', index_label='column')
    results['rating_distribution'].to_csv(reports_dir / 'rating_distribution.csv', index_label=RATING_COLUMN)
    results['correlations'].rename('correlation').to_csv(reports_dir / 'correlations_with_quality.csv', index_label='column')
    results['medians_by_rating'].to_csv(reports_dir / 'medians_by_rating.csv')
    if 'models' in results:
        results['models']['nested_linear'].to_csv(reports_dir / 'nested_linear_models.csv', index=False)

    print(f'\n  ✓ Tables written to {reports_dir}')


def run_report(
    data_path=None,
    output_root=None,
    method: str = 'pearson',
    make_plots: bool = True,
    fit: bool = True,
    write_tables: bool = True
) -> Dict[str, Any]:
    """
    Run the full report

    Args:
        data_path: Wine CSV (default: config.paths.DEFAULT_WINE_FILE)
        output_root: Directory for figures/ and reports/ (default: outputs/)
        method: Correlation method ('pearson' or 'spearman')
        make_plots: Write figures
        fit: Fit the regression models
        write_tables: Write summary tables as CSV

    Returns:
        Dict of result tables and model metrics
    """
    print(f'\n{"#"*70}')
    print(f'# RED WINE QUALITY REPORT')
    print(f'{"#"*70}')

    wine = add_rating(load_wine_data(data_path))

    results: Dict[str, Any] = {'data': wine}
    results['rating_distribution'] = dataset_overview(wine)
    results['summary'], results['outliers'] = descriptive_statistics(wine)
    results['correlations'], results['medians_by_rating'] = quality_relationships(wine, method)

    figures_dir = reports_dir = None
    if make_plots or write_tables:
        figures_dir, reports_dir = ensure_directories(output_root)

    if make_plots:
        results['figures'] = generate_figures(wine, figures_dir, method, results['correlations'])
        plt.close('all')

    if fit:
        results['models'] = fit_models(wine, figures_dir if make_plots else None)
        plt.close('all')

    if write_tables:
        save_tables(results, reports_dir)

    print(f'\n{"="*70}')
    print(f'✓ Report complete ({len(wine):,} observations)')
    print(f'{"="*70}\n')

    return results
