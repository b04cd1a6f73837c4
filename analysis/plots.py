#!/usr/bin/env python3
"""
Wine Report Charts

Histograms, boxplots, scatterplots and correlation heatmaps built with
matplotlib + seaborn. Every function returns the Figure and, when an
output_path is given, writes it as PNG and closes it.

Usage:
    from analysis.plots import plot_chart

    plot_chart(wine, 'histogram', ['alcohol'], output_path='alcohol.png')
    plot_chart(wine, 'boxplot', ['alcohol'], by='rating')
    plot_chart(wine, 'scatter', ['alcohol', 'volatile_acidity'], hue='rating')
    plot_chart(wine, 'correlation', FEATURE_COLUMNS + ['quality'])
"""

import math
import warnings
from pathlib import Path
from typing import List, Optional, Sequence

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import seaborn as sns

from config.settings import (
    COLUMN_UNITS,
    DEFAULT_FIGSIZE,
    FEATURE_COLUMNS,
    FIGURE_DPI,
    HEATMAP_CMAP,
    HISTOGRAM_BINS,
    LOG_SCALE_COLUMNS,
    RANDOM_STATE,
    RATING_COLORS,
    RATING_COLUMN,
)

warnings.filterwarnings('ignore', category=FutureWarning, module='seaborn')

# Visualization settings
sns.set_style('whitegrid')

CHART_KINDS = ['histogram', 'boxplot', 'scatter', 'correlation']


def _label(column: str) -> str:
    return COLUMN_UNITS.get(column, column.replace('_', ' ').capitalize())


def _require_columns(df: pd.DataFrame, columns):
    missing = [col for col in columns if col not in df.columns]
    if missing:
        raise KeyError(f'Column not found: {", ".join(map(str, missing))}')


def _palette(hue: Optional[str]):
    """Fixed rating colours; seaborn defaults for any other hue"""
    if hue == RATING_COLUMN:
        return RATING_COLORS
    return None


def _axes(ax):
    """(fig, ax, owned): a new figure unless drawing into an existing panel"""
    if ax is None:
        fig, ax = plt.subplots(figsize=DEFAULT_FIGSIZE)
        return fig, ax, True
    return ax.figure, ax, False


def _finish(fig, output_path):
    fig.tight_layout()
    if output_path is not None:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(output_path, dpi=FIGURE_DPI, bbox_inches='tight')
        plt.close(fig)
    return fig


def plot_histogram(df: pd.DataFrame, column: str, bins: int = HISTOGRAM_BINS,
                   log_scale: bool = False, ax=None, output_path=None):
    """
    Histogram of one column

    Args:
        df: Dataset
        column: Column to plot
        bins: Number of bins
        log_scale: Use a log10 x-axis (for long-tailed measurements)
        ax: Existing axes to draw on (figure is not saved when given)
        output_path: PNG destination

    Returns:
        matplotlib Figure
    """
    _require_columns(df, [column])

    fig, ax, owned = _axes(ax)

    values = df[column]
    if log_scale:
        # log10 axis cannot show zeros
        values = values[values > 0]

    sns.histplot(x=values, bins=bins, log_scale=log_scale, color='steelblue', ax=ax)

    median = values.median()
    ax.axvline(median, color='coral', linestyle='--', linewidth=1.5,
               label=f'median = {median:.3g}')
    ax.legend(loc='upper right', fontsize=9)

    title = f'{_label(column)}' + (' (log10 scale)' if log_scale else '')
    ax.set_title(title, fontsize=12, fontweight='bold')
    ax.set_xlabel(_label(column))
    ax.set_ylabel('Count')

    return _finish(fig, output_path) if owned else fig


def plot_histogram_grid(df: pd.DataFrame, columns: Optional[List[str]] = None,
                        ncols: int = 3, output_path=None):
    """Histograms for every feature; LOG_SCALE_COLUMNS drawn on a log10 axis"""
    columns = list(columns) if columns is not None else [c for c in FEATURE_COLUMNS if c in df.columns]
    _require_columns(df, columns)

    nrows = max(1, math.ceil(len(columns) / ncols))
    fig, axes = plt.subplots(nrows, ncols, figsize=(6 * ncols, 4 * nrows))
    axes = np.atleast_1d(axes).ravel()

    for ax, col in zip(axes, columns):
        plot_histogram(df, col, log_scale=col in LOG_SCALE_COLUMNS, ax=ax)

    # Hide unused panels
    for ax in axes[len(columns):]:
        ax.set_visible(False)

    fig.suptitle('Univariate Distributions', fontsize=14, fontweight='bold')
    return _finish(fig, output_path)


def plot_boxplot(df: pd.DataFrame, column: str, by: Optional[str] = None,
                 show_points: bool = True, ax=None, output_path=None):
    """
    Boxplot of one column, optionally split by a grouping column

    Args:
        df: Dataset
        column: Numeric column (y-axis)
        by: Grouping column, e.g. 'rating' or 'quality' (x-axis)
        show_points: Overlay jittered observations
        ax: Existing axes to draw on
        output_path: PNG destination

    Returns:
        matplotlib Figure
    """
    _require_columns(df, [column] + ([by] if by else []))

    fig, ax, owned = _axes(ax)

    if by is None:
        sns.boxplot(y=df[column], color='steelblue', ax=ax)
        if show_points:
            sns.stripplot(y=df[column], color='black', alpha=0.15, size=2, ax=ax)
        ax.set_title(_label(column), fontsize=12, fontweight='bold')
    else:
        palette = _palette(by)
        sns.boxplot(data=df, x=by, y=column, hue=by, palette=palette,
                    legend=False, ax=ax)
        if show_points:
            sns.stripplot(data=df, x=by, y=column, color='black', alpha=0.15,
                          size=2, jitter=0.25, ax=ax)
        ax.set_title(f'{_label(column)} by {by}', fontsize=12, fontweight='bold')
        ax.set_xlabel(_label(by))

    ax.set_ylabel(_label(column))
    return _finish(fig, output_path) if owned else fig


def plot_boxplots_by_rating(df: pd.DataFrame, columns: Optional[List[str]] = None,
                            by: str = RATING_COLUMN, ncols: int = 3, output_path=None):
    """One boxplot panel per feature, grouped by rating"""
    columns = list(columns) if columns is not None else [c for c in FEATURE_COLUMNS if c in df.columns]
    _require_columns(df, columns + [by])

    nrows = max(1, math.ceil(len(columns) / ncols))
    fig, axes = plt.subplots(nrows, ncols, figsize=(6 * ncols, 4 * nrows))
    axes = np.atleast_1d(axes).ravel()

    for ax, col in zip(axes, columns):
        plot_boxplot(df, col, by=by, show_points=False, ax=ax)

    for ax in axes[len(columns):]:
        ax.set_visible(False)

    fig.suptitle(f'Measurements by {by}', fontsize=14, fontweight='bold')
    return _finish(fig, output_path)


def plot_scatter(df: pd.DataFrame, x: str, y: str, hue: Optional[str] = None,
                 jitter: float = 0.0, alpha: float = 0.5, ax=None, output_path=None):
    """
    Scatterplot of two columns

    Args:
        df: Dataset
        x, y: Columns for the axes
        hue: Optional colouring column (e.g. 'rating')
        jitter: Uniform noise added to y (useful when y is the integer quality)
        alpha: Point transparency
        ax: Existing axes to draw on
        output_path: PNG destination

    Returns:
        matplotlib Figure
    """
    _require_columns(df, [x, y] + ([hue] if hue else []))

    fig, ax, owned = _axes(ax)

    y_values = df[y]
    if jitter:
        rng = np.random.RandomState(RANDOM_STATE)
        y_values = y_values + rng.uniform(-jitter, jitter, size=len(df))

    sns.scatterplot(x=df[x], y=y_values, hue=df[hue] if hue else None,
                    palette=_palette(hue), alpha=alpha, s=20, ax=ax)

    # Linear trend across all points
    if len(df) > 1 and df[x].nunique() > 1:
        slope, intercept = np.polyfit(df[x], df[y], 1)
        xs = np.linspace(df[x].min(), df[x].max(), 100)
        ax.plot(xs, slope * xs + intercept, color='black', linewidth=1.2,
                linestyle='--', label='linear fit')

    ax.set_title(f'{_label(y)} vs {_label(x)}', fontsize=12, fontweight='bold')
    ax.set_xlabel(_label(x))
    ax.set_ylabel(_label(y))
    if hue is None:
        ax.legend(fontsize=9)
    return _finish(fig, output_path) if owned else fig


def plot_correlation_matrix(df: pd.DataFrame, columns: Optional[List[str]] = None,
                            method: str = 'pearson', output_path=None):
    """Annotated lower-triangle correlation heatmap"""
    if columns is None:
        columns = df.select_dtypes(include=[np.number]).columns.tolist()
    _require_columns(df, columns)

    corr = df[columns].corr(method=method)
    mask = np.triu(np.ones_like(corr, dtype=bool), k=1)

    size = max(6, 0.8 * len(columns) + 2)
    fig, ax = plt.subplots(figsize=(size, size * 0.85))

    sns.heatmap(corr, mask=mask, annot=True, fmt='.2f', cmap=HEATMAP_CMAP,
                vmin=-1, vmax=1, center=0, square=True, linewidths=0.5,
                cbar_kws={'shrink': 0.8, 'label': f'{method.capitalize()} r'}, ax=ax)

    ax.set_title(f'Correlation Matrix ({method})', fontsize=14, fontweight='bold', pad=15)
    return _finish(fig, output_path)


def plot_roc_curve(fpr, tpr, auc_score: float, label: str = 'Logistic Regression',
                   output_path=None):
    """ROC curve with the chance diagonal"""
    fig, ax = plt.subplots(figsize=(7, 7))

    ax.plot(fpr, tpr, color='steelblue', linewidth=2,
            label=f'{label} (AUC = {auc_score:.3f})')
    ax.plot([0, 1], [0, 1], color='gray', linestyle='--', linewidth=1, label='Chance')

    ax.set_xlim(0, 1)
    ax.set_ylim(0, 1.02)
    ax.set_xlabel('False Positive Rate', fontsize=12, fontweight='bold')
    ax.set_ylabel('True Positive Rate', fontsize=12, fontweight='bold')
    ax.set_title('ROC Curve', fontsize=14, fontweight='bold')
    ax.legend(loc='lower right')
    return _finish(fig, output_path)


def plot_chart(df: pd.DataFrame, kind: str, columns: Sequence[str], **kwargs):
    """
    Render a chart by kind

    Args:
        df: Dataset
        kind: 'histogram', 'boxplot', 'scatter' or 'correlation'
        columns: One column (histogram, boxplot), two (scatter: x, y),
            or two or more (correlation)
        **kwargs: Passed through to the specific plot function

    Returns:
        matplotlib Figure
    """
    columns = [columns] if isinstance(columns, str) else list(columns)

    if kind not in CHART_KINDS:
        raise ValueError(f'Unknown chart kind: {kind} (expected one of {CHART_KINDS})')

    if kind in ('histogram', 'boxplot'):
        if len(columns) != 1:
            raise ValueError(f'{kind} takes exactly one column, got {len(columns)}')
        plot = plot_histogram if kind == 'histogram' else plot_boxplot
        return plot(df, columns[0], **kwargs)

    if kind == 'scatter':
        if len(columns) != 2:
            raise ValueError(f'scatter takes exactly two columns (x, y), got {len(columns)}')
        return plot_scatter(df, columns[0], columns[1], **kwargs)

    if len(columns) < 2:
        raise ValueError(f'correlation needs at least two columns, got {len(columns)}')
    return plot_correlation_matrix(df, columns, **kwargs)
