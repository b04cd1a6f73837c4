#!/usr/bin/env python3
"""
Illustrative Regression Models

- Ordinary least squares for the quality score (statsmodels), including a
  sequence of nested models that add one predictor at a time
- Logistic regression for "good" wines (scikit-learn), scored by AUC

Usage:
    from ml_engineering.regression import fit_linear_model, fit_logistic_model

    results, metrics = fit_linear_model(wine, 'quality', ['alcohol', 'sulphates'])
    pipeline, metrics = fit_logistic_model(wine)
    metrics['auc']
"""

import numpy as np
import pandas as pd
import statsmodels.api as sm
from sklearn.linear_model import LogisticRegression
from sklearn.model_selection import train_test_split
from sklearn.pipeline import Pipeline
from sklearn.preprocessing import StandardScaler
from typing import Any, Dict, List, Optional, Tuple

from config.settings import (
    LINEAR_MODEL_PREDICTORS,
    LOGISTIC_MODEL_PREDICTORS,
    LOGISTIC_POSITIVE_LABEL,
    LOGISTIC_TEST_SIZE,
    RANDOM_STATE,
    RATING_COLUMN,
    TARGET_COLUMN,
)
from ml_engineering.evaluation.metrics import evaluate_classifier, evaluate_regressor


def _check_inputs(df: pd.DataFrame, target: str, predictors: List[str]):
    if not predictors:
        raise ValueError('At least one predictor is required')
    if target in predictors:
        raise ValueError(f'Target {target} cannot also be a predictor')
    missing = [col for col in [target] + list(predictors) if col not in df.columns]
    if missing:
        raise KeyError(f'Column not found: {", ".join(missing)}')


def _design_matrix(df: pd.DataFrame, predictors: List[str]) -> pd.DataFrame:
    return sm.add_constant(df[list(predictors)].astype(float), has_constant='add')


def _fit_ols(df: pd.DataFrame, target: str, predictors: List[str]):
    X = _design_matrix(df, predictors)
    y = df[target].astype(float)
    return sm.OLS(y, X).fit()


def fit_linear_model(
    df: pd.DataFrame,
    target: str = TARGET_COLUMN,
    predictors: Optional[List[str]] = None
) -> Tuple[Any, Dict[str, Any]]:
    """
    Fit an OLS model with intercept

    Args:
        df: Dataset
        target: Response column
        predictors: Predictor columns (default: LINEAR_MODEL_PREDICTORS)

    Returns:
        Tuple of (statsmodels results, metrics dict with coefficients,
        p_values, r2, adj_r2, rmse, mae, n_obs)
    """
    predictors = list(predictors) if predictors is not None else list(LINEAR_MODEL_PREDICTORS)
    _check_inputs(df, target, predictors)

    results = _fit_ols(df, target, predictors)

    formula = f'{target} ~ {" + ".join(predictors)}'
    metrics = evaluate_regressor(results, _design_matrix(df, predictors),
                                 df[target].astype(float), name=f'OLS: {formula}')

    metrics.update({
        'formula': formula,
        'coefficients': {k: float(v) for k, v in results.params.items()},
        'p_values': {k: float(v) for k, v in results.pvalues.items()},
        'r2': float(results.rsquared),
        'adj_r2': float(results.rsquared_adj),
        'n_obs': int(results.nobs),
    })

    print(f'\nCoefficients:')
    for name, coef in metrics['coefficients'].items():
        print(f'  {name:25s} {coef:+.4f}  (p = {metrics["p_values"][name]:.3g})')
    print(f'  Adjusted R²: {metrics["adj_r2"]:.4f}')

    return results, metrics


def fit_incremental_linear_models(
    df: pd.DataFrame,
    target: str = TARGET_COLUMN,
    predictors: Optional[List[str]] = None
) -> pd.DataFrame:
    """
    Fit nested OLS models, adding one predictor per step

    Step k uses the first k predictors, so R² never decreases.

    Returns:
        DataFrame with step, added, r2, adj_r2 (one row per step)
    """
    predictors = list(predictors) if predictors is not None else list(LINEAR_MODEL_PREDICTORS)
    _check_inputs(df, target, predictors)

    print(f'\n{"="*70}')
    print(f'NESTED LINEAR MODELS: {target}')
    print(f'{"="*70}')

    rows = []
    for step in range(1, len(predictors) + 1):
        results = _fit_ols(df, target, predictors[:step])
        rows.append({
            'step': step,
            'added': predictors[step - 1],
            'r2': float(results.rsquared),
            'adj_r2': float(results.rsquared_adj),
        })
        print(f'  m{step}: + {predictors[step - 1]:25s} R² = {results.rsquared:.4f}  '
              f'adj R² = {results.rsquared_adj:.4f}')

    return pd.DataFrame(rows, columns=['step', 'added', 'r2', 'adj_r2'])


def fit_logistic_model(
    df: pd.DataFrame,
    target: str = RATING_COLUMN,
    positive_label=LOGISTIC_POSITIVE_LABEL,
    predictors: Optional[List[str]] = None,
    test_size: Optional[float] = LOGISTIC_TEST_SIZE,
    random_state: int = RANDOM_STATE
) -> Tuple[Pipeline, Dict[str, Any]]:
    """
    Logistic regression for target == positive_label

    Features are standardised, so coefficients are comparable per one
    standard deviation of each predictor.

    Args:
        df: Dataset
        target: Column defining the binary outcome (default: rating)
        positive_label: Value of target counted as the positive class
        predictors: Predictor columns (default: LOGISTIC_MODEL_PREDICTORS)
        test_size: Held-out fraction for scoring (stratified); None scores in sample
        random_state: Seed for the split and solver

    Returns:
        Tuple of (fitted Pipeline, metrics dict with coefficients, intercept,
        auc, accuracy, precision, recall, f1, roc, n_train, n_test)

    Raises:
        ValueError: If the outcome has fewer than two classes
    """
    predictors = list(predictors) if predictors is not None else list(LOGISTIC_MODEL_PREDICTORS)
    _check_inputs(df, target, predictors)

    X = df[predictors].astype(float)
    y = (df[target] == positive_label).astype(int)

    if y.nunique() < 2:
        raise ValueError(
            f'Logistic model needs both classes: {target} == {positive_label!r} '
            f'matches {int(y.sum())} of {len(y)} rows'
        )

    if test_size:
        X_train, X_test, y_train, y_test = train_test_split(
            X, y, test_size=test_size, stratify=y, random_state=random_state
        )
    else:
        X_train, X_test, y_train, y_test = X, X, y, y

    print(f'\n{"="*70}')
    print(f'TRAINING: Logistic Regression ({target} == {positive_label!r})')
    print(f'{"="*70}')
    print(f'  Train: {len(X_train):,}  ({y_train.mean()*100:.1f}% positive)')
    print(f'  Test:  {len(X_test):,}')

    pipeline = Pipeline([
        ('scaler', StandardScaler()),
        ('classifier', LogisticRegression(max_iter=1000, random_state=random_state))
    ])
    pipeline.fit(X_train, y_train)

    name = 'Held-out Set' if test_size else 'Training Set (in sample)'
    metrics = evaluate_classifier(pipeline, X_test, y_test, name=name)

    classifier = pipeline.named_steps['classifier']
    metrics.update({
        'coefficients': dict(zip(predictors, np.asarray(classifier.coef_[0], dtype=float).tolist())),
        'intercept': float(classifier.intercept_[0]),
        'n_train': len(X_train),
        'n_test': len(X_test),
    })

    print(f'\nStandardised coefficients:')
    for name, coef in sorted(metrics['coefficients'].items(), key=lambda kv: -abs(kv[1])):
        print(f'  {name:25s} {coef:+.4f}')

    return pipeline, metrics
