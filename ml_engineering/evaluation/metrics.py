#!/usr/bin/env python3
"""
Model Evaluation

Classification and regression metrics plus ROC curve data.

Usage:
    from ml_engineering.evaluation.metrics import evaluate_classifier, compute_roc_curve

    metrics = evaluate_classifier(pipeline, X_test, y_test, name='Test Set')
    roc = compute_roc_curve(y_test, pipeline.predict_proba(X_test)[:, 1])
"""

import numpy as np
from sklearn.metrics import (
    accuracy_score, precision_score, recall_score, f1_score, roc_auc_score,
    confusion_matrix, roc_curve, mean_squared_error, mean_absolute_error, r2_score
)
from typing import Dict, Any
import pandas as pd


def compute_roc_curve(y_true, y_proba) -> Dict[str, Any]:
    """
    ROC curve points and area under the curve

    Args:
        y_true: True binary labels (0/1)
        y_proba: Predicted probability of the positive class

    Returns:
        Dict with fpr, tpr, thresholds (numpy arrays) and auc (float)

    Raises:
        ValueError: If y_true holds only one class
    """
    if np.unique(y_true).size < 2:
        raise ValueError('ROC curve needs both classes in y_true')

    fpr, tpr, thresholds = roc_curve(y_true, y_proba)
    return {
        'fpr': fpr,
        'tpr': tpr,
        'thresholds': thresholds,
        'auc': float(roc_auc_score(y_true, y_proba)),
    }


def evaluate_classifier(
    model,
    X,
    y,
    name: str = 'Dataset',
    threshold: float = 0.5
) -> Dict[str, Any]:
    """
    Evaluation of a binary classifier

    Args:
        model: Trained classifier with predict_proba
        X: Features
        y: True labels (0/1)
        name: Dataset name for logging
        threshold: Decision threshold (default: 0.5)

    Returns:
        Dict of metrics, including the ROC curve under 'roc'
    """
    print(f'\n{"="*70}')
    print(f'EVALUATION: {name}')
    print(f'{"="*70}')

    # Predictions
    y_proba = model.predict_proba(X)[:, 1]
    y_pred = (y_proba >= threshold).astype(int)

    roc = compute_roc_curve(y, y_proba)

    metrics = {
        'accuracy': float(accuracy_score(y, y_pred)),
        'precision': float(precision_score(y, y_pred, zero_division=0)),
        'recall': float(recall_score(y, y_pred, zero_division=0)),
        'f1': float(f1_score(y, y_pred, zero_division=0)),
        'auc': roc['auc'],
        'threshold': threshold,
        'roc': roc,
    }

    print(f'\nMetrics:')
    print(f'  Accuracy:     {metrics["accuracy"]:.4f}')
    print(f'  Precision:    {metrics["precision"]:.4f}')
    print(f'  Recall:       {metrics["recall"]:.4f}')
    print(f'  F1 Score:     {metrics["f1"]:.4f}')
    print(f'  AUC-ROC:      {metrics["auc"]:.4f}')

    # Confusion matrix
    cm = confusion_matrix(y, y_pred, labels=[0, 1])
    print(f'\nConfusion Matrix:')
    print(f'  TN: {cm[0,0]:,}  FP: {cm[0,1]:,}')
    print(f'  FN: {cm[1,0]:,}  TP: {cm[1,1]:,}')

    # Class distribution
    pred_dist = pd.Series(y_pred).value_counts()
    true_dist = pd.Series(np.asarray(y)).value_counts()
    print(f'\nClass Distribution:')
    print(f'  True:      {true_dist.get(0, 0):,} neg, {true_dist.get(1, 0):,} pos ({true_dist.get(1, 0)/len(y)*100:.1f}% positive)')
    print(f'  Predicted: {pred_dist.get(0, 0):,} neg, {pred_dist.get(1, 0):,} pos ({pred_dist.get(1, 0)/len(y_pred)*100:.1f}% positive)')

    return metrics


def evaluate_regressor(
    model,
    X,
    y,
    name: str = 'Dataset'
) -> Dict[str, float]:
    """
    Evaluation of a regressor

    Args:
        model: Fitted model with predict (sklearn estimator or statsmodels results)
        X: Features, in the layout model.predict expects
        y: True values
        name: Dataset name for logging

    Returns:
        Dict of metrics
    """
    print(f'\n{"="*70}')
    print(f'EVALUATION: {name}')
    print(f'{"="*70}')

    y_pred = np.asarray(model.predict(X))

    metrics = {
        'rmse': float(np.sqrt(mean_squared_error(y, y_pred))),
        'mae': float(mean_absolute_error(y, y_pred)),
        'r2': float(r2_score(y, y_pred)),
    }

    print(f'\nMetrics:')
    print(f'  RMSE: {metrics["rmse"]:.4f}')
    print(f'  MAE:  {metrics["mae"]:.4f}')
    print(f'  R²:   {metrics["r2"]:.4f}')

    # Prediction statistics
    print(f'\nPredictions:')
    print(f'  Min:    {y_pred.min():.2f}')
    print(f'  Max:    {y_pred.max():.2f}')
    print(f'  Mean:   {y_pred.mean():.2f}')
    print(f'  Median: {np.median(y_pred):.2f}')

    return metrics
