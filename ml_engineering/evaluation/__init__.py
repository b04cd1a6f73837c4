"""
Model Evaluation Module

Classification and regression metrics, ROC curves
"""

from .metrics import (
    evaluate_classifier,
    evaluate_regressor,
    compute_roc_curve
)

__all__ = [
    'evaluate_classifier',
    'evaluate_regressor',
    'compute_roc_curve',
]
