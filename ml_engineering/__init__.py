"""
ML Engineering Module

Illustrative models for wine quality.

Modules:
- regression: OLS for quality, logistic regression for good wines
- evaluation: Metrics and ROC curves
"""

__version__ = "1.0.0"
