"""
Data Engineering Module for the Red Wine Quality Report

This module contains the data preparation stages:
1. load_wine - CSV loading and header normalisation
2. utils/ - Schema and data quality validation
3. features/ - Derived features (quality rating)

Usage:
    from data_engineering.load_wine import load_wine_data
    from data_engineering.features import add_rating
"""

__version__ = "1.0.0"
