"""Data validation utilities"""

from .validation import validate_wine_dataset, check_data_quality, wine_schema

__all__ = [
    'validate_wine_dataset',
    'check_data_quality',
    'wine_schema',
]
