"""Feature engineering modules"""

from .add_rating import add_rating, rating_for_quality, RATING_DTYPE

__all__ = [
    'add_rating',
    'rating_for_quality',
    'RATING_DTYPE',
]
