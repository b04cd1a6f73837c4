"""Tests for the quality -> rating bucketing"""

import pandas as pd
import pytest

from data_engineering.features.add_rating import add_rating, rating_for_quality


@pytest.mark.parametrize('score, expected', [
    (0, 'bad'),
    (3, 'bad'),
    (4, 'bad'),
    (4.9, 'bad'),
    (5, 'average'),
    (6, 'average'),
    (6.5, 'average'),
    (7, 'good'),
    (8, 'good'),
    (10, 'good'),
])
def test_rating_for_quality(score, expected):
    assert rating_for_quality(score) == expected


def test_every_row_matches_thresholds(wine_df):
    rated = add_rating(wine_df)

    expected = wine_df['quality'].map(rating_for_quality)
    assert (rated['rating'].astype(str) == expected).all()


def test_boundaries_in_frame():
    df = pd.DataFrame({'quality': [3, 4, 5, 6, 7, 8]})

    rated = add_rating(df)

    assert rated['rating'].astype(str).tolist() == [
        'bad', 'bad', 'average', 'average', 'good', 'good'
    ]


def test_missing_score_has_no_rating():
    rated = add_rating(pd.DataFrame({'quality': [float('nan'), 6]}))

    assert rating_for_quality(float('nan')) is None
    assert pd.isna(rated['rating'].iloc[0])
    assert rated['rating'].iloc[1] == 'average'


def test_rating_is_ordered_categorical(wine_df):
    rating = add_rating(wine_df)['rating']

    assert rating.cat.ordered
    assert list(rating.cat.categories) == ['bad', 'average', 'good']
    assert rating.notna().all()


def test_input_not_mutated(wine_df):
    before = wine_df.copy()

    add_rating(wine_df)

    assert 'rating' not in wine_df.columns
    pd.testing.assert_frame_equal(wine_df, before)


def test_missing_quality_column():
    with pytest.raises(KeyError, match='quality'):
        add_rating(pd.DataFrame({'alcohol': [10.0]}))
