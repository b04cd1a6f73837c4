"""
Shared fixtures: a synthetic wine dataset with the real schema and
realistic value ranges (alcohol rises with quality, volatile acidity falls).
"""

import sys
from pathlib import Path

import matplotlib
matplotlib.use('Agg')

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from config.settings import REQUIRED_COLUMNS
from data_engineering.features.add_rating import add_rating


def make_wine_frame(n=300, seed=0):
    rng = np.random.RandomState(seed)
    quality = rng.choice([3, 4, 5, 6, 7, 8], size=n, p=[0.02, 0.05, 0.40, 0.38, 0.12, 0.03])
    q = quality - 5.6

    df = pd.DataFrame({
        'fixed_acidity': rng.normal(8.3, 1.7, n).clip(4.6, 15.9),
        'volatile_acidity': (0.53 - 0.08 * q + rng.normal(0, 0.12, n)).clip(0.12, 1.58),
        'citric_acid': (0.27 + 0.05 * q + rng.normal(0, 0.15, n)).clip(0, 1),
        'residual_sugar': rng.lognormal(np.log(2.2), 0.35, n),
        'chlorides': rng.lognormal(np.log(0.079), 0.3, n),
        'free_sulfur_dioxide': rng.gamma(3, 5, n) + 1,
        'total_sulfur_dioxide': rng.gamma(2.5, 18, n) + 6,
        'density': rng.normal(0.9967, 0.0019, n),
        'pH': rng.normal(3.31, 0.15, n),
        'sulphates': (0.66 + 0.05 * q + rng.normal(0, 0.12, n)).clip(0.33, 2.0),
        'alcohol': (10.4 + 0.6 * q + rng.normal(0, 0.7, n)).clip(8.4, 14.9),
        'quality': quality,
    })
    return df[REQUIRED_COLUMNS]


def write_r_style_csv(df, path, index_label=''):
    """Write like R's write.csv: dotted headers plus a row-number column"""
    out = df.rename(columns=lambda c: c.replace('_', '.'))
    out.index = range(1, len(out) + 1)
    out.to_csv(path, index_label=index_label)
    return path


@pytest.fixture
def wine_df():
    return make_wine_frame()


@pytest.fixture
def rated_wine(wine_df):
    return add_rating(wine_df)


@pytest.fixture
def wine_csv(tmp_path, wine_df):
    return write_r_style_csv(wine_df, tmp_path / 'wineQualityReds.csv')


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close('all')
