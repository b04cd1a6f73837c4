"""Tests for the wine CSV loader and schema validation"""

import pandas as pd
import pandera as pa
import pytest

from config.settings import FEATURE_COLUMNS, REQUIRED_COLUMNS
from conftest import write_r_style_csv
from data_engineering.load_wine import load_wine_data, normalize_column_name
from data_engineering.utils.validation import check_data_quality


@pytest.mark.parametrize('raw, expected', [
    ('fixed.acidity', 'fixed_acidity'),
    ('fixed acidity', 'fixed_acidity'),
    ('free.sulfur.dioxide', 'free_sulfur_dioxide'),
    ('pH', 'pH'),
    (' alcohol ', 'alcohol'),
])
def test_normalize_column_name(raw, expected):
    assert normalize_column_name(raw) == expected


def test_loads_r_export(wine_csv, wine_df):
    df = load_wine_data(wine_csv)

    assert len(df) == len(wine_df)
    assert list(df.columns) == REQUIRED_COLUMNS
    assert df.index.name == 'observation'
    assert list(df.index[:3]) == [1, 2, 3]
    pd.testing.assert_series_equal(
        df['alcohol'].reset_index(drop=True), wine_df['alcohol'], check_names=False
    )


def test_x_index_column(tmp_path, wine_df):
    path = write_r_style_csv(wine_df, tmp_path / 'wine.csv', index_label='X')

    df = load_wine_data(path)

    assert df.index.name == 'observation'
    assert 'X' not in df.columns


def test_loads_semicolon_uci_file(tmp_path, wine_df):
    path = tmp_path / 'winequality-red.csv'
    wine_df.rename(columns=lambda c: c.replace('_', ' ')).to_csv(path, sep=';', index=False)

    df = load_wine_data(path)

    assert list(df.columns) == REQUIRED_COLUMNS
    assert len(df) == len(wine_df)


def test_numeric_types(wine_csv):
    df = load_wine_data(wine_csv)

    for col in FEATURE_COLUMNS:
        assert pd.api.types.is_float_dtype(df[col])
    assert pd.api.types.is_integer_dtype(df['quality'])


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError, match='not found'):
        load_wine_data(tmp_path / 'nope.csv')


def test_empty_file(tmp_path):
    path = tmp_path / 'empty.csv'
    path.write_text('')

    with pytest.raises(ValueError, match='empty'):
        load_wine_data(path)


def test_header_only_file(tmp_path, wine_df):
    path = write_r_style_csv(wine_df.iloc[:0], tmp_path / 'header_only.csv')

    with pytest.raises(ValueError, match='no observations'):
        load_wine_data(path)


def test_missing_column(tmp_path, wine_df):
    path = write_r_style_csv(wine_df.drop(columns=['alcohol']), tmp_path / 'wine.csv')

    with pytest.raises(ValueError, match='alcohol'):
        load_wine_data(path)


def test_negative_measurement_fails_schema(tmp_path, wine_df):
    wine_df.loc[5, 'chlorides'] = -0.1
    path = write_r_style_csv(wine_df, tmp_path / 'wine.csv')

    with pytest.raises(pa.errors.SchemaErrors):
        load_wine_data(path)


def test_quality_out_of_range_fails_schema(tmp_path, wine_df):
    wine_df.loc[0, 'quality'] = 11
    path = write_r_style_csv(wine_df, tmp_path / 'wine.csv')

    with pytest.raises(pa.errors.SchemaErrors):
        load_wine_data(path)


def test_missing_values_fail_schema(tmp_path, wine_df):
    wine_df['pH'] = wine_df['pH'].astype(float)
    wine_df.loc[3, 'pH'] = float('nan')
    path = write_r_style_csv(wine_df, tmp_path / 'wine.csv')

    with pytest.raises(pa.errors.SchemaErrors):
        load_wine_data(path)


def test_validation_can_be_skipped(tmp_path, wine_df):
    wine_df.loc[5, 'chlorides'] = -0.1
    path = write_r_style_csv(wine_df, tmp_path / 'wine.csv')

    df = load_wine_data(path, validate=False)

    assert df['chlorides'].min() == -0.1


def test_quality_check_on_empty_frame(wine_df, capsys):
    check_data_quality(wine_df.iloc[:0], 'empty')

    assert 'no observations' in capsys.readouterr().out
