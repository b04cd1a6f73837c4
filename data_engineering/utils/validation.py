#!/usr/bin/env python3
"""
Data Quality and Schema Validation

Uses pandera to validate the wine dataset for:
- Schema compliance (correct data types, physical ranges)
- Data quality checks (duplicates, quality score coverage)

Usage:
    from data_engineering.utils.validation import validate_wine_dataset

    validate_wine_dataset(df, 'red wine')
"""

import pandera as pa
from pandera import Column, Check
import pandas as pd

from config.settings import FEATURE_COLUMNS, TARGET_COLUMN


# ============================================================================
# WINE SCHEMA
# ============================================================================

# Measurements are concentrations or ratios, so all are non-negative
_measurement_columns = {
    col: Column(float, Check.greater_than_or_equal_to(0), nullable=False)
    for col in FEATURE_COLUMNS
}

# Tighter physical bounds where they exist
_measurement_columns['pH'] = Column(float, Check.in_range(0, 14), nullable=False)
_measurement_columns['density'] = Column(float, Check.greater_than(0), nullable=False)

wine_schema = pa.DataFrameSchema(
    {
        **_measurement_columns,

        # Target
        TARGET_COLUMN: Column(
            int,
            Check.in_range(0, 10),
            nullable=False,
            description='Sensory quality score (0-10)'
        ),
    },
    strict=False,  # Allow derived columns (rating) alongside the schema
    coerce=True,   # Coerce types when possible
    description='Red wine physicochemical dataset schema'
)


# ============================================================================
# VALIDATION FUNCTIONS
# ============================================================================

def validate_wine_dataset(df: pd.DataFrame, name: str = 'dataset') -> pd.DataFrame:
    """
    Validate the wine dataset

    Args:
        df: DataFrame to validate
        name: Dataset name for logging

    Returns:
        Validated DataFrame (types coerced)

    Raises:
        pandera.errors.SchemaErrors: If any column violates the schema
    """
    print(f'\n{"="*70}')
    print(f'Validating {name}')
    print(f'{"="*70}')

    try:
        validated = wine_schema.validate(df, lazy=True)
        print(f'  ✓ Schema validation passed')
    except pa.errors.SchemaErrors as err:
        print(f'  ❌ Schema validation failed for {name}:')
        print(err.failure_cases)
        raise

    check_data_quality(validated, name)

    print(f'  ✓ All validations passed for {name}\n')
    return validated


def check_data_quality(df: pd.DataFrame, name: str):
    """
    Perform data quality checks beyond schema validation

    Checks:
    - Duplicate rows (repeated measurements are legitimate, so only reported)
    - Quality score coverage
    """
    dup_count = df.duplicated().sum()
    if dup_count > 0:
        print(f'  ⚠️  {dup_count:,} duplicate rows in {name} (kept)')

    if df.empty:
        print(f'  ⚠️  {name} has no observations')
        return

    if TARGET_COLUMN in df.columns:
        observed = sorted(df[TARGET_COLUMN].unique())
        print(f'  Quality scores observed: {observed[0]}-{observed[-1]} '
              f'({len(observed)} distinct)')
        if len(observed) < 2:
            print(f'  ⚠️  Only one quality score present - correlations are undefined')
