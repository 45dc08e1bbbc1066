"""
Data loading utilities for the gender indicator datasets.

This module loads the wide indicator table (one row per country-year) and
the long education table (one row per country, region, education level and
gender), and provides the numeric coercion every computation relies on.
"""

import logging
import os
from typing import List

import numpy as np
import pandas as pd

from .constants import (
    COUNTRY_COL,
    EDUCATION_LEVEL_COL,
    EDUCATION_REQUIRED_COLUMNS,
    ENROLLMENT_COL,
    GENDER_COL,
    INCOME_GROUP_COL,
    INDICATOR_REQUIRED_COLUMNS,
    REGION_COL,
    YEAR_COL,
)

logger = logging.getLogger(__name__)

INDICATOR_TEXT_COLUMNS = [COUNTRY_COL]
EDUCATION_TEXT_COLUMNS = [
    COUNTRY_COL,
    REGION_COL,
    INCOME_GROUP_COL,
    EDUCATION_LEVEL_COL,
    GENDER_COL,
]


class DatasetError(ValueError):
    """Raised when a dataset is missing columns it is expected to carry."""


def coerce_numeric(series: pd.Series) -> pd.Series:
    """Convert a column to floats, turning anything unparseable into NaN."""
    if not pd.api.types.is_numeric_dtype(series):
        series = series.map(lambda v: v.strip() if isinstance(v, str) else v)
    numeric = pd.to_numeric(series, errors="coerce").astype(float)
    return numeric.replace([np.inf, -np.inf], np.nan)


def strip_text_columns(df: pd.DataFrame, columns: List[str]) -> pd.DataFrame:
    """Strip surrounding whitespace from categorical columns; blanks become NaN."""
    df = df.copy()
    for col in columns:
        if col not in df.columns:
            continue
        stripped = df[col].map(lambda v: v.strip() if isinstance(v, str) else v)
        df[col] = stripped.replace("", np.nan)
    return df


def validate_columns(df: pd.DataFrame, required: List[str], source: str) -> None:
    """Raise DatasetError if any required column is absent."""
    missing = [col for col in required if col not in df.columns]
    if missing:
        raise DatasetError(f"{source} is missing required columns: {missing}")


def _read_csv(csv_path: str) -> pd.DataFrame:
    if not os.path.exists(csv_path):
        raise FileNotFoundError(f"Dataset not found: {csv_path}")

    df: pd.DataFrame = pd.read_csv(csv_path)
    df.columns = df.columns.str.strip()
    logger.debug("Loaded %d rows from %s", len(df), csv_path)
    return df


def load_indicator_table(csv_path: str) -> pd.DataFrame:
    """Load the wide per-country-per-year indicator table."""
    df = _read_csv(csv_path)
    validate_columns(df, INDICATOR_REQUIRED_COLUMNS, csv_path)
    df = strip_text_columns(df, INDICATOR_TEXT_COLUMNS)
    df[YEAR_COL] = coerce_numeric(df[YEAR_COL])
    return df


def load_education_table(csv_path: str) -> pd.DataFrame:
    """Load the long-format enrollment table with region and income group."""
    df = _read_csv(csv_path)
    validate_columns(df, EDUCATION_REQUIRED_COLUMNS, csv_path)
    df = strip_text_columns(df, EDUCATION_TEXT_COLUMNS)
    df[ENROLLMENT_COL] = coerce_numeric(df[ENROLLMENT_COL])
    return df
