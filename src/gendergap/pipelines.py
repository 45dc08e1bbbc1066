"""
Chart pipelines: one pure function per chart.

Each pipeline takes the loaded tables plus its selection parameters and
returns a small summary frame ready for rendering. A pipeline without usable
input logs a notice and returns an empty frame; it never raises for missing
data, so the remaining charts are unaffected.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

import pandas as pd

from .constants import (
    CORRELATION_FEATURES,
    COUNTRY_COL,
    DEFAULT_EMPTY_GROUP_POLICY,
    DEFAULT_TOP_N,
    EDUCATION_LEVEL_COL,
    EDUCATION_LEVELS,
    ENROLLMENT_COL,
    FEMALE_LABOR_COL,
    FEMALE_LIFE_EXPECTANCY_COL,
    FEMALE_SECONDARY_COL,
    FERTILITY_COL,
    GENDER_COL,
    GENDERS,
    INCOME_GROUP_COL,
    INCOME_ORDER,
    MALE_SECONDARY_COL,
    REGION_COL,
    YEAR_COL,
)
from .reducers import aggregate_groups, latest_by_country
from .statistics import correlation_matrix, missing_value_profile

logger = logging.getLogger(__name__)

CHART_NAMES = [
    "secondary_enrollment_gap",
    "female_life_expectancy",
    "labor_vs_fertility",
    "region_enrollment",
    "income_enrollment",
    "indicator_correlations",
    "indicator_missing_profile",
]


@dataclass(frozen=True)
class ChartSelection:
    """User-selectable parameters of the interactive charts."""

    region: Optional[str] = None
    education_level: str = EDUCATION_LEVELS[0]


def _has_columns(df: pd.DataFrame, columns: Sequence[str], chart: str) -> bool:
    if df.empty:
        logger.info("No rows available for %s", chart)
        return False
    absent = [c for c in columns if c not in df.columns]
    if absent:
        logger.info("Cannot build %s, table lacks %s", chart, absent)
        return False
    return True


def _latest_renamed(
    indicators: pd.DataFrame, columns: Dict[str, str], chart: str
) -> pd.DataFrame:
    empty = pd.DataFrame(columns=["country", "year", *columns.values()])
    if not _has_columns(indicators, [COUNTRY_COL, YEAR_COL], chart):
        return empty

    latest = latest_by_country(indicators, list(columns))
    if latest.empty:
        logger.info("No valid data for %s", chart)
        return empty

    renamed = latest[[COUNTRY_COL, YEAR_COL, *columns]].rename(
        columns={COUNTRY_COL: "country", YEAR_COL: "year", **columns}
    )
    return renamed.reset_index(drop=True)


def secondary_enrollment_gap(
    indicators: pd.DataFrame, top_n: int = DEFAULT_TOP_N
) -> pd.DataFrame:
    """Female minus male secondary enrollment, top countries by absolute gap."""
    data = _latest_renamed(
        indicators,
        {FEMALE_SECONDARY_COL: "female", MALE_SECONDARY_COL: "male"},
        "secondary enrollment gap",
    )
    if data.empty:
        return data.assign(gap=pd.Series(dtype=float))

    data["gap"] = data["female"] - data["male"]
    data = data[data["gap"].abs() < float("inf")]
    order = data["gap"].abs().sort_values(ascending=False, kind="mergesort").index
    return data.loc[order].head(top_n).reset_index(drop=True)


def female_life_expectancy(indicators: pd.DataFrame) -> pd.DataFrame:
    """Latest female life expectancy per country."""
    return _latest_renamed(
        indicators,
        {FEMALE_LIFE_EXPECTANCY_COL: "value"},
        "female life expectancy",
    )


def labor_vs_fertility(indicators: pd.DataFrame) -> pd.DataFrame:
    """Latest female labor participation and fertility rate per country."""
    return _latest_renamed(
        indicators,
        {
            FEMALE_LABOR_COL: "female_labor_participation",
            FERTILITY_COL: "fertility_rate",
        },
        "labor participation vs fertility",
    )


def available_regions(education: pd.DataFrame) -> List[str]:
    """Distinct non-empty regions, sorted."""
    if not _has_columns(education, [REGION_COL], "the region list"):
        return []
    regions = education[REGION_COL].dropna().astype(str).str.strip()
    return sorted(r for r in regions.unique() if r)


def region_enrollment(
    education: pd.DataFrame,
    region: str,
    empty_group_policy: str = DEFAULT_EMPTY_GROUP_POLICY,
) -> pd.DataFrame:
    """Average enrollment by education level and gender within one region."""
    required = [REGION_COL, EDUCATION_LEVEL_COL, GENDER_COL, ENROLLMENT_COL]
    if not _has_columns(education, required, "region enrollment"):
        return pd.DataFrame(columns=[EDUCATION_LEVEL_COL, *GENDERS])

    filtered = education[education[REGION_COL] == region]
    summary = aggregate_groups(
        filtered,
        [EDUCATION_LEVEL_COL, GENDER_COL],
        ENROLLMENT_COL,
        categories=GENDERS,
        empty_group_policy=empty_group_policy,
    )
    if summary.empty:
        logger.info("No enrollment data for region %r", region)
    return summary


def income_enrollment(
    education: pd.DataFrame,
    education_level: str,
    empty_group_policy: str = DEFAULT_EMPTY_GROUP_POLICY,
) -> pd.DataFrame:
    """Average enrollment by income group and gender for one education level.

    Only the four known income groups are kept, ordered from low to high.
    """
    required = [INCOME_GROUP_COL, EDUCATION_LEVEL_COL, GENDER_COL, ENROLLMENT_COL]
    if not _has_columns(education, required, "income enrollment"):
        return pd.DataFrame(columns=[INCOME_GROUP_COL, *GENDERS])

    filtered = education[
        education[INCOME_GROUP_COL].isin(INCOME_ORDER)
        & (education[EDUCATION_LEVEL_COL] == education_level)
    ]
    summary = aggregate_groups(
        filtered,
        [INCOME_GROUP_COL, GENDER_COL],
        ENROLLMENT_COL,
        categories=GENDERS,
        empty_group_policy=empty_group_policy,
    )
    if summary.empty:
        logger.info("No enrollment data for education level %r", education_level)
        return summary

    rank = {group: i for i, group in enumerate(INCOME_ORDER)}
    summary = summary.sort_values(
        INCOME_GROUP_COL, key=lambda s: s.map(rank), kind="mergesort"
    )
    return summary.reset_index(drop=True)


def resolve_region(education: pd.DataFrame, region: Optional[str] = None) -> str:
    """The requested region, or the first available one when none is given."""
    if region is not None:
        return region
    regions = available_regions(education)
    return regions[0] if regions else ""


def indicator_correlations(
    indicators: pd.DataFrame, features: Sequence[str] = CORRELATION_FEATURES
) -> pd.DataFrame:
    """Pearson correlation matrix across indicator features."""
    if indicators.empty:
        logger.info("No rows available for indicator correlations")
        return pd.DataFrame()
    return correlation_matrix(indicators, features)


def indicator_missing_profile(
    indicators: pd.DataFrame, features: Sequence[str] = CORRELATION_FEATURES
) -> pd.DataFrame:
    """Share of rows missing each indicator feature."""
    if indicators.empty:
        logger.info("No rows available for the missing-value profile")
        return pd.DataFrame(columns=["feature", "missing_pct"])
    return missing_value_profile(indicators, features)


def recompute(
    indicators: pd.DataFrame,
    education: pd.DataFrame,
    selection: ChartSelection = ChartSelection(),
    empty_group_policy: str = DEFAULT_EMPTY_GROUP_POLICY,
    top_n: int = DEFAULT_TOP_N,
) -> Dict[str, pd.DataFrame]:
    """Run every chart pipeline for the given selection.

    When no region is selected the first available region is used.
    """
    region = resolve_region(education, selection.region)

    return {
        "secondary_enrollment_gap": secondary_enrollment_gap(indicators, top_n),
        "female_life_expectancy": female_life_expectancy(indicators),
        "labor_vs_fertility": labor_vs_fertility(indicators),
        "region_enrollment": region_enrollment(
            education, region, empty_group_policy
        ),
        "income_enrollment": income_enrollment(
            education, selection.education_level, empty_group_policy
        ),
        "indicator_correlations": indicator_correlations(indicators),
        "indicator_missing_profile": indicator_missing_profile(indicators),
    }
