"""
Row reducers for the indicator and education tables.

- latest_by_country: keep each country's most recent complete observation.
- aggregate_groups: per-group summary statistic, optionally pivoted by a
  second grouping field (e.g. gender within an education level).
"""

import logging
from typing import List, Optional, Sequence

import numpy as np
import pandas as pd

from .constants import (
    COUNTRY_COL,
    DEFAULT_EMPTY_GROUP_POLICY,
    EMPTY_GROUP_POLICIES,
    YEAR_COL,
)
from .data_utils import coerce_numeric

logger = logging.getLogger(__name__)

SUPPORTED_STATISTICS = ("mean", "median")


def latest_by_country(
    df: pd.DataFrame,
    value_fields: Sequence[str],
    country_field: str = COUNTRY_COL,
    year_field: str = YEAR_COL,
) -> pd.DataFrame:
    """Select the latest-year row per country among rows with every value present.

    Rows missing the country, the year or any of ``value_fields`` are ignored.
    When several rows share a country's maximum year, the first one
    encountered wins. Countries without a single valid row are left out.
    Output rows follow each country's first appearance in ``df``.
    """
    frame = df.copy()
    frame[year_field] = coerce_numeric(frame[year_field])
    for field in value_fields:
        if field in frame.columns:
            frame[field] = coerce_numeric(frame[field])
        else:
            frame[field] = np.nan

    valid = frame.dropna(subset=[country_field, year_field, *value_fields])
    valid = valid[valid[country_field].astype(str).str.strip() != ""]
    valid = valid.reset_index(drop=True)

    if valid.empty:
        logger.info("No country has all of %s present", list(value_fields))
        return valid

    dropped = len(frame) - len(valid)
    if dropped:
        logger.debug("Ignored %d incomplete rows", dropped)

    # idxmax returns the first label holding the maximum
    latest_rows = valid.groupby(country_field, sort=False)[year_field].idxmax()
    return valid.loc[latest_rows.values].reset_index(drop=True)


def aggregate_groups(
    df: pd.DataFrame,
    group_fields: Sequence[str],
    value_field: str,
    statistic: str = "mean",
    categories: Optional[List[str]] = None,
    empty_group_policy: str = DEFAULT_EMPTY_GROUP_POLICY,
) -> pd.DataFrame:
    """Summarize ``value_field`` per group.

    Args:
        df: Input rows.
        group_fields: One or two column names. With two, the second one is
            pivoted into one output column per category.
        value_field: Numeric column to summarize; unparseable values are
            treated as missing.
        statistic: "mean" or "median".
        categories: Ordered categories of the second grouping field. Defaults
            to the categories present, in order of first appearance.
        empty_group_policy: "missing" leaves NaN for sub-groups without valid
            values and drops groups with none at all; "zero" fills 0.0 and
            keeps every group.

    Returns:
        One row per group, in order of first appearance.
    """
    group_fields = list(group_fields)
    if not 1 <= len(group_fields) <= 2:
        raise ValueError(
            f"Expected one or two grouping fields, got {len(group_fields)}"
        )
    if statistic not in SUPPORTED_STATISTICS:
        raise ValueError(
            f"Unsupported statistic '{statistic}'; use one of {SUPPORTED_STATISTICS}"
        )
    if empty_group_policy not in EMPTY_GROUP_POLICIES:
        raise ValueError(
            f"Unknown empty_group_policy '{empty_group_policy}'; "
            f"use one of {EMPTY_GROUP_POLICIES}"
        )

    frame = df.dropna(subset=group_fields).copy()
    frame[value_field] = coerce_numeric(frame[value_field])

    outer_field = group_fields[0]
    outer_keys = pd.Index(frame[outer_field].drop_duplicates(), name=outer_field)

    valid = frame.dropna(subset=[value_field])
    stats = valid.groupby(group_fields, sort=False)[value_field].agg(statistic)

    if len(group_fields) == 1:
        summary = stats.reindex(outer_keys).astype(float).to_frame(value_field)
    else:
        inner_field = group_fields[1]
        if categories is None:
            categories = list(frame[inner_field].drop_duplicates())
        if stats.empty:
            summary = pd.DataFrame(
                np.nan, index=outer_keys, columns=categories, dtype=float
            )
        else:
            summary = (
                stats.unstack(inner_field)
                .reindex(index=outer_keys, columns=categories)
                .astype(float)
            )

    if empty_group_policy == "zero":
        summary = summary.fillna(0.0)
    else:
        summary = summary.dropna(how="all")

    if summary.empty:
        logger.info("No valid %s values in any %s group", value_field, outer_field)

    summary.columns.name = None
    return summary.reset_index()
