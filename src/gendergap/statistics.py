"""
Correlation and missing-value statistics over indicator features.
"""

import logging
import math
from typing import Sequence

import numpy as np
import pandas as pd

from .data_utils import coerce_numeric

logger = logging.getLogger(__name__)


def pearson(x: Sequence[float], y: Sequence[float]) -> float:
    """Pearson correlation of two equal-length vectors.

    Pairs where either value is NaN or infinite are ignored. Degenerate
    inputs (no pairs, or zero variance on either side) give 0.0 rather than
    NaN.
    """
    xs = np.asarray(x, dtype=float)
    ys = np.asarray(y, dtype=float)
    if xs.shape != ys.shape:
        raise ValueError(f"Vectors differ in length: {len(xs)} vs {len(ys)}")

    # Only pairs with both values present take part
    keep = np.isfinite(xs) & np.isfinite(ys)
    xs = xs[keep]
    ys = ys[keep]
    if xs.size < 1:
        return 0.0

    dx = xs - xs.mean()
    dy = ys - ys.mean()
    num = float(np.sum(dx * dy))
    den = math.sqrt(float(np.sum(dx * dx)) * float(np.sum(dy * dy)))
    if den == 0:
        return 0.0
    return max(-1.0, min(1.0, num / den))


def _numeric_features(df: pd.DataFrame, features: Sequence[str]) -> pd.DataFrame:
    """Numeric copy of the requested features; absent columns are all-NaN."""
    numeric = pd.DataFrame(index=df.index)
    for feature in features:
        if feature in df.columns:
            numeric[feature] = coerce_numeric(df[feature])
        else:
            numeric[feature] = np.nan
    return numeric


def correlation_cells(df: pd.DataFrame, features: Sequence[str]) -> pd.DataFrame:
    """Pairwise Pearson correlation for every ordered feature pair.

    Each cell only uses rows where both features are present. Returns a long
    frame with columns feature_a, feature_b, r in row-major order.
    """
    numeric = _numeric_features(df, features)
    cells = []
    for feature_a in features:
        for feature_b in features:
            pair = numeric[[feature_a]].assign(_b=numeric[feature_b]).dropna()
            r = pearson(pair[feature_a].to_numpy(), pair["_b"].to_numpy())
            cells.append({"feature_a": feature_a, "feature_b": feature_b, "r": r})
    return pd.DataFrame(cells, columns=["feature_a", "feature_b", "r"])


def correlation_matrix(df: pd.DataFrame, features: Sequence[str]) -> pd.DataFrame:
    """k x k correlation matrix indexed and columned by ``features``."""
    features = list(features)
    cells = correlation_cells(df, features)
    matrix = cells.pivot(index="feature_a", columns="feature_b", values="r")
    matrix = matrix.reindex(index=features, columns=features)
    matrix.index.name = None
    matrix.columns.name = None
    return matrix


def missing_value_profile(df: pd.DataFrame, features: Sequence[str]) -> pd.DataFrame:
    """Percentage of rows lacking a usable numeric value, per feature."""
    numeric = _numeric_features(df, features)
    total = len(numeric)
    if total == 0:
        logger.info("Missing-value profile requested for an empty table")

    rows = []
    for feature in features:
        missing = int(numeric[feature].isna().sum())
        pct = 100.0 * missing / total if total else 0.0
        rows.append({"feature": feature, "missing_pct": pct})
    return pd.DataFrame(rows, columns=["feature", "missing_pct"])
