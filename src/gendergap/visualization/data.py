"""
Data loading utilities for the dashboard.
"""

from typing import Optional, Tuple

import pandas as pd
import streamlit as st

from ..constants import EDUCATION_PATH, INDICATORS_PATH
from ..data_utils import DatasetError, load_education_table, load_indicator_table


def load_datasets(
    indicators_path: str = INDICATORS_PATH, education_path: str = EDUCATION_PATH
) -> Tuple[Optional[pd.DataFrame], Optional[pd.DataFrame]]:
    """Load both tables, reporting failures on the page instead of raising.

    A table that cannot be loaded is returned as None so the charts built
    from the other table still render.
    """
    indicators = None
    education = None

    try:
        indicators = load_indicator_table(indicators_path)
    except (FileNotFoundError, DatasetError) as e:
        st.error(f"Could not load indicator table: {e}")

    try:
        education = load_education_table(education_path)
    except (FileNotFoundError, DatasetError) as e:
        st.error(f"Could not load education table: {e}")

    return indicators, education
