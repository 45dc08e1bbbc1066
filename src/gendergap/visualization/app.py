"""
Main Streamlit app for the gendergap dashboard.
Single-page design with:
- Sidebar selectors for region, education level and empty-group handling
- Country-level charts (gap bars, life expectancy map, scatter)
- Region and income group enrollment charts
- Correlation heatmap and missing-value profile
- Raw data tab with CSV download
"""

import pandas as pd
import streamlit as st

from ..constants import (
    DEFAULT_EMPTY_GROUP_POLICY,
    EDUCATION_LEVELS,
    EMPTY_GROUP_POLICIES,
)
from ..pipelines import ChartSelection, available_regions, recompute, resolve_region
from .charts import create_all_charts
from .data import load_datasets


def main():
    """Main Streamlit app."""
    st.set_page_config(
        page_title="Gender Indicators Explorer",
        page_icon=None,
        layout="wide",
        initial_sidebar_state="expanded",
    )

    st.title("Gender Indicators Explorer")

    with st.spinner("Loading datasets..."):
        indicators, education = load_datasets()

    if indicators is None and education is None:
        st.info("Expected `data/gender.csv` and `data/education_long_with_regions.csv`.")
        return

    if indicators is None:
        indicators = pd.DataFrame()
    if education is None:
        education = pd.DataFrame()

    regions = available_regions(education)
    region = st.sidebar.selectbox(
        "Region", options=regions, key="region", disabled=not regions
    )
    level = st.sidebar.selectbox(
        "Education Level", options=EDUCATION_LEVELS, key="education_level"
    )
    policy = st.sidebar.radio(
        "Empty group handling",
        options=list(EMPTY_GROUP_POLICIES),
        index=EMPTY_GROUP_POLICIES.index(DEFAULT_EMPTY_GROUP_POLICY),
        help="How to show a gender with no enrollment observations: as a gap, or as 0%.",
    )

    # Widget changes rerun the script, recomputing every chart
    selection = ChartSelection(region=region, education_level=level)
    summaries = recompute(indicators, education, selection, empty_group_policy=policy)
    figures = create_all_charts(summaries, resolve_region(education, region), level)

    countries_tab, education_tab, indicators_tab, raw_tab = st.tabs(
        ["Countries", "Education", "Indicators", "Raw Data"]
    )

    with countries_tab:
        if indicators.empty:
            st.info("Indicator table not loaded.")
        else:
            st.plotly_chart(
                figures["secondary_enrollment_gap"], use_container_width=True
            )
            st.caption("Green: more girls enrolled. Red: more boys enrolled.")
            st.plotly_chart(figures["female_life_expectancy"], use_container_width=True)
            st.plotly_chart(figures["labor_vs_fertility"], use_container_width=True)

    with education_tab:
        if education.empty:
            st.info("Education table not loaded.")
        else:
            if not regions:
                st.warning("The education table has no region labels.")
            else:
                st.plotly_chart(figures["region_enrollment"], use_container_width=True)
            st.plotly_chart(figures["income_enrollment"], use_container_width=True)

    with indicators_tab:
        if indicators.empty:
            st.info("Indicator table not loaded.")
        else:
            st.caption(
                "Pearson correlation over rows where both indicators are present. "
                "Cells without variation show 0."
            )
            st.plotly_chart(figures["indicator_correlations"], use_container_width=True)
            st.plotly_chart(
                figures["indicator_missing_profile"], use_container_width=True
            )

    with raw_tab:
        for name, frame in [("indicators", indicators), ("education", education)]:
            if frame.empty:
                continue
            st.subheader(name.title())
            st.dataframe(frame, use_container_width=True)
            st.download_button(
                label=f"Download {name} as CSV",
                data=frame.to_csv(index=False),
                file_name=f"gendergap_{name}.csv",
                mime="text/csv",
            )

    st.markdown("---")


if __name__ == "__main__":
    main()
