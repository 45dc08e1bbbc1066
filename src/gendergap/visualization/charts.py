"""
Chart creation utilities for the visualization dashboard.
"""

from typing import Dict, Optional

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from ..constants import (
    EDUCATION_LEVEL_COL,
    FEATURE_LABELS,
    GENDERS,
    INCOME_GROUP_COL,
)
from .constants import (
    CHART_HEIGHT,
    CORRELATION_COLOR_SCALE,
    GENDER_COLORS,
    HEATMAP_HEIGHT,
    LEGEND_CONFIG,
    MAP_COLOR_SCALE,
    MAP_HEIGHT,
    NEGATIVE_GAP_COLOR,
    POSITIVE_GAP_COLOR,
)


def create_unavailable_chart(
    title: str, message: str = "No data available", height: int = CHART_HEIGHT
) -> go.Figure:
    """Placeholder figure shown when a chart has nothing to draw."""
    fig = go.Figure()
    fig.add_annotation(
        text=message,
        xref="paper",
        yref="paper",
        x=0.5,
        y=0.5,
        xanchor="center",
        yanchor="middle",
        showarrow=False,
        font=dict(size=16, color="gray"),
    )
    fig.update_layout(
        title=title,
        xaxis=dict(visible=False),
        yaxis=dict(visible=False),
        height=height,
    )
    return fig


def create_gap_chart(data: pd.DataFrame) -> go.Figure:
    """Diverging bar chart of the female minus male secondary enrollment gap."""
    title = "Gender Gap in Secondary School Enrollment (% gross)"
    if data.empty:
        return create_unavailable_chart(
            title, "No country reports both female and male secondary enrollment"
        )

    title = f"{title}, Top {len(data)} Countries"
    colors = [
        POSITIVE_GAP_COLOR if gap >= 0 else NEGATIVE_GAP_COLOR for gap in data["gap"]
    ]
    fig = go.Figure(
        go.Bar(
            x=data["country"],
            y=data["gap"],
            marker_color=colors,
            text=[f"{gap:.1f}" for gap in data["gap"]],
            textposition="outside",
            customdata=data[["year", "female", "male"]].to_numpy(),
            hovertemplate=(
                "<b>%{x}</b> (%{customdata[0]:.0f})<br>"
                "Female: %{customdata[1]:.1f}<br>"
                "Male: %{customdata[2]:.1f}<br>"
                "Gap: %{y:.1f}<extra></extra>"
            ),
        )
    )
    fig.add_hline(y=0, line_dash="dash", line_color="#888", line_width=1)
    fig.update_layout(
        title=title,
        xaxis_title="Country (top by absolute gap)",
        yaxis_title="Gap = Female − Male (% gross)",
        xaxis_tickangle=-45,
        height=CHART_HEIGHT,
    )
    return fig


def create_life_expectancy_map(data: pd.DataFrame) -> go.Figure:
    """Choropleth of the latest female life expectancy per country."""
    title = "Female Life Expectancy at Birth (years)"
    if data.empty:
        return create_unavailable_chart(
            title, "No valid female life expectancy data found", MAP_HEIGHT
        )

    fig = px.choropleth(
        data,
        locations="country",
        locationmode="country names",
        color="value",
        hover_name="country",
        hover_data={"year": True, "value": ":.1f", "country": False},
        color_continuous_scale=MAP_COLOR_SCALE,
        range_color=(data["value"].min(), data["value"].max()),
        labels={"value": "Years", "year": "Year"},
        title=title,
        height=MAP_HEIGHT,
    )
    fig.update_geos(projection_type="natural earth", showcountries=True)
    fig.update_layout(margin=dict(t=60, l=0, r=0, b=0))
    return fig


def _gender_bars(
    data: pd.DataFrame, category_col: str, barmode: str, title: str
) -> go.Figure:
    fig = go.Figure()
    for gender in GENDERS:
        if gender not in data.columns:
            continue
        fig.add_trace(
            go.Bar(
                x=data[category_col],
                y=data[gender],
                name=gender,
                marker_color=GENDER_COLORS.get(gender),
                hovertemplate=f"%{{x}}<br>{gender}: %{{y:.1f}}%<extra></extra>",
            )
        )
    fig.update_layout(
        title=dict(text=title, y=0.98),
        yaxis_title="Enrollment Rate (%)",
        barmode=barmode,
        height=CHART_HEIGHT,
        legend=LEGEND_CONFIG,
        margin=dict(t=110),
    )
    return fig


def create_region_chart(data: pd.DataFrame, region: str) -> go.Figure:
    """Grouped bars of enrollment by education level and gender for one region."""
    title = f"Average Enrollment by Gender — {region}"
    if data.empty:
        return create_unavailable_chart(title, f"No enrollment data for {region}")

    fig = _gender_bars(data, EDUCATION_LEVEL_COL, "group", title)
    fig.update_layout(xaxis_title="Education Level")
    return fig


def create_income_chart(data: pd.DataFrame, education_level: str) -> go.Figure:
    """Stacked bars of enrollment by income group and gender for one level."""
    title = f"{education_level} Education — Enrollment by Income & Gender"
    if data.empty:
        return create_unavailable_chart(
            title, f"No enrollment data for {education_level} education"
        )

    fig = _gender_bars(data, INCOME_GROUP_COL, "stack", title)
    fig.update_layout(xaxis_title="Income Group", xaxis_tickangle=-25)
    return fig


def create_labor_fertility_scatter(data: pd.DataFrame) -> go.Figure:
    """Scatter of female labor participation against fertility rate."""
    title = "Female Labor Force Participation vs Fertility Rate"
    if data.empty:
        return create_unavailable_chart(
            title, "No country reports both labor participation and fertility"
        )

    fig = px.scatter(
        data,
        x="fertility_rate",
        y="female_labor_participation",
        hover_name="country",
        hover_data=["year"],
        title=title,
        labels={
            "fertility_rate": "Fertility rate (births per woman)",
            "female_labor_participation": "Female labor participation (%)",
            "year": "Year",
        },
        height=CHART_HEIGHT,
    )
    fig.update_traces(marker=dict(size=9, color=GENDER_COLORS["Female"], opacity=0.8))
    fig.update_layout(margin=dict(t=120), title=dict(y=0.995))
    return fig


def create_correlation_heatmap(
    matrix: pd.DataFrame, labels: Optional[Dict[str, str]] = None
) -> go.Figure:
    """Heatmap of a square correlation matrix, fixed to the [-1, 1] range."""
    title = "Correlation Between Gender Indicators"
    if matrix.empty:
        return create_unavailable_chart(
            title, "No indicator rows to correlate", HEATMAP_HEIGHT
        )

    labels = labels if labels is not None else FEATURE_LABELS
    names = [labels.get(col, col) for col in matrix.columns]
    fig = go.Figure(
        go.Heatmap(
            z=matrix.to_numpy(),
            x=names,
            y=names,
            zmin=-1,
            zmax=1,
            colorscale=CORRELATION_COLOR_SCALE,
            text=matrix.round(2).to_numpy(),
            texttemplate="%{text}",
            hovertemplate="%{y} / %{x}<br>r = %{z:.3f}<extra></extra>",
        )
    )
    fig.update_layout(
        title=title,
        xaxis_tickangle=-45,
        yaxis_autorange="reversed",
        height=HEATMAP_HEIGHT,
    )
    return fig


def create_missing_profile_chart(
    profile: pd.DataFrame, labels: Optional[Dict[str, str]] = None
) -> go.Figure:
    """Bar chart of the share of rows missing each feature."""
    title = "Missing Values per Indicator (% of rows)"
    if profile.empty:
        return create_unavailable_chart(title, "No indicator rows to profile")

    labels = labels if labels is not None else FEATURE_LABELS
    chart_data = profile.assign(
        label=[labels.get(feature, feature) for feature in profile["feature"]]
    )
    fig = px.bar(
        chart_data,
        x="label",
        y="missing_pct",
        title=title,
        labels={"label": "Indicator", "missing_pct": "Missing (%)"},
        height=CHART_HEIGHT,
    )
    fig.update_layout(
        yaxis=dict(range=[0, 100]),
        xaxis_tickangle=-45,
        margin=dict(t=120),
        title=dict(y=0.995),
    )
    return fig


def create_all_charts(
    summaries: Dict[str, pd.DataFrame], region: str, education_level: str
) -> Dict[str, go.Figure]:
    """Build every chart from the output of ``pipelines.recompute``."""
    return {
        "secondary_enrollment_gap": create_gap_chart(
            summaries["secondary_enrollment_gap"]
        ),
        "female_life_expectancy": create_life_expectancy_map(
            summaries["female_life_expectancy"]
        ),
        "labor_vs_fertility": create_labor_fertility_scatter(
            summaries["labor_vs_fertility"]
        ),
        "region_enrollment": create_region_chart(
            summaries["region_enrollment"], region
        ),
        "income_enrollment": create_income_chart(
            summaries["income_enrollment"], education_level
        ),
        "indicator_correlations": create_correlation_heatmap(
            summaries["indicator_correlations"]
        ),
        "indicator_missing_profile": create_missing_profile_chart(
            summaries["indicator_missing_profile"]
        ),
    }
