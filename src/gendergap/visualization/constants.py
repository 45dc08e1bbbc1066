"""
Constants and configuration for the visualization module.
"""

from ..constants import EDUCATION_PATH, INDICATORS_PATH

# Data files the dashboard reads
DATA_FILES = [INDICATORS_PATH, EDUCATION_PATH]

# Chart configuration
CHART_HEIGHT = 500
MAP_HEIGHT = 550
HEATMAP_HEIGHT = 650
LEGEND_CONFIG = dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1)

# Colors
GENDER_COLORS = {"Female": "#e07a9a", "Male": "#619bff"}
POSITIVE_GAP_COLOR = "#4caf50"  # more girls enrolled
NEGATIVE_GAP_COLOR = "#e57373"  # more boys enrolled
MAP_COLOR_SCALE = "Blues"
CORRELATION_COLOR_SCALE = "RdBu"
