"""
gendergap visualization package.

This package provides Plotly chart builders and a Streamlit dashboard for
exploring gender indicators by country, region and income group.
"""

from gendergap.visualization.dashboard import launch_dashboard

__all__ = ["launch_dashboard"]
