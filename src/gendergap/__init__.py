"""
gendergap: exploratory charts of gender development indicators.

The core (reducers, statistics, pipelines) turns the loaded CSV tables into
small summary frames; the visualization subpackage draws them with Plotly.
"""

__version__ = "0.1.0"
