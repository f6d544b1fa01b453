"""Trend graph configuration helpers.

Graphs are driven by `GraphConfiguration` values rather than bespoke view
logic. This package holds the configuration value object and its string codec.
"""

from core.charting.graph_configuration import GraphConfiguration

__all__ = ["GraphConfiguration"]
