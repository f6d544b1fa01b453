"""Pure analysis package for trendGraphs.

This package describes the graph-type variants a trend graph can show. It must
not import Django.
"""

from .graph_types import DEFAULT_REGISTRY, GraphTypeRegistry, GraphTypeSpec

__all__ = ["DEFAULT_REGISTRY", "GraphTypeRegistry", "GraphTypeSpec"]
