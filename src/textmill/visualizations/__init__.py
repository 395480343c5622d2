"""
Visualizations render the results of analytic operations as HTML fragments.
"""

from .models import Operation, ResultsOperation, TagCloudsResult
from .protocols import Visualization, VisualizationFactory
from .registry import VisualizationRegistry, get_visualization_registry, resolve_visualization, visualize
from .tag_clouds import TagClouds

__all__ = [
    "Operation",
    "ResultsOperation",
    "TagCloudsResult",
    "Visualization",
    "VisualizationFactory",
    "TagClouds",
    "VisualizationRegistry",
    "get_visualization_registry",
    "resolve_visualization",
    "visualize",
]
