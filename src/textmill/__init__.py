"""
TextMill - document import and term visualization for text mining.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .config import Config
from .exceptions import ParseError, PreconditionError, RegistrationError, TextMillError
from .importers import DocumentLoader, Importer, ImporterRegistry, resolve_importer
from .visualizations import TagClouds, TagCloudsResult, Visualization, VisualizationRegistry, visualize

__all__ = [
    "__version__",
    "Config",
    "TextMillError",
    "ParseError",
    "PreconditionError",
    "RegistrationError",
    "Importer",
    "ImporterRegistry",
    "DocumentLoader",
    "resolve_importer",
    "Visualization",
    "VisualizationRegistry",
    "TagClouds",
    "TagCloudsResult",
    "visualize",
]
