"""
Visualization registry - maps operation names to visualization factories.
"""

from __future__ import annotations

import threading
from typing import Dict, List, Optional

import structlog

from ..exceptions import RegistrationError
from .models import Operation
from .protocols import Visualization, VisualizationFactory
from .tag_clouds import TagClouds

logger = structlog.get_logger(__name__)


class VisualizationRegistry:
    """Registry of visualizations keyed by the name of the operation they render."""

    def __init__(self) -> None:
        self._factories: Dict[str, VisualizationFactory] = {}
        self.logger = logger.bind(component="VisualizationRegistry")
        self.register(TagClouds.name, TagClouds)

    def register(self, key: str, factory: VisualizationFactory, *, replace: bool = False) -> None:
        """Register ``factory`` under ``key``.

        Raises:
            RegistrationError: if ``key`` is already registered and ``replace`` is False
        """
        if key in self._factories and not replace:
            raise RegistrationError(f"Visualization already registered for '{key}'", keys=[key])
        self._factories[key] = factory
        self.logger.debug("Registered visualization", key=key)

    def unregister(self, key: str) -> bool:
        return self._factories.pop(key, None) is not None

    def resolve(self, key: str) -> Optional[Visualization]:
        """Build a visualization for ``key``, or None if nothing is registered."""
        factory = self._factories.get(key)
        if factory is None:
            return None
        return factory()

    def keys(self) -> List[str]:
        return sorted(self._factories.keys())


_registry: Optional[VisualizationRegistry] = None
_registry_lock = threading.Lock()


def get_visualization_registry() -> VisualizationRegistry:
    """Get the process-wide visualization registry, creating it on first use."""
    global _registry
    if _registry is None:
        with _registry_lock:
            if _registry is None:
                _registry = VisualizationRegistry()
    return _registry


def resolve_visualization(key: str) -> Optional[Visualization]:
    return get_visualization_registry().resolve(key)


def visualize(operation: Operation, registry: VisualizationRegistry | None = None) -> str:
    """Render ``operation`` with the visualization registered for its name.

    Raises:
        LookupError: if no visualization is registered for the operation
    """
    registry = registry or get_visualization_registry()
    visualization = registry.resolve(operation.name)
    if visualization is None:
        raise LookupError(f"No visualization registered for operation '{operation.name}'")
    visualization.set_operation(operation)
    return visualization.get_html()
