"""
Importer registry - maps file extensions to importer factories.
"""

from __future__ import annotations

import threading
from functools import partial
from typing import Dict, List, Optional

import structlog

from ..config.config import ImportSettings
from ..exceptions import RegistrationError
from .html_importer import HtmlImporter
from .protocols import Importer, ImporterFactory
from .text_importer import TextImporter

logger = structlog.get_logger(__name__)


class ImporterRegistry:
    """Registry of available importers.

    Each extension is owned by exactly one factory. Every lookup builds a
    fresh importer, so callers never share importer state.
    """

    def __init__(self, settings: ImportSettings | None = None) -> None:
        self.settings = settings or ImportSettings()
        self._factories: Dict[str, ImporterFactory] = {}
        self.logger = logger.bind(component="ImporterRegistry")
        self._register_default_importers()

    def _register_default_importers(self) -> None:
        """Register the built-in importers."""
        self.register(TextImporter)
        self.register(partial(HtmlImporter, parser=self.settings.html_parser))

    def register(self, factory: ImporterFactory, *, replace: bool = False) -> None:
        """Register ``factory`` for every extension its importers claim.

        Args:
            factory: Zero-argument callable returning an importer
            replace: Take over extensions already owned by another factory

        Raises:
            RegistrationError: if an extension is already registered and
                ``replace`` is False
        """
        extensions = list(factory().extensions)
        taken = [ext for ext in extensions if ext in self._factories and self._factories[ext] is not factory]
        if taken and not replace:
            raise RegistrationError(f"Extensions already registered: {', '.join(taken)}", keys=taken)

        for ext in extensions:
            self._factories[ext] = factory

        self.logger.debug("Registered importer", extensions=extensions, replaced=taken)

    def unregister(self, extension: str) -> bool:
        """Remove the factory for ``extension``. Returns False if none was registered."""
        return self._factories.pop(extension, None) is not None

    def resolve(self, extension: str) -> Optional[Importer]:
        """Build an importer for ``extension`` (case-sensitive, no leading dot).

        Returns:
            A new importer, or None if no importer claims the extension
        """
        factory = self._factories.get(extension)
        if factory is None:
            return None
        return factory()

    def is_supported(self, extension: str) -> bool:
        """Check if an importer claims ``extension``."""
        return extension in self._factories

    def supported_extensions(self) -> List[str]:
        """List all supported extensions."""
        return sorted(self._factories.keys())


# Global registry instance
_registry: Optional[ImporterRegistry] = None
_registry_lock = threading.Lock()


def get_registry() -> ImporterRegistry:
    """Get the process-wide importer registry, creating it on first use."""
    global _registry
    if _registry is None:
        with _registry_lock:
            if _registry is None:
                from ..config import settings

                _registry = ImporterRegistry(settings.importing)
    return _registry


def resolve_importer(extension: str) -> Optional[Importer]:
    """Convenience function to get an importer for an extension."""
    return get_registry().resolve(extension)


def register_importer(factory: ImporterFactory, *, replace: bool = False) -> None:
    """Convenience function to register an importer with the global registry."""
    get_registry().register(factory, replace=replace)
