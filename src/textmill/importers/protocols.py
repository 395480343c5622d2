"""
Protocols for pluggable document importers.
"""

from __future__ import annotations

from typing import Callable, Protocol, runtime_checkable


@runtime_checkable
class Importer(Protocol):
    """Turns the raw content of one document format into plain text."""

    name: str
    extensions: tuple[str, ...]

    def is_valid_extension(self, extension: str) -> bool:
        """Return True if this importer claims ``extension`` (no leading dot)."""
        ...

    def clean(self, content: str) -> str | None:
        """Convert raw content into plain text.

        Args:
            content: Raw document content, already loaded into memory

        Returns:
            The plain text, or None if the document could not be imported
        """
        ...


ImporterFactory = Callable[[], Importer]
