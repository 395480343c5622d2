"""
Plain-text importer.
"""

from __future__ import annotations


class TextImporter:
    """Importer for documents that are already plain text."""

    name = "text"
    extensions: tuple[str, ...] = ("txt",)

    def is_valid_extension(self, extension: str) -> bool:
        return extension in self.extensions

    def clean(self, content: str) -> str | None:
        return content
