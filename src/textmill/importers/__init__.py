"""
Importers turn raw document content into plain text.

Each importer claims a fixed set of file extensions; the registry selects
the importer for an extension at runtime.
"""

from .html_importer import HtmlImporter
from .loader import DocumentLoader, ImportedDocument, ImportReport, document_id, file_extension
from .protocols import Importer, ImporterFactory
from .registry import ImporterRegistry, get_registry, register_importer, resolve_importer
from .text_importer import TextImporter

__all__ = [
    "Importer",
    "ImporterFactory",
    "TextImporter",
    "HtmlImporter",
    "ImporterRegistry",
    "get_registry",
    "register_importer",
    "resolve_importer",
    "DocumentLoader",
    "ImportedDocument",
    "ImportReport",
    "document_id",
    "file_extension",
]
