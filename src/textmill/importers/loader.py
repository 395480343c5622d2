"""
Document loader - reads documents and runs them through importers.

The importers themselves only see in-memory strings; this module is the
collaborator that reads files and isolates per-document failures so one bad
file never aborts a batch.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional

import structlog

from ..config.config import ImportSettings
from .protocols import Importer
from .registry import ImporterRegistry, get_registry

logger = structlog.get_logger(__name__)


@dataclass(slots=True, frozen=True)
class ImportedDocument:
    """A document converted to plain text."""

    external_id: str
    title: str
    url: str
    content: str
    importer: str


@dataclass
class ImportReport:
    """Outcome of importing a batch of files."""

    documents: List[ImportedDocument] = field(default_factory=list)
    skipped: List[Path] = field(default_factory=list)  # no importer for the extension
    failed: List[Path] = field(default_factory=list)  # unreadable, or clean() returned None

    @property
    def total(self) -> int:
        return len(self.documents) + len(self.skipped) + len(self.failed)


def document_id(title: str) -> str:
    """Build an external id from a document title."""
    return title.replace(" ", "").replace("_", "").replace(".", "")


def file_extension(path: Path) -> str:
    """Return the text after the last dot of the file name."""
    return path.name.rsplit(".", 1)[-1]


class DocumentLoader:
    """Imports documents from memory or from the file system."""

    def __init__(
        self,
        registry: ImporterRegistry | None = None,
        settings: ImportSettings | None = None,
    ) -> None:
        self.registry = registry or get_registry()
        self.settings = settings or self.registry.settings
        self.logger = logger.bind(component="DocumentLoader")

    def default_importer(self) -> Optional[Importer]:
        """Importer used when a document is added without one."""
        return self.registry.resolve(self.settings.default_extension)

    def import_document(
        self,
        external_id: str,
        content: str,
        title: str,
        url: str = "",
        importer: Importer | None = None,
    ) -> Optional[ImportedDocument]:
        """Clean ``content`` and wrap it as an ImportedDocument.

        Returns:
            The imported document, or None if the importer could not clean it
        """
        importer = importer or self.default_importer()
        if importer is None:
            self.logger.warning(
                "No default importer available",
                default_extension=self.settings.default_extension,
                external_id=external_id,
            )
            return None

        self.logger.debug("Adding document", title=title, external_id=external_id, importer=importer.name)
        text = importer.clean(content)
        if text is None:
            self.logger.warning("Importer could not clean document", external_id=external_id, importer=importer.name)
            return None

        return ImportedDocument(
            external_id=external_id,
            title=title,
            url=url,
            content=text,
            importer=importer.name,
        )

    def import_folder(self, folder: str | Path, max_docs: int = -1) -> ImportReport:
        """Import every file in ``folder``, in file name order.

        Args:
            folder: Directory holding the documents
            max_docs: Import at most this many entries; values <= 0 mean no limit

        Raises:
            FileNotFoundError: if ``folder`` does not exist or is not a directory
        """
        folder = Path(folder)
        self.logger.debug("Adding files from folder", folder=str(folder))
        if not folder.is_dir():
            raise FileNotFoundError(f"Invalid corpus folder, it doesn't exist! ({folder})")

        names = sorted(
            entry.name for entry in folder.iterdir() if not (self.settings.skip_hidden and entry.name.startswith("."))
        )
        if max_docs > 0:
            names = names[:max_docs]

        return self.import_files(folder / name for name in names)

    def import_files(self, paths: Iterable[Path]) -> ImportReport:
        """Import each file in ``paths``; directories and hidden files are ignored."""
        report = ImportReport()
        self.logger.debug("Adding files", encoding=self.settings.encoding)

        for path in paths:
            if path.is_dir() or (self.settings.skip_hidden and path.name.startswith(".")):
                self.logger.debug("Ignoring entry", path=str(path))
                continue

            extension = file_extension(path)
            importer = self.registry.resolve(extension)
            if importer is None:
                self.logger.info("No importer for extension, ignoring file", extension=extension, file=path.name)
                report.skipped.append(path)
                continue

            try:
                content = path.read_text(encoding=self.settings.encoding)
            except (OSError, UnicodeDecodeError) as e:
                self.logger.error("Failed to read document", file=str(path), error=str(e))
                report.failed.append(path)
                continue

            title = path.name.replace(f".{extension}", "")
            document = self.import_document(
                document_id(title),
                content,
                title,
                url=str(path.resolve()),
                importer=importer,
            )
            if document is None:
                report.failed.append(path)
            else:
                report.documents.append(document)

        self.logger.info(
            "Finished importing documents",
            imported=len(report.documents),
            skipped=len(report.skipped),
            failed=len(report.failed),
        )
        return report
