"""
BeautifulSoup-based importer for HTML-like documents.
"""

from __future__ import annotations

import re

import structlog
from bs4 import BeautifulSoup, ParserRejectedMarkup

from ..exceptions import ParseError

logger = structlog.get_logger(__name__)

# Runs of horizontal whitespace inside a line
_SPACES_PATTERN = re.compile(r"[^\S\n]+")

# A tag opened at the end of the input and never closed
_UNTERMINATED_TAG_PATTERN = re.compile(r"<[A-Za-z!/?][^>]*\Z")

# Elements whose text starts on its own line
BLOCK_TAGS = [
    "title",
    "p",
    "div",
    "section",
    "article",
    "header",
    "footer",
    "nav",
    "aside",
    "main",
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
    "ul",
    "ol",
    "li",
    "dl",
    "dt",
    "dd",
    "table",
    "tr",
    "td",
    "th",
    "caption",
    "blockquote",
    "pre",
    "address",
    "figure",
    "figcaption",
    "form",
    "fieldset",
    "legend",
    "hr",
]


class HtmlImporter:
    """Importer that strips markup and scripting from HTML documents."""

    name = "html"
    extensions: tuple[str, ...] = ("xhtml", "html", "htm")

    def __init__(self, parser: str = "html.parser") -> None:
        self.config = {
            "parser": parser,
            "remove_tags": ["script", "style", "noscript", "template"],
            "block_tags": BLOCK_TAGS,
        }
        self.logger = logger.bind(component="HtmlImporter", parser=parser)

    def is_valid_extension(self, extension: str) -> bool:
        return extension in self.extensions

    def clean(self, content: str) -> str | None:
        """Return the visible text of ``content``, or None if it cannot be parsed."""
        try:
            return self.parse(content)
        except ParseError as e:
            self.logger.error(
                "Markup could not be parsed",
                event_type="parse_failed",
                error=str(e),
                content_length=len(content),
            )
            return None

    def parse(self, content: str) -> str:
        """Strip markup from ``content``.

        Raises:
            ParseError: if the parser rejects the markup, or the markup
                ends inside an unterminated tag
        """
        if not content.strip():
            return ""

        unterminated = _UNTERMINATED_TAG_PATTERN.search(content)
        if unterminated:
            raise ParseError(
                f"Unterminated tag at offset {unterminated.start()}: {unterminated.group()[:40]!r}",
                importer=self.name,
            )

        try:
            soup = BeautifulSoup(content, self.config["parser"])
        except ParserRejectedMarkup as e:
            raise ParseError(f"Parser rejected markup: {e}", importer=self.name) from e

        for tag_name in self.config["remove_tags"]:
            for tag in soup.find_all(tag_name):
                tag.decompose()

        for br in soup.find_all("br"):
            br.replace_with("\n")
        for tag in soup.find_all(self.config["block_tags"]):
            tag.insert_before("\n")
            tag.insert_after("\n")

        return normalize_whitespace(soup.get_text())


def normalize_whitespace(text: str) -> str:
    """Collapse spaces within lines and drop blank lines."""
    lines = (_SPACES_PATTERN.sub(" ", line).strip() for line in text.splitlines())
    return "\n".join(line for line in lines if line)
