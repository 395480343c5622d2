"""
Shared test configuration for TextMill.
"""

# Standard library imports
from pathlib import Path

# Third-party imports
import pytest

# Local imports
from textmill.config import ImportSettings, LazyConfig
from textmill.importers import ImporterRegistry
from textmill.visualizations import ResultsOperation, TagCloudsResult

# ============================================================================
# Pytest Configuration
# ============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests across modules")


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Keep the lazy global config from reading files or env of the host."""
    monkeypatch.chdir(tmp_path)
    LazyConfig.reset()
    yield
    LazyConfig.reset()


# ============================================================================
# Importer Fixtures
# ============================================================================


@pytest.fixture
def import_settings():
    return ImportSettings()


@pytest.fixture
def importer_registry(import_settings):
    """A fresh registry, independent of the process-wide one."""
    return ImporterRegistry(import_settings)


@pytest.fixture
def corpus_dir(tmp_path) -> Path:
    """A folder with plain text, HTML, unsupported and hidden files."""
    folder = tmp_path / "corpus"
    folder.mkdir()
    (folder / "b_second.txt").write_text("Second document.\n", encoding="utf-8")
    (folder / "a first.txt").write_text("First document.\n", encoding="utf-8")
    (folder / "page.html").write_text(
        "<html><head><title>T</title><script>var x = 1;</script></head>"
        "<body><p>Hello <b>world</b></p></body></html>",
        encoding="utf-8",
    )
    (folder / "slides.pptx").write_bytes(b"PK\x03\x04")
    (folder / ".hidden.txt").write_text("hidden", encoding="utf-8")
    (folder / "nested").mkdir()
    return folder


@pytest.fixture
def sample_html():
    """Provide sample HTML content for testing."""
    return """
    <!DOCTYPE html>
    <html>
    <head>
        <title>Test Article</title>
        <style>p { color: red; }</style>
    </head>
    <body>
        <article>
            <h1>Test Article Title</h1>
            <p>This is a sample paragraph with <strong>bold text</strong> and
               <a href="https://example.com">a link</a>.</p>
            <!-- a comment that should not appear -->
            <script>console.log("hidden");</script>
            <p>Fish &amp; chips</p>
        </article>
    </body>
    </html>
    """


# ============================================================================
# Visualization Fixtures
# ============================================================================


@pytest.fixture
def tag_cloud_operation():
    """Results in production order, deliberately not sorted by term."""
    return ResultsOperation(
        results=[
            TagCloudsResult("b", 0.5),
            TagCloudsResult("a", 0.9),
            TagCloudsResult("c", 0.1),
        ]
    )
