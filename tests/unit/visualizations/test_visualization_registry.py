"""
Unit tests for VisualizationRegistry and visualize().
"""

import pytest
from textmill.exceptions import RegistrationError
from textmill.visualizations import registry as registry_module
from textmill.visualizations.models import ResultsOperation, TagCloudsResult
from textmill.visualizations.registry import (
    VisualizationRegistry,
    get_visualization_registry,
    resolve_visualization,
    visualize,
)
from textmill.visualizations.tag_clouds import TagClouds


class TermList:
    def __init__(self):
        self.operation = None

    def get_operation(self):
        return self.operation

    def set_operation(self, operation):
        self.operation = operation

    def get_html(self):
        return "<ul>" + "".join(f"<li>{r.term}</li>" for r in self.operation.get_results()) + "</ul>"


@pytest.fixture
def registry():
    return VisualizationRegistry()


class TestVisualizationRegistry:
    """Test cases for VisualizationRegistry."""

    def test_default_keys(self, registry):
        assert registry.keys() == ["TagClouds"]

    def test_resolve_tag_clouds(self, registry):
        visualization = registry.resolve("TagClouds")

        assert isinstance(visualization, TagClouds)
        assert visualization is not registry.resolve("TagClouds")

    def test_resolve_unknown(self, registry):
        assert registry.resolve("Readability") is None

    def test_register_duplicate_fails(self, registry):
        with pytest.raises(RegistrationError):
            registry.register("TagClouds", TermList)

        assert isinstance(registry.resolve("TagClouds"), TagClouds)

    def test_register_replace(self, registry):
        registry.register("TagClouds", TermList, replace=True)

        assert isinstance(registry.resolve("TagClouds"), TermList)

    def test_unregister(self, registry):
        assert registry.unregister("TagClouds") is True
        assert registry.resolve("TagClouds") is None
        assert registry.unregister("TagClouds") is False


class TestVisualize:
    """Test rendering through the registry."""

    def test_visualize_by_operation_name(self, tag_cloud_operation):
        html = visualize(tag_cloud_operation, VisualizationRegistry())

        assert html.startswith('<div class="tagcloud">')
        assert html.index(">a<") < html.index(">b<") < html.index(">c<")

    def test_visualize_custom_operation(self, registry):
        registry.register("TermList", TermList)
        operation = ResultsOperation(results=[TagCloudsResult("x", 1.0)], name="TermList")

        assert visualize(operation, registry) == "<ul><li>x</li></ul>"

    def test_visualize_unknown_operation(self, registry):
        with pytest.raises(LookupError):
            visualize(ResultsOperation(name="Unknown"), registry)

    def test_global_registry(self, monkeypatch):
        monkeypatch.setattr(registry_module, "_registry", None)

        assert get_visualization_registry() is get_visualization_registry()
        assert isinstance(resolve_visualization("TagClouds"), TagClouds)
