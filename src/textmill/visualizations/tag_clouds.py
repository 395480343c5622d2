"""
Tag cloud visualization: term size encodes term weight.
"""

from __future__ import annotations

import html
import itertools
import math
from typing import List, Optional

import structlog

from ..config.config import VisualizationSettings
from ..exceptions import PreconditionError
from .models import Operation, TagCloudsResult

logger = structlog.get_logger(__name__)


class TagClouds:
    """Renders TagCloudsResult entries as sized spans inside a container div."""

    name = "TagClouds"

    def __init__(
        self,
        operation: Operation | None = None,
        *,
        max_size_pixels: int = 24,
        max_results: int = 50,
    ) -> None:
        self.operation: Optional[Operation] = operation
        self.max_size_pixels = max_size_pixels
        self.max_results = max_results
        self.logger = logger.bind(component="TagClouds")

    @classmethod
    def from_settings(cls, settings: VisualizationSettings, operation: Operation | None = None) -> TagClouds:
        return cls(operation, max_size_pixels=settings.max_size_pixels, max_results=settings.max_results)

    @property
    def max_size_pixels(self) -> int:
        return self._max_size_pixels

    @max_size_pixels.setter
    def max_size_pixels(self, value: int) -> None:
        if value < 0:
            raise ValueError("max_size_pixels must be non-negative")
        self._max_size_pixels = value

    @property
    def max_results(self) -> int:
        return self._max_results

    @max_results.setter
    def max_results(self, value: int) -> None:
        if value < 0:
            raise ValueError("max_results must be non-negative")
        self._max_results = value

    def get_operation(self) -> Optional[Operation]:
        return self.operation

    def set_operation(self, operation: Operation) -> None:
        self.operation = operation

    def get_html(self) -> str:
        """Render the operation's results as a tag cloud.

        The first ``max_results`` results are taken in the order the operation
        produced them, then sorted by term. Callers wanting the heaviest terms
        must sort the operation's results by weight beforehand.

        Raises:
            PreconditionError: if no operation has been set
        """
        if self.operation is None:
            raise PreconditionError("TagClouds requires an operation before rendering")

        results: List[TagCloudsResult] = list(itertools.islice(self.operation.get_results(), self.max_results))
        results.sort(key=lambda result: result.term)

        self.logger.debug(
            "Rendering tag cloud",
            operation=getattr(self.operation, "name", type(self.operation).__name__),
            terms=len(results),
            max_size_pixels=self.max_size_pixels,
        )

        spans = " ".join(
            f'<span class="tagcloud-term" style="font-size: {self.calculate_size(result.weight)}px">'
            f"{html.escape(result.term)}</span>"
            for result in results
        )
        return f'<div class="tagcloud">{spans}</div>'

    def calculate_size(self, weight: float) -> int:
        # Weights outside [0, 1] are not clamped
        return math.floor(self.max_size_pixels * weight)
