"""
Data models at the boundary with analytic operations.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, List, Protocol, runtime_checkable


@dataclass(slots=True, frozen=True)
class TagCloudsResult:
    """A term and its weight, normalized to [0, 1] by the producing operation."""

    term: str
    weight: float


@runtime_checkable
class Operation(Protocol):
    """An analytic computation whose ordered results can be visualized."""

    name: str

    def get_results(self) -> Iterable[Any]:
        """Return the results in the order they were produced."""
        ...


@dataclass
class ResultsOperation:
    """Operation wrapping results that were computed elsewhere."""

    results: List[Any] = field(default_factory=list)
    name: str = "TagClouds"

    def get_results(self) -> Iterable[Any]:
        return self.results
