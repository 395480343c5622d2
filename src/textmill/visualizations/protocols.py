"""
Protocols for pluggable visualizations.
"""

from __future__ import annotations

from typing import Callable, Optional, Protocol, runtime_checkable

from .models import Operation


@runtime_checkable
class Visualization(Protocol):
    """Renders the results of an operation as an HTML fragment."""

    operation: Optional[Operation]

    def get_operation(self) -> Optional[Operation]:
        ...

    def set_operation(self, operation: Operation) -> None:
        ...

    def get_html(self) -> str:
        """Render the operation's results.

        Raises:
            PreconditionError: if no operation has been set
        """
        ...


VisualizationFactory = Callable[[], Visualization]
