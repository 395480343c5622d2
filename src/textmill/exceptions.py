"""
Exception hierarchy for TextMill.
"""

from __future__ import annotations


class TextMillError(Exception):
    """Base class for all TextMill errors."""

    pass


class ParseError(TextMillError):
    """Raised when markup cannot be parsed into plain text."""

    def __init__(self, message: str, *, importer: str | None = None) -> None:
        super().__init__(message)
        self.importer = importer


class PreconditionError(TextMillError, RuntimeError):
    """Raised when a component is used before it is fully configured."""

    pass


class RegistrationError(TextMillError, ValueError):
    """Raised when a registry key is already owned by another factory."""

    def __init__(self, message: str, *, keys: list[str] | None = None) -> None:
        super().__init__(message)
        self.keys = keys or []
