"""Domain error types raised by the registry and reconciler."""

from __future__ import annotations


class PageFactoryError(Exception):
    """Base class for page factory domain errors."""


class PageTypeNotFoundError(PageFactoryError, LookupError):
    """Raised when a page type identifier has no registered declaration."""

    def __init__(self, identifier: str) -> None:
        super().__init__(f"No page type registered as {identifier!r}")
        self.identifier = identifier


class DuplicatePageTypeError(PageFactoryError, ValueError):
    """Raised when a page type name is registered twice."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Page type {name!r} is already registered")
        self.name = name


class DeclarationError(PageFactoryError, ValueError):
    """Raised when a page type declaration is malformed."""
