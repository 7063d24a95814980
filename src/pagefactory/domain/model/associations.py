"""Persisted association records owned by a page type.

Rows are compared by identity (``eq=False``); a record that survives a
reconciliation pass is the same object with the same primary key.
"""

from __future__ import annotations

from dataclasses import dataclass

from pagefactory.domain.model.declarations import BASE_PART_CLASS
from pagefactory.domain.model.entity import Entity


@dataclass(eq=False, kw_only=True)
class PagePart(Entity):
    """Content part attached to a page type, tagged with its part variant."""

    owner: str
    name: str
    part_class: str = BASE_PART_CLASS
    content: str | None = None


@dataclass(eq=False, kw_only=True)
class PageField(Entity):
    """Custom field attached to a page type."""

    owner: str
    name: str
    content: str | None = None


@dataclass(eq=False, kw_only=True)
class Layout(Entity):
    name: str
    content: str | None = None


@dataclass(eq=False, kw_only=True)
class LayoutAssignment:
    """A page type's pointer to its layout."""

    owner: str
    layout: Layout | None = None
