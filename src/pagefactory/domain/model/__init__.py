"""Public domain model surface."""

from __future__ import annotations

from pagefactory.domain.model.associations import Layout, LayoutAssignment, PageField, PagePart
from pagefactory.domain.model.declarations import BASE_PART_CLASS, PageType, PartDeclaration
from pagefactory.domain.model.entity import Entity, new_id
from pagefactory.domain.model.enums import AssociationKind

type AssociationRecord = PagePart | PageField

__all__ = [
    "BASE_PART_CLASS",
    "AssociationKind",
    "AssociationRecord",
    "Entity",
    "Layout",
    "LayoutAssignment",
    "PageField",
    "PagePart",
    "PageType",
    "PartDeclaration",
    "new_id",
]
