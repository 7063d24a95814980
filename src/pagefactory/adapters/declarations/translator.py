"""Translate validated declaration documents into domain page types."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pagefactory.domain.model import PageType, PartDeclaration

from .schema import PartEntry

if TYPE_CHECKING:
    from .schema import PageTypeEntry


def translate_page_type(name: str, entry: PageTypeEntry) -> PageType:
    parts = tuple(_translate_part(part) for part in entry.parts)
    return PageType(
        name=name,
        parts=parts,
        fields=tuple(entry.field_names),
        layout=entry.layout,
    )


def _translate_part(part: str | PartEntry) -> PartDeclaration:
    if isinstance(part, PartEntry):
        return PartDeclaration(name=part.name, part_class=part.part_class)
    return PartDeclaration(name=part)
