"""Type resolution helpers.

Maps page type identifiers to registered declarations and part class tags to
the concrete part variant used when instantiating replacement rows.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pagefactory.domain.model import BASE_PART_CLASS, PageType

if TYPE_CHECKING:
    from collections.abc import Collection

    from pagefactory.domain.registry import PageTypeRegistry

type PageTypeRef = str | PageType


def identifier_of(identifier: PageTypeRef) -> str:
    if isinstance(identifier, PageType):
        return identifier.name
    return identifier


def resolve_page_type(registry: PageTypeRegistry, identifier: PageTypeRef) -> PageType:
    """Return the registered page type or raise ``PageTypeNotFoundError``."""

    return registry.get(identifier)


def resolve_part_class(tag: str | None, known: Collection[str]) -> str:
    """Return ``tag`` if it names a known part variant, else the base variant.

    Unknown tags never block a pass: they resolve to the base variant so that a
    sync can always replace the offending record.
    """

    if tag is None:
        return BASE_PART_CLASS
    normalized = tag.strip()
    if normalized in known:
        return normalized
    return BASE_PART_CLASS


def page_types_in_scope(
    registry: PageTypeRegistry,
    scope: PageTypeRef | None,
) -> tuple[PageType, ...]:
    """Return every registered page type, or the single one named by ``scope``."""

    if scope is None:
        return registry.all_page_types()
    return (resolve_page_type(registry, scope),)
