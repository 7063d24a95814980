"""Ports for the association store the reconciler reads and mutates.

Every query is scoped by owner (the page type name); implementations must
never return or touch rows owned by another page type.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from pagefactory.domain.model import Layout, PageField, PagePart


@runtime_checkable
class PartRepository(Protocol):
    """Persistence contract for content part records."""

    def list_for_owner(self, owner: str) -> Sequence[PagePart]: ...

    def create(self, owner: str, name: str, part_class: str) -> PagePart: ...

    def delete(self, record: PagePart) -> None: ...


@runtime_checkable
class FieldRepository(Protocol):
    """Persistence contract for custom field records."""

    def list_for_owner(self, owner: str) -> Sequence[PageField]: ...

    def create(self, owner: str, name: str) -> PageField: ...

    def delete(self, record: PageField) -> None: ...


@runtime_checkable
class LayoutRepository(Protocol):
    """Layout lookup by name plus the per page type layout pointer."""

    def find_by_name(self, name: str) -> Layout | None: ...

    def get_assignment(self, owner: str) -> Layout | None: ...

    def set_assignment(self, owner: str, layout: Layout | None) -> None: ...
