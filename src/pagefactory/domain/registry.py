"""In-memory registry of declared page types."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pagefactory.domain.errors import (
    DeclarationError,
    DuplicatePageTypeError,
    PageTypeNotFoundError,
)
from pagefactory.domain.model import BASE_PART_CLASS, PageType
from pagefactory.domain.resolution import identifier_of

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from pagefactory.domain.resolution import PageTypeRef

log = logging.getLogger(__name__)


class PageTypeRegistry:
    """Holds one declaration per page type name, in registration order.

    The registry also tracks the known part variants (class tags). Declared tags
    are stored as given and resolved against the known variants when planning.
    """

    def __init__(
        self,
        page_types: Iterable[PageType] = (),
        *,
        part_classes: Iterable[str] = (),
    ) -> None:
        self._page_types: dict[str, PageType] = {}
        self._part_classes: set[str] = {BASE_PART_CLASS}
        for tag in part_classes:
            self.register_part_class(tag)
        for page_type in page_types:
            self.register(page_type)

    @property
    def part_classes(self) -> frozenset[str]:
        return frozenset(self._part_classes)

    def register_part_class(self, tag: str) -> None:
        if not tag.strip():
            raise DeclarationError("Part class tag must not be blank")
        self._part_classes.add(tag.strip())

    def register(self, page_type: PageType) -> PageType:
        """Register ``page_type`` under its name."""

        if page_type.name in self._page_types:
            raise DuplicatePageTypeError(page_type.name)
        self._page_types[page_type.name] = page_type
        log.debug(
            "Registered page type %s: parts=%s, fields=%s, layout=%s",
            page_type.name,
            page_type.part_names,
            page_type.fields,
            page_type.layout,
        )
        return page_type

    def all_page_types(self) -> tuple[PageType, ...]:
        return tuple(self._page_types.values())

    def find_page_type(self, identifier: PageTypeRef) -> PageType | None:
        return self._page_types.get(identifier_of(identifier))

    def get(self, identifier: PageTypeRef) -> PageType:
        page_type = self.find_page_type(identifier)
        if page_type is None:
            raise PageTypeNotFoundError(identifier_of(identifier))
        return page_type

    def __contains__(self, identifier: object) -> bool:
        if not isinstance(identifier, (str, PageType)):
            return False
        return self.find_page_type(identifier) is not None

    def __iter__(self) -> Iterator[PageType]:
        return iter(self.all_page_types())

    def __len__(self) -> int:
        return len(self._page_types)
