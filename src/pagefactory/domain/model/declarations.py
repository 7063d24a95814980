"""Declared page type schemas.

A ``PageType`` is code-level configuration: it is built once when declarations
are loaded, looked up through the registry and never persisted.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from pagefactory.domain.errors import DeclarationError
from pagefactory.domain.model.enums import AssociationKind

if TYPE_CHECKING:
    from collections.abc import Iterable

BASE_PART_CLASS: Final[str] = "PagePart"


@dataclass(frozen=True, slots=True)
class PartDeclaration:
    """A declared part name and the class tag its record is expected to carry."""

    name: str
    part_class: str = BASE_PART_CLASS


@dataclass(frozen=True, slots=True, kw_only=True)
class PageType:
    name: str
    parts: tuple[PartDeclaration, ...] = ()
    fields: tuple[str, ...] = ()
    layout: str | None = None

    def __post_init__(self) -> None:
        if not self.name.strip():
            raise DeclarationError("Page type name must not be blank")
        _require_unique(self.name, "part", (part.name for part in self.parts))
        _require_unique(self.name, "field", self.fields)
        if self.layout is not None and not self.layout.strip():
            raise DeclarationError(f"{self.name}: layout name must not be blank")

    @property
    def part_names(self) -> tuple[str, ...]:
        return tuple(part.name for part in self.parts)

    def declared_names(self, kind: AssociationKind) -> tuple[str, ...]:
        if kind is AssociationKind.PART:
            return self.part_names
        return self.fields

    def expected_part_class(self, name: str) -> str | None:
        """Return the declared class tag for ``name`` or ``None`` if undeclared."""

        for part in self.parts:
            if part.name == name:
                return part.part_class
        return None


def _require_unique(owner: str, label: str, names: Iterable[str]) -> None:
    seen: set[str] = set()
    for name in names:
        if not name.strip():
            raise DeclarationError(f"{owner}: {label} names must not be blank")
        if name in seen:
            raise DeclarationError(f"{owner}: {label} {name!r} declared more than once")
        seen.add(name)
