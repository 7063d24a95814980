"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class AssociationKind(StrEnum):
    """Record collection targeted by a prune/sync/update pass."""

    PART = "part"
    FIELD = "field"

    @property
    def plural(self) -> str:
        return f"{self.value}s"
