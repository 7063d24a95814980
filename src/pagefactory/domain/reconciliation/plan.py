"""Change plan types shared by the planning and apply stages.

A pass over one page type first reads the store, then computes a list of
``Change`` objects, then applies them. Keeping the plan explicit lets a dry
run report exactly what an applied run would do.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from pagefactory.domain.model import AssociationRecord, Layout


class ChangeAction(StrEnum):
    CREATE = "create"
    DELETE = "delete"
    ASSIGN = "assign"
    SKIP = "skip"


class ChangeTarget(StrEnum):
    PART = "part"
    FIELD = "field"
    LAYOUT = "layout"


@dataclass(frozen=True, slots=True, kw_only=True)
class Change:
    """One planned store mutation (or a recorded skip) for a single owner."""

    action: ChangeAction
    target: ChangeTarget
    owner: str
    name: str
    part_class: str | None = None
    record: AssociationRecord | None = None
    layout: Layout | None = None
    reason: str | None = None

    def describe(self) -> str:
        label = f"{self.target} {self.name!r}"
        if self.part_class is not None:
            label = f"{label} ({self.part_class})"
        text = f"{self.action} {label} on {self.owner}"
        if self.reason:
            text = f"{text}: {self.reason}"
        return text


@dataclass(slots=True)
class ReconciliationResult:
    """Summary of one reconciler operation."""

    operation: str
    dry_run: bool = False
    page_types: list[str] = field(default_factory=list[str])
    changes: list[Change] = field(default_factory=list[Change])

    def record(self, page_type: str, changes: Iterable[Change]) -> None:
        if page_type not in self.page_types:
            self.page_types.append(page_type)
        self.changes.extend(changes)

    def merge(self, other: ReconciliationResult) -> None:
        for page_type in other.page_types:
            if page_type not in self.page_types:
                self.page_types.append(page_type)
        self.changes.extend(other.changes)

    def count(self, action: ChangeAction) -> int:
        return self.counts()[action]

    def counts(self) -> Counter[ChangeAction]:
        return Counter(change.action for change in self.changes)

    @property
    def created(self) -> int:
        return self.count(ChangeAction.CREATE)

    @property
    def deleted(self) -> int:
        return self.count(ChangeAction.DELETE)

    @property
    def assigned(self) -> int:
        return self.count(ChangeAction.ASSIGN)

    @property
    def skipped(self) -> int:
        return self.count(ChangeAction.SKIP)

    @property
    def mutations(self) -> int:
        return self.created + self.deleted + self.assigned

    def for_owner(self, owner: str) -> list[Change]:
        return [change for change in self.changes if change.owner == owner]
