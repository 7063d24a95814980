"""Pure planning functions: declared schema vs. persisted rows -> changes.

None of these functions touch the store; they only inspect the rows they are
given. Rows are assumed to belong to ``page_type`` already.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pagefactory.domain.model import AssociationKind, PagePart
from pagefactory.domain.resolution import resolve_part_class

from .plan import Change, ChangeAction, ChangeTarget

if TYPE_CHECKING:
    from collections.abc import Collection, Sequence

    from pagefactory.domain.model import AssociationRecord, Layout, PageType

_TARGET_BY_KIND = {
    AssociationKind.PART: ChangeTarget.PART,
    AssociationKind.FIELD: ChangeTarget.FIELD,
}


def plan_prune(
    page_type: PageType,
    kind: AssociationKind,
    records: Sequence[AssociationRecord],
) -> list[Change]:
    """Delete every record whose name the page type does not declare."""

    declared = set(page_type.declared_names(kind))
    target = _TARGET_BY_KIND[kind]
    return [
        Change(
            action=ChangeAction.DELETE,
            target=target,
            owner=page_type.name,
            name=record.name,
            part_class=record.part_class if isinstance(record, PagePart) else None,
            record=record,
            reason="not declared",
        )
        for record in records
        if record.name not in declared
    ]


def plan_sync(
    page_type: PageType,
    kind: AssociationKind,
    records: Sequence[AssociationRecord],
    *,
    known_part_classes: Collection[str],
) -> list[Change]:
    """Replace declared records whose class tag differs from the declaration.

    The declared tag is resolved against ``known_part_classes`` first, so a
    declaration naming an unknown variant expects the base variant. Records
    with a matching tag and records with undeclared names are left alone. At
    most one replacement is planned per name, and none when a correctly
    tagged record with that name already exists.
    """

    if kind is AssociationKind.FIELD:
        return []

    changes: list[Change] = []
    satisfied: set[str] = set()
    mismatched: list[tuple[PagePart, str]] = []
    for record in records:
        if not isinstance(record, PagePart):
            continue
        declared = page_type.expected_part_class(record.name)
        if declared is None:
            continue
        expected = resolve_part_class(declared, known_part_classes)
        if record.part_class == expected:
            satisfied.add(record.name)
        else:
            mismatched.append((record, expected))

    for record, expected in mismatched:
        changes.append(
            Change(
                action=ChangeAction.DELETE,
                target=ChangeTarget.PART,
                owner=page_type.name,
                name=record.name,
                part_class=record.part_class,
                record=record,
                reason=f"class {record.part_class!r} does not match {expected!r}",
            )
        )
        if record.name in satisfied:
            continue
        satisfied.add(record.name)
        changes.append(
            Change(
                action=ChangeAction.CREATE,
                target=ChangeTarget.PART,
                owner=page_type.name,
                name=record.name,
                part_class=expected,
                reason="replacement",
            )
        )
    return changes


def plan_update(
    page_type: PageType,
    kind: AssociationKind,
    records: Sequence[AssociationRecord],
    *,
    known_part_classes: Collection[str],
) -> list[Change]:
    """Create a record for every declared name that has none (any class tag)."""

    present = {record.name for record in records}
    target = _TARGET_BY_KIND[kind]
    changes: list[Change] = []
    for name in page_type.declared_names(kind):
        if name in present:
            continue
        part_class = None
        if kind is AssociationKind.PART:
            part_class = resolve_part_class(
                page_type.expected_part_class(name),
                known_part_classes,
            )
        changes.append(
            Change(
                action=ChangeAction.CREATE,
                target=target,
                owner=page_type.name,
                name=name,
                part_class=part_class,
                reason="missing",
            )
        )
    return changes


def plan_layout(
    page_type: PageType,
    current: Layout | None,
    resolved: Layout | None,
) -> list[Change]:
    """Point the page type at its declared layout if it is not already."""

    if page_type.layout is None:
        return []
    if resolved is None:
        return [
            Change(
                action=ChangeAction.SKIP,
                target=ChangeTarget.LAYOUT,
                owner=page_type.name,
                name=page_type.layout,
                reason="layout not found",
            )
        ]
    if current is not None and current.id == resolved.id:
        return []
    return [
        Change(
            action=ChangeAction.ASSIGN,
            target=ChangeTarget.LAYOUT,
            owner=page_type.name,
            name=resolved.name,
            layout=resolved,
            reason=f"was {current.name!r}" if current is not None else "was unassigned",
        )
    ]
