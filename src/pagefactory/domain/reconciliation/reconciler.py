"""Reconciler: bring persisted associations in line with page type declarations.

Each public operation is a complete read-plan-apply pass. Page types are
processed one at a time inside a single unit of work and each page type's
changes are committed before the next one is read, so a failure leaves the
already completed page types committed and rolls back the current one.
Every operation is idempotent and safe to re-run after a partial failure.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pagefactory.domain.model import AssociationKind, PageField, PagePart
from pagefactory.domain.resolution import page_types_in_scope

from .plan import ChangeAction, ChangeTarget, ReconciliationResult
from .planning import plan_layout, plan_prune, plan_sync, plan_update

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from pagefactory.domain.model import AssociationRecord, PageType
    from pagefactory.domain.ports.unit_of_work import (
        AssociationRepositories,
        ReconciliationUnitOfWork,
    )
    from pagefactory.domain.registry import PageTypeRegistry
    from pagefactory.domain.resolution import PageTypeRef

    from .plan import Change

    type PassPlanner = Callable[[PageType, AssociationRepositories], list[Change]]

log = logging.getLogger(__name__)


@dataclass(slots=True)
class Reconciler:
    """Run prune/sync/update/layout passes against an association store."""

    registry: PageTypeRegistry
    unit_of_work_factory: Callable[[], ReconciliationUnitOfWork]

    # Generic operations ---------------------------------------------------------

    def prune(
        self,
        kind: AssociationKind,
        scope: PageTypeRef | None = None,
        *,
        dry_run: bool = False,
    ) -> ReconciliationResult:
        """Delete records whose names are not declared."""

        def planner(page_type: PageType, repos: AssociationRepositories) -> list[Change]:
            return plan_prune(page_type, kind, _list_records(repos, kind, page_type.name))

        return self._run(f"prune_{kind.plural}", scope, planner, dry_run=dry_run)

    def sync(
        self,
        kind: AssociationKind,
        scope: PageTypeRef | None = None,
        *,
        dry_run: bool = False,
    ) -> ReconciliationResult:
        """Replace declared records whose class tag does not match."""

        known = self.registry.part_classes

        def planner(page_type: PageType, repos: AssociationRepositories) -> list[Change]:
            if kind is AssociationKind.FIELD:
                return []
            records = _list_records(repos, kind, page_type.name)
            return plan_sync(page_type, kind, records, known_part_classes=known)

        return self._run(f"sync_{kind.plural}", scope, planner, dry_run=dry_run)

    def update(
        self,
        kind: AssociationKind,
        scope: PageTypeRef | None = None,
        *,
        dry_run: bool = False,
    ) -> ReconciliationResult:
        """Create records for declared names that are missing."""

        known = self.registry.part_classes

        def planner(page_type: PageType, repos: AssociationRepositories) -> list[Change]:
            records = _list_records(repos, kind, page_type.name)
            return plan_update(page_type, kind, records, known_part_classes=known)

        return self._run(f"update_{kind.plural}", scope, planner, dry_run=dry_run)

    def sync_layouts(
        self,
        scope: PageTypeRef | None = None,
        *,
        dry_run: bool = False,
    ) -> ReconciliationResult:
        """Point each page type declaring a layout at the layout of that name."""

        def planner(page_type: PageType, repos: AssociationRepositories) -> list[Change]:
            if page_type.layout is None:
                return []
            resolved = repos.layouts.find_by_name(page_type.layout)
            current = repos.layouts.get_assignment(page_type.name)
            return plan_layout(page_type, current, resolved)

        return self._run("sync_layouts", scope, planner, dry_run=dry_run)

    # Named operations -----------------------------------------------------------

    def prune_parts(
        self, scope: PageTypeRef | None = None, *, dry_run: bool = False
    ) -> ReconciliationResult:
        return self.prune(AssociationKind.PART, scope, dry_run=dry_run)

    def sync_parts(
        self, scope: PageTypeRef | None = None, *, dry_run: bool = False
    ) -> ReconciliationResult:
        return self.sync(AssociationKind.PART, scope, dry_run=dry_run)

    def update_parts(
        self, scope: PageTypeRef | None = None, *, dry_run: bool = False
    ) -> ReconciliationResult:
        return self.update(AssociationKind.PART, scope, dry_run=dry_run)

    def prune_fields(
        self, scope: PageTypeRef | None = None, *, dry_run: bool = False
    ) -> ReconciliationResult:
        return self.prune(AssociationKind.FIELD, scope, dry_run=dry_run)

    def sync_fields(
        self, scope: PageTypeRef | None = None, *, dry_run: bool = False
    ) -> ReconciliationResult:
        return self.sync(AssociationKind.FIELD, scope, dry_run=dry_run)

    def update_fields(
        self, scope: PageTypeRef | None = None, *, dry_run: bool = False
    ) -> ReconciliationResult:
        return self.update(AssociationKind.FIELD, scope, dry_run=dry_run)

    def reconcile(
        self,
        scope: PageTypeRef | None = None,
        *,
        dry_run: bool = False,
    ) -> ReconciliationResult:
        """Run every pass in order: prune, sync, update (parts then fields), layouts."""

        page_types_in_scope(self.registry, scope)
        combined = ReconciliationResult(operation="reconcile", dry_run=dry_run)
        steps = (
            self.prune_parts,
            self.sync_parts,
            self.update_parts,
            self.prune_fields,
            self.update_fields,
            self.sync_layouts,
        )
        for step in steps:
            combined.merge(step(scope, dry_run=dry_run))
        return combined

    # Internals ------------------------------------------------------------------

    def _run(
        self,
        operation: str,
        scope: PageTypeRef | None,
        planner: PassPlanner,
        *,
        dry_run: bool,
    ) -> ReconciliationResult:
        page_types = page_types_in_scope(self.registry, scope)
        result = ReconciliationResult(operation=operation, dry_run=dry_run)

        with self.unit_of_work_factory() as uow:
            repos = uow.repositories
            for page_type in page_types:
                changes = planner(page_type, repos)
                for change in changes:
                    if change.action is ChangeAction.SKIP:
                        log.warning("Skipping %s", change.describe())
                    else:
                        log.debug("%s%s", "[dry run] " if dry_run else "", change.describe())
                mutations = [change for change in changes if change.action is not ChangeAction.SKIP]
                if mutations and not dry_run:
                    _apply_changes(repos, mutations)
                    uow.commit()
                result.record(page_type.name, changes)

        log.info(
            "%s finished%s: page_types=%s, created=%s, deleted=%s, assigned=%s, skipped=%s",
            operation,
            " (dry run)" if dry_run else "",
            len(result.page_types),
            result.created,
            result.deleted,
            result.assigned,
            result.skipped,
        )
        return result


def _list_records(
    repos: AssociationRepositories,
    kind: AssociationKind,
    owner: str,
) -> Sequence[AssociationRecord]:
    if kind is AssociationKind.PART:
        return repos.parts.list_for_owner(owner)
    return repos.fields.list_for_owner(owner)


def _apply_changes(repos: AssociationRepositories, changes: Sequence[Change]) -> None:
    for change in changes:
        if change.target is ChangeTarget.LAYOUT:
            repos.layouts.set_assignment(change.owner, change.layout)
        elif change.action is ChangeAction.DELETE:
            _delete_record(repos, change)
        elif change.target is ChangeTarget.PART:
            if change.part_class is None:
                raise ValueError(f"Cannot create part without a class: {change.describe()}")
            repos.parts.create(change.owner, change.name, change.part_class)
        else:
            repos.fields.create(change.owner, change.name)


def _delete_record(repos: AssociationRepositories, change: Change) -> None:
    record = change.record
    if isinstance(record, PagePart):
        repos.parts.delete(record)
    elif isinstance(record, PageField):
        repos.fields.delete(record)
    else:
        raise TypeError(f"Delete change carries no record: {change.describe()}")
