"""Application orchestration entry points."""

from __future__ import annotations

from collections.abc import Callable
from enum import StrEnum
from logging import getLogger
from typing import TYPE_CHECKING

from pagefactory.adapters.declarations import load_registry
from pagefactory.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyReconciliationUnitOfWork,
    is_started,
    startup,
)
from pagefactory.config import get_declarations_config
from pagefactory.domain.model import AssociationKind
from pagefactory.domain.ports.unit_of_work import ReconciliationUnitOfWork
from pagefactory.domain.reconciliation import Reconciler

if TYPE_CHECKING:
    from pathlib import Path

    from pagefactory.domain.reconciliation import ReconciliationResult
    from pagefactory.domain.registry import PageTypeRegistry

UnitOfWorkFactory = Callable[[], ReconciliationUnitOfWork]


log = getLogger(__name__)


class Operation(StrEnum):
    PRUNE = "prune"
    SYNC = "sync"
    UPDATE = "update"
    LAYOUTS = "layouts"
    RECONCILE = "reconcile"


def build_reconciler(
    registry: PageTypeRegistry,
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    database_uri: str | None = None,
) -> Reconciler:
    """Return a reconciler bound to ``registry`` and the configured store."""

    if unit_of_work_factory is None:
        if not is_started():
            startup(database_uri=database_uri)
        unit_of_work_factory = SqlAlchemyReconciliationUnitOfWork
    return Reconciler(registry=registry, unit_of_work_factory=unit_of_work_factory)


def run_reconciliation(
    operation: Operation,
    *,
    kind: AssociationKind = AssociationKind.PART,
    registry: PageTypeRegistry | None = None,
    declarations_path: Path | str | None = None,
    scope: str | None = None,
    dry_run: bool = False,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    database_uri: str | None = None,
) -> ReconciliationResult:
    """Load declarations (unless given a registry) and run one reconciler operation."""

    if registry is None:
        registry = load_registry(get_declarations_config(declarations_path).resolve_path())
    reconciler = build_reconciler(
        registry,
        unit_of_work_factory=unit_of_work_factory,
        database_uri=database_uri,
    )
    log.info(
        "Starting %s: kind=%s, scope=%s, dry_run=%s",
        operation,
        kind,
        scope or "all page types",
        dry_run,
    )

    if operation is Operation.PRUNE:
        return reconciler.prune(kind, scope, dry_run=dry_run)
    if operation is Operation.SYNC:
        return reconciler.sync(kind, scope, dry_run=dry_run)
    if operation is Operation.UPDATE:
        return reconciler.update(kind, scope, dry_run=dry_run)
    if operation is Operation.LAYOUTS:
        return reconciler.sync_layouts(scope, dry_run=dry_run)
    return reconciler.reconcile(scope, dry_run=dry_run)
