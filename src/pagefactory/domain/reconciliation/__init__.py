"""Reconciliation core: declared page type schemas vs. persisted associations.

Layered flow per page type:
1) read the owner's persisted rows through the store ports
2) plan changes with pure functions (``planning``)
3) apply the changes and commit (skipped on dry runs)
"""

from __future__ import annotations

from .plan import Change, ChangeAction, ChangeTarget, ReconciliationResult
from .planning import plan_layout, plan_prune, plan_sync, plan_update
from .reconciler import Reconciler

__all__ = [
    "Change",
    "ChangeAction",
    "ChangeTarget",
    "ReconciliationResult",
    "Reconciler",
    "plan_layout",
    "plan_prune",
    "plan_sync",
    "plan_update",
]
