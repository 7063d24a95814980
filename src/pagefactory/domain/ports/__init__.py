"""Domain port definitions for adapters."""

from __future__ import annotations

from .persistence import FieldRepository, LayoutRepository, PartRepository
from .unit_of_work import (
    AssociationRepositories,
    ReconciliationUnitOfWork,
    RepositoryCollection,
    UnitOfWork,
)

__all__ = [
    "AssociationRepositories",
    "FieldRepository",
    "LayoutRepository",
    "PartRepository",
    "ReconciliationUnitOfWork",
    "RepositoryCollection",
    "UnitOfWork",
]
