"""End-to-end reconciliation against an in-memory SQLite association store."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from pagefactory.domain.errors import PageTypeNotFoundError
from pagefactory.domain.model import BASE_PART_CLASS, Layout, PageField, PagePart, PageType
from pagefactory.domain.reconciliation import Reconciler
from tests.helpers.associations import SUB_PAGE_PART, make_registry, managed_page

if TYPE_CHECKING:
    from collections.abc import Callable

    from pagefactory.adapters.sqlalchemy.unit_of_work import SqlAlchemyReconciliationUnitOfWork

    UnitOfWorkFactory = Callable[[], SqlAlchemyReconciliationUnitOfWork]


def _seed(factory: UnitOfWorkFactory, *rows: object) -> None:
    with factory() as uow:
        uow.session.add_all(rows)
        uow.commit()


def _parts(factory: UnitOfWorkFactory, owner: str) -> list[PagePart]:
    with factory() as uow:
        return list(uow.repositories.parts.list_for_owner(owner))


def _fields(factory: UnitOfWorkFactory, owner: str) -> list[PageField]:
    with factory() as uow:
        return list(uow.repositories.fields.list_for_owner(owner))


def _layout_name(factory: UnitOfWorkFactory, owner: str) -> str | None:
    with factory() as uow:
        layout = uow.repositories.layouts.get_assignment(owner)
        return layout.name if layout is not None else None


@pytest.fixture
def reconciler(sqlite_unit_of_work: UnitOfWorkFactory) -> Reconciler:
    return Reconciler(registry=make_registry(), unit_of_work_factory=sqlite_unit_of_work)


def test_prune_then_update_parts_scenario(
    sqlite_unit_of_work: UnitOfWorkFactory,
    reconciler: Reconciler,
) -> None:
    existing = PagePart(owner="ManagedPage", name="existing")
    old = PagePart(owner="ManagedPage", name="old")
    _seed(sqlite_unit_of_work, existing, old)

    reconciler.prune_parts()
    assert [part.id for part in _parts(sqlite_unit_of_work, "ManagedPage")] == [existing.id]

    reconciler.update_parts()
    parts = _parts(sqlite_unit_of_work, "ManagedPage")
    assert sorted(part.name for part in parts) == ["existing", "new"]
    assert existing.id in {part.id for part in parts}


def test_prune_parts_operates_on_a_single_page_type(
    sqlite_unit_of_work: UnitOfWorkFactory,
    reconciler: Reconciler,
) -> None:
    plain_old = PagePart(owner="PlainPage", name="old")
    managed_old = PagePart(owner="ManagedPage", name="old")
    _seed(sqlite_unit_of_work, plain_old, managed_old)

    reconciler.prune_parts("ManagedPage")

    assert [part.id for part in _parts(sqlite_unit_of_work, "PlainPage")] == [plain_old.id]
    assert _parts(sqlite_unit_of_work, "ManagedPage") == []


def test_sync_parts_replaces_mismatched_part(
    sqlite_unit_of_work: UnitOfWorkFactory,
    reconciler: Reconciler,
) -> None:
    mistyped = PagePart(owner="ManagedPage", name="new", part_class=SUB_PAGE_PART)
    _seed(sqlite_unit_of_work, mistyped)

    reconciler.sync_parts()

    parts = _parts(sqlite_unit_of_work, "ManagedPage")
    assert mistyped.id not in {part.id for part in parts}
    assert [(part.name, part.part_class) for part in parts] == [("new", BASE_PART_CLASS)]


def test_sync_parts_leaves_synced_parts_alone(
    sqlite_unit_of_work: UnitOfWorkFactory,
    reconciler: Reconciler,
) -> None:
    synced = PagePart(owner="ManagedPage", name="new", content="kept")
    _seed(sqlite_unit_of_work, synced)

    reconciler.sync_parts()

    parts = _parts(sqlite_unit_of_work, "ManagedPage")
    assert [(part.id, part.content) for part in parts] == [(synced.id, "kept")]


def test_sync_parts_operates_on_a_single_page_type(
    sqlite_unit_of_work: UnitOfWorkFactory,
) -> None:
    registry = make_registry(managed_page(), PageType(name="PlainPage", parts=managed_page().parts))
    reconciler = Reconciler(registry=registry, unit_of_work_factory=sqlite_unit_of_work)
    managed = PagePart(owner="ManagedPage", name="new", part_class=SUB_PAGE_PART)
    plain = PagePart(owner="PlainPage", name="new", part_class=SUB_PAGE_PART)
    _seed(sqlite_unit_of_work, managed, plain)

    reconciler.sync_parts("ManagedPage")

    assert [part.id for part in _parts(sqlite_unit_of_work, "PlainPage")] == [plain.id]
    assert [part.part_class for part in _parts(sqlite_unit_of_work, "ManagedPage")] == [
        BASE_PART_CLASS
    ]


def test_update_parts_does_not_duplicate_existing_parts(
    sqlite_unit_of_work: UnitOfWorkFactory,
    reconciler: Reconciler,
) -> None:
    new = PagePart(owner="ManagedPage", name="new", part_class=SUB_PAGE_PART)
    existing = PagePart(owner="ManagedPage", name="existing")
    _seed(sqlite_unit_of_work, new, existing)

    reconciler.update_parts()
    reconciler.update_parts()

    parts = _parts(sqlite_unit_of_work, "ManagedPage")
    assert {part.id for part in parts} == {new.id, existing.id}


def test_update_parts_operates_on_a_single_page_type(
    sqlite_unit_of_work: UnitOfWorkFactory,
) -> None:
    registry = make_registry(managed_page(), PageType(name="PlainPage", parts=managed_page().parts))
    reconciler = Reconciler(registry=registry, unit_of_work_factory=sqlite_unit_of_work)
    plain_existing = PagePart(owner="PlainPage", name="existing")
    _seed(sqlite_unit_of_work, plain_existing)

    reconciler.update_parts("ManagedPage")

    assert [part.id for part in _parts(sqlite_unit_of_work, "PlainPage")] == [plain_existing.id]


def test_prune_and_update_fields(
    sqlite_unit_of_work: UnitOfWorkFactory,
    reconciler: Reconciler,
) -> None:
    old = PageField(owner="ManagedPage", name="old")
    plain_old = PageField(owner="PlainPage", name="old")
    _seed(sqlite_unit_of_work, old, plain_old)

    reconciler.prune_fields("ManagedPage")
    reconciler.update_fields()
    reconciler.update_fields()

    assert [field.name for field in _fields(sqlite_unit_of_work, "ManagedPage")] == ["field"]
    assert [field.id for field in _fields(sqlite_unit_of_work, "PlainPage")] == [plain_old.id]


def test_sync_layouts_changes_layout_to_match_declaration(
    sqlite_unit_of_work: UnitOfWorkFactory,
    reconciler: Reconciler,
) -> None:
    one = Layout(name="Layout One")
    two = Layout(name="Layout Two")
    _seed(sqlite_unit_of_work, one, two)
    with sqlite_unit_of_work() as uow:
        layouts = uow.repositories.layouts
        two_loaded = layouts.find_by_name("Layout Two")
        layouts.set_assignment("ManagedPage", two_loaded)
        layouts.set_assignment("PlainPage", two_loaded)
        uow.commit()

    reconciler.sync_layouts()

    assert _layout_name(sqlite_unit_of_work, "ManagedPage") == "Layout One"
    assert _layout_name(sqlite_unit_of_work, "PlainPage") == "Layout Two"


def test_sync_layouts_operates_on_a_single_page_type(
    sqlite_unit_of_work: UnitOfWorkFactory,
) -> None:
    registry = make_registry(
        managed_page(layout="Layout One"),
        PageType(name="OtherPage", layout="Layout One"),
    )
    reconciler = Reconciler(registry=registry, unit_of_work_factory=sqlite_unit_of_work)
    _seed(sqlite_unit_of_work, Layout(name="Layout One"), Layout(name="Layout Two"))
    with sqlite_unit_of_work() as uow:
        layouts = uow.repositories.layouts
        layouts.set_assignment("OtherPage", layouts.find_by_name("Layout Two"))
        uow.commit()

    reconciler.sync_layouts("ManagedPage")

    assert _layout_name(sqlite_unit_of_work, "ManagedPage") == "Layout One"
    assert _layout_name(sqlite_unit_of_work, "OtherPage") == "Layout Two"


def test_reconcile_is_idempotent(
    sqlite_unit_of_work: UnitOfWorkFactory,
    reconciler: Reconciler,
) -> None:
    _seed(
        sqlite_unit_of_work,
        Layout(name="Layout One"),
        PagePart(owner="ManagedPage", name="existing", part_class=SUB_PAGE_PART),
        PagePart(owner="ManagedPage", name="old"),
        PageField(owner="ManagedPage", name="old"),
    )

    first = reconciler.reconcile()
    second = reconciler.reconcile()

    assert first.mutations > 0
    assert second.mutations == 0
    assert sorted(
        (part.name, part.part_class) for part in _parts(sqlite_unit_of_work, "ManagedPage")
    ) == [("existing", BASE_PART_CLASS), ("new", BASE_PART_CLASS)]


def test_unknown_scope_is_rejected(reconciler: Reconciler) -> None:
    with pytest.raises(PageTypeNotFoundError):
        reconciler.update_parts("OtherPage")
