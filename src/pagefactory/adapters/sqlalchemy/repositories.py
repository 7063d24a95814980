"""Repository implementations backed by SQLAlchemy sessions."""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from sqlalchemy import select

from pagefactory.adapters.sqlalchemy.mappings import (
    layout_table,
    page_field_table,
    page_part_table,
)
from pagefactory.domain.model import Layout, LayoutAssignment, PageField, PagePart

if TYPE_CHECKING:
    from collections.abc import Sequence

    from sqlalchemy.orm import Session


class SqlAlchemyPartRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_owner(self, owner: str) -> Sequence[PagePart]:
        stmt = (
            select(PagePart)
            .where(page_part_table.c.owner == owner)
            .order_by(page_part_table.c.name)
        )
        return self.session.execute(stmt).scalars().all()

    def create(self, owner: str, name: str, part_class: str) -> PagePart:
        record = PagePart(owner=owner, name=name, part_class=part_class)
        self.session.add(record)
        return record

    def delete(self, record: PagePart) -> None:
        self.session.delete(record)


class SqlAlchemyFieldRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_owner(self, owner: str) -> Sequence[PageField]:
        stmt = (
            select(PageField)
            .where(page_field_table.c.owner == owner)
            .order_by(page_field_table.c.name)
        )
        return self.session.execute(stmt).scalars().all()

    def create(self, owner: str, name: str) -> PageField:
        record = PageField(owner=owner, name=name)
        self.session.add(record)
        return record

    def delete(self, record: PageField) -> None:
        self.session.delete(record)


class SqlAlchemyLayoutRepository:
    """Layouts by name and the per page type layout pointer."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, layout: Layout) -> None:
        self.session.add(layout)

    def find_by_name(self, name: str) -> Layout | None:
        stmt = select(Layout).where(layout_table.c.name == name).limit(1)
        return self.session.execute(stmt).scalar_one_or_none()

    def get_assignment(self, owner: str) -> Layout | None:
        assignment = self.session.get(LayoutAssignment, owner)
        if assignment is None:
            return None
        return assignment.layout

    def set_assignment(self, owner: str, layout: Layout | None) -> None:
        assignment = self.session.get(LayoutAssignment, owner)
        if assignment is None:
            self.session.add(LayoutAssignment(owner=owner, layout=layout))
            return
        assignment.layout = layout


if TYPE_CHECKING:
    from pagefactory.domain.ports.persistence import (
        FieldRepository,
        LayoutRepository,
        PartRepository,
    )

    _session_stub = cast("Session", object())
    _part_repo: PartRepository = SqlAlchemyPartRepository(_session_stub)
    _field_repo: FieldRepository = SqlAlchemyFieldRepository(_session_stub)
    _layout_repo: LayoutRepository = SqlAlchemyLayoutRepository(_session_stub)
