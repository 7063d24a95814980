"""SQLAlchemy mapping metadata for the page factory domain model."""

from __future__ import annotations

import logging
import uuid
from functools import cache
from typing import TYPE_CHECKING

from sqlalchemy import Column, ForeignKey, Index, String, Table, Text, UniqueConstraint, Uuid, orm
from sqlalchemy.orm import configure_mappers, relationship

from pagefactory.domain.model import (
    BASE_PART_CLASS,
    Layout,
    LayoutAssignment,
    PageField,
    PagePart,
)

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

log = logging.getLogger(__name__)

UUIDColumnType = Uuid[uuid.UUID]


mapper_registry = orm.registry()
mapper_registry.metadata.naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_label)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_label)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

# Core tables -----------------------------------------------------------------

layout_table = Table(
    "layout",
    mapper_registry.metadata,
    Column("id", UUIDColumnType, primary_key=True, default=uuid.uuid4),
    Column("name", String, nullable=False),
    Column("content", Text, nullable=True),
    UniqueConstraint("name"),
)

# Owner is the page type name; rows are never shared between owners.
page_part_table = Table(
    "page_part",
    mapper_registry.metadata,
    Column("id", UUIDColumnType, primary_key=True, default=uuid.uuid4),
    Column("owner", String, nullable=False),
    Column("name", String, nullable=False),
    Column("part_class", String, nullable=False, default=BASE_PART_CLASS),
    Column("content", Text, nullable=True),
    Index("ix_page_part_owner_name", "owner", "name"),
)

page_field_table = Table(
    "page_field",
    mapper_registry.metadata,
    Column("id", UUIDColumnType, primary_key=True, default=uuid.uuid4),
    Column("owner", String, nullable=False),
    Column("name", String, nullable=False),
    Column("content", Text, nullable=True),
    Index("ix_page_field_owner_name", "owner", "name"),
)

layout_assignment_table = Table(
    "layout_assignment",
    mapper_registry.metadata,
    Column("owner", String, primary_key=True),
    Column(
        "layout_id",
        UUIDColumnType,
        ForeignKey("layout.id", ondelete="SET NULL"),
        nullable=True,
    ),
)


@cache
def start_mappers() -> orm.registry:
    """Configure SQLAlchemy mappers for the domain model."""

    log.info("Starting SQLAlchemy mappers")

    mapper_registry.map_imperatively(Layout, layout_table)
    mapper_registry.map_imperatively(PagePart, page_part_table)
    mapper_registry.map_imperatively(PageField, page_field_table)
    mapper_registry.map_imperatively(
        LayoutAssignment,
        layout_assignment_table,
        properties={
            "layout": relationship(Layout, lazy="joined"),
        },
    )

    configure_mappers()
    return mapper_registry


def create_all_tables(engine: Engine) -> None:
    """Create database tables for the mapped metadata."""

    log.info("Creating all tables")
    mapper_registry.metadata.create_all(engine)
