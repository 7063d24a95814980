"""Pydantic models for the TOML page type declarations file."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from pagefactory.domain.model import BASE_PART_CLASS


class DeclarationBaseModel(BaseModel):
    model_config = ConfigDict(extra="forbid")


class PartEntry(DeclarationBaseModel):
    name: str
    part_class: str = BASE_PART_CLASS


class PageTypeEntry(DeclarationBaseModel):
    parts: list[str | PartEntry] = Field(default_factory=list["str | PartEntry"])
    field_names: list[str] = Field(default_factory=list[str], alias="fields")
    layout: str | None = None


class DeclarationsDocument(DeclarationBaseModel):
    part_classes: list[str] = Field(default_factory=list[str])
    page_types: dict[str, PageTypeEntry] = Field(default_factory=dict[str, PageTypeEntry])
