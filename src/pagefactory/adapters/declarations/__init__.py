"""Declarations file adapter: TOML + pydantic validation -> page type registry."""

from __future__ import annotations

from .loader import load_registry, parse_declarations
from .schema import DeclarationsDocument, PageTypeEntry, PartEntry
from .translator import translate_page_type

__all__ = [
    "DeclarationsDocument",
    "PageTypeEntry",
    "PartEntry",
    "load_registry",
    "parse_declarations",
    "translate_page_type",
]
