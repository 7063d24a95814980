"""Load a page type registry from a TOML declarations file."""

from __future__ import annotations

import logging
import tomllib
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from pagefactory.config.errors import DeclarationFileError
from pagefactory.domain.errors import PageFactoryError
from pagefactory.domain.registry import PageTypeRegistry

from .schema import DeclarationsDocument
from .translator import translate_page_type

if TYPE_CHECKING:
    from pathlib import Path

log = logging.getLogger(__name__)


def parse_declarations(payload: dict[str, Any]) -> PageTypeRegistry:
    """Validate a decoded declarations payload and build a registry from it."""

    try:
        document = DeclarationsDocument.model_validate(payload)
    except ValidationError as exc:
        raise DeclarationFileError(f"Invalid declarations: {exc}") from exc

    try:
        registry = PageTypeRegistry(part_classes=document.part_classes)
        for name, entry in document.page_types.items():
            registry.register(translate_page_type(name, entry))
    except PageFactoryError as exc:
        raise DeclarationFileError(f"Invalid declarations: {exc}") from exc
    return registry


def load_registry(path: Path) -> PageTypeRegistry:
    """Read ``path`` (TOML) and return the populated registry."""

    try:
        with path.open("rb") as handle:
            payload = tomllib.load(handle)
    except OSError as exc:
        raise DeclarationFileError(f"Cannot read declarations file {path}: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise DeclarationFileError(f"Malformed declarations file {path}: {exc}") from exc

    registry = parse_declarations(payload)
    log.info("Loaded %s page type(s) from %s", len(registry), path)
    return registry
