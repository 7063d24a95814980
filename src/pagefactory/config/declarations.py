"""Declarations file configuration helpers."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .env import require_env_var

DECLARATIONS_ENV_VAR: Final[str] = "PAGEFACTORY_DECLARATIONS"


@dataclass(frozen=True, slots=True)
class DeclarationsConfig:
    path: Path

    def resolve_path(self) -> Path:
        return self.path.expanduser().resolve()


def get_declarations_config(path: str | Path | None = None) -> DeclarationsConfig:
    """Return the declarations file location, preferring an explicit ``path``."""

    if path is not None:
        return DeclarationsConfig(path=Path(path))
    env_path = require_env_var(DECLARATIONS_ENV_VAR, hint="or pass --declarations")
    return DeclarationsConfig(path=Path(env_path))
