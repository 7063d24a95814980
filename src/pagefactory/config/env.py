"""Environment variable loaders for configuration."""

from __future__ import annotations

import os

from .errors import MissingConfigurationError


def require_env_var(name: str, *, hint: str | None = None) -> str:
    """Return ``name`` from the environment, stripped; blank counts as missing."""

    value = os.getenv(name, "").strip()
    if not value:
        suffix = f" ({hint})" if hint else ""
        raise MissingConfigurationError(f"Missing configuration for: {name}{suffix}")
    return value
