"""Application configuration helpers."""

from __future__ import annotations

from .declarations import DECLARATIONS_ENV_VAR, DeclarationsConfig, get_declarations_config
from .env import require_env_var
from .errors import ConfigurationError, DeclarationFileError, MissingConfigurationError
from .logging import configure_logging
from .storage import DatabaseConfig, StorageConfig, get_database_config, get_storage_config

__all__ = [
    "DECLARATIONS_ENV_VAR",
    "ConfigurationError",
    "DatabaseConfig",
    "DeclarationFileError",
    "DeclarationsConfig",
    "MissingConfigurationError",
    "StorageConfig",
    "configure_logging",
    "get_database_config",
    "get_declarations_config",
    "get_storage_config",
    "require_env_var",
]
