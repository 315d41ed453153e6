"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Before anything is read, an optional ``.env``
file in the current working directory is loaded with ``python-dotenv``;
variables already present in the environment take precedence over the
file.  Defaults are provided for all fields.
"""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

STORAGE_MEMORY = "memory"
STORAGE_DATABASE = "database"

_TRUTHY = {"1", "true", "yes", "on"}


def _env(name: str, default: str) -> str:
    return os.getenv(name, default)


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in _TRUTHY


def _env_int(name: str, default: str) -> int:
    return int(os.getenv(name, default))


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: _env("PROJECT_NAME", "Kasir API"))
    api_version: str = field(default_factory=lambda: _env("API_VERSION", "1.0.0"))
    log_level: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO"))
    log_file: str = field(default_factory=lambda: _env("LOG_FILE", ""))

    host: str = field(default_factory=lambda: _env("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: _env_int("PORT", "8080"))

    # Either ``memory`` (seeded in-process list) or ``database``.
    storage_backend: str = field(
        default_factory=lambda: _env("STORAGE_BACKEND", STORAGE_MEMORY).strip().lower()
    )

    # SQLite file path or ``sqlite:///`` URL.  Relative paths are
    # resolved against the current working directory by the ``db``
    # module.
    db_conn: str = field(default_factory=lambda: _env("DB_CONN", ""))

    # When true, a database that cannot be initialised aborts startup.
    # Otherwise the product routes answer 503 until the process is
    # restarted with a working database.
    db_required: bool = field(default_factory=lambda: _env_bool("DB_REQUIRED"))

    @property
    def bind_address(self) -> str:
        return f"{self.host}:{self.port}"


def load_settings(env_file: str = ".env") -> Settings:
    """Load ``env_file`` if it exists and build a fresh ``Settings``."""
    if os.path.isfile(env_file):
        load_dotenv(env_file, override=False)
    return Settings()


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Field defaults are
# computed at instantiation time, so tests may build their own
# ``Settings`` after patching the environment.
settings = load_settings()
