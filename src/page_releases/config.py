"""Environment-driven configuration for storage and application settings."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv


def _env(key: str, default: str = "") -> str:
    return os.environ.get(key, default)


@dataclass(frozen=True)
class StorageConfig:
    """Snapshot store backend selection and connection details."""

    backend: str = field(default_factory=lambda: _env("STORAGE_BACKEND", "filesystem"))
    releases_dir: str = field(default_factory=lambda: _env("RELEASES_DIR", "releases"))
    connection_string: str = field(default_factory=lambda: _env("AZURE_STORAGE_CONNECTION_STRING"))
    account_url: str = field(default_factory=lambda: _env("AZURE_STORAGE_ACCOUNT_URL"))
    container: str = field(default_factory=lambda: _env("AZURE_STORAGE_CONTAINER", "pages"))
    prefix: str = field(default_factory=lambda: _env("RELEASES_PREFIX", "releases"))
    timeout_seconds: float = field(
        default_factory=lambda: float(_env("STORAGE_TIMEOUT_SECONDS", "10"))
    )


@dataclass(frozen=True)
class AppConfig:
    env: str = field(default_factory=lambda: _env("APP_ENV", "development"))
    log_level: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO"))
    host: str = field(default_factory=lambda: _env("HOST", "127.0.0.1"))
    port: int = field(default_factory=lambda: int(_env("PORT", "8000")))

    @property
    def is_development(self) -> bool:
        return self.env == "development"


@dataclass(frozen=True)
class Settings:
    storage: StorageConfig = field(default_factory=StorageConfig)
    app: AppConfig = field(default_factory=AppConfig)


def load_settings() -> Settings:
    """Load ``.env`` (if present) into the environment and build settings."""
    load_dotenv()
    return Settings()
