"""Client configuration loaded from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from urllib.parse import quote

_TRUTHY = ("1", "true", "yes", "on")


def _env(key: str, default: str = "") -> str:
    return os.environ.get(key, default)


def _env_bool(key: str, default: bool) -> bool:
    raw = os.environ.get(key)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


def _env_float(key: str, default: float) -> float:
    raw = os.environ.get(key)
    if not raw:
        return default
    return float(raw)


@dataclass(frozen=True)
class CouchConfig:
    """Server endpoint and target database.

    ``url`` may embed ``user:pass@`` credentials; httpx sends them as basic auth.
    """

    url: str = field(default_factory=lambda: _env("COUCHDB_URL", "http://127.0.0.1:5984"))
    database: str = field(default_factory=lambda: _env("COUCHDB_DATABASE", "couch"))
    timeout: float = field(default_factory=lambda: _env_float("COUCHDB_TIMEOUT", 30.0))
    detect_error_envelope: bool = field(
        default_factory=lambda: _env_bool("COUCHDB_DETECT_ERROR_ENVELOPE", True)
    )

    @property
    def base_url(self) -> str:
        return self.url.rstrip("/")

    @property
    def database_url(self) -> str:
        return f"{self.base_url}/{self.database}"

    def document_url(self, doc_id: str) -> str:
        """Return the resource URL of a document; ``/`` survives for ``_design/`` ids."""
        return f"{self.database_url}/{quote(doc_id, safe='/')}"


@dataclass(frozen=True)
class AppConfig:
    env: str = field(default_factory=lambda: _env("APP_ENV", "development"))
    log_level: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO"))

    @property
    def is_development(self) -> bool:
        return self.env == "development"


@dataclass(frozen=True)
class Settings:
    """Top-level settings aggregating all sub-configs."""

    couch: CouchConfig = field(default_factory=CouchConfig)
    app: AppConfig = field(default_factory=AppConfig)


def load_settings() -> Settings:
    """Build settings from the current environment."""
    return Settings()
