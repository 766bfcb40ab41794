"""Application configuration loaded from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[2]

DEFAULT_CORS_ORIGINS = ("http://localhost:5173", "http://localhost:3000")


def _load_env_file(path: str = ".env") -> None:
    """Populate os.environ from the provided .env file if it exists."""

    env_path = Path(path)
    if not env_path.exists():
        return

    for line in env_path.read_text(encoding="utf-8").splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#") or "=" not in stripped:
            continue
        key, value = stripped.split("=", 1)
        os.environ.setdefault(key.strip(), value.strip())


def _split_csv(raw: str) -> tuple[str, ...]:
    return tuple(part.strip() for part in raw.split(",") if part.strip())


@dataclass(frozen=True, slots=True)
class Settings:
    """Centralised project settings based on OS environment variables."""

    environment: str = "dev"
    log_level: str = "INFO"

    data_root: str = str(PROJECT_ROOT / "data")
    assets_root: str = str(PROJECT_ROOT / "assets")
    images_url_prefix: str = "/api/images"

    outfits_per_request: int = 5
    history_limit: int = 50
    history_query_cap: int = 100

    cors_origins: tuple[str, ...] = field(default=DEFAULT_CORS_ORIGINS)
    host: str = "0.0.0.0"
    port: int = 5000


def _build_settings() -> Settings:
    _load_env_file()

    return Settings(
        environment=os.getenv("ENVIRONMENT", "dev"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        data_root=os.getenv("CATALOG_ROOT", str(PROJECT_ROOT / "data")),
        assets_root=os.getenv("ASSETS_ROOT", str(PROJECT_ROOT / "assets")),
        images_url_prefix=os.getenv("IMAGES_URL_PREFIX", "/api/images"),
        outfits_per_request=int(os.getenv("OUTFITS_PER_REQUEST", "5")),
        history_limit=int(os.getenv("HISTORY_LIMIT", "50")),
        history_query_cap=int(os.getenv("HISTORY_QUERY_CAP", "100")),
        cors_origins=_split_csv(os.getenv("CORS_ORIGINS", ",".join(DEFAULT_CORS_ORIGINS))),
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "5000")),
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance to avoid re-reading configuration."""

    return _build_settings()
