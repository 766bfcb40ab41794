"""Access to the static outfit catalog files."""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any, Protocol

logger = logging.getLogger(__name__)

SLUG_PATTERN = re.compile(r"^[a-z0-9_-]+$")


def is_slug(value: str) -> bool:
    """Return ``True`` for names safe to use as a single path segment."""

    return bool(SLUG_PATTERN.match(value))


def resolve_image_url(
    gender: str,
    occasion: str,
    category: str,
    file: str,
    prefix: str = "/api/images",
) -> str:
    """Build the public URL of a catalog image."""

    return f"{prefix.rstrip('/')}/{gender}/{occasion}/{category}/{file}"


class CatalogSource(Protocol):
    """Anything able to return the occasion mapping for a gender."""

    def load(self, gender: str) -> dict[str, Any] | None:
        ...


class JsonCatalogSource:
    """Reads ``outfits-<gender>.json`` from disk on every call."""

    def __init__(self, root: Path) -> None:
        self._root = root

    def path_for(self, gender: str) -> Path:
        return self._root / f"outfits-{gender}.json"

    def load(self, gender: str) -> dict[str, Any] | None:
        if not is_slug(gender):
            logger.warning("Rejected catalog lookup for gender %r", gender)
            return None

        path = self.path_for(gender)
        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("Catalog load error for %s: %s", path, exc)
            return None

        if not isinstance(payload, dict):
            logger.warning("Catalog %s is not an object keyed by occasion", path)
            return None
        return payload
