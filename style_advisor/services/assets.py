"""Discovery of outfit images laid out as gender/occasion/category/file."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any

from style_advisor.services.catalog import is_slug, resolve_image_url

IMAGE_PATTERN = re.compile(r"\.(png|jpg|jpeg|svg|webp)$", re.IGNORECASE)


def _subdirs(path: Path) -> list[Path]:
    return sorted((child for child in path.iterdir() if child.is_dir()), key=lambda p: p.name)


class AssetLibrary:
    """Lists image assets available on disk."""

    def __init__(self, root: Path, url_prefix: str = "/api/images") -> None:
        self._root = root
        self._url_prefix = url_prefix

    @property
    def root(self) -> Path:
        return self._root

    def categories(self, gender: str, occasion: str) -> dict[str, list[dict[str, str]]] | None:
        """Return ``category -> [{filename, url}]`` or ``None`` if the folder is missing."""

        gender_key = gender.lower()
        occasion_key = occasion.lower()
        if not (is_slug(gender_key) and is_slug(occasion_key)):
            return None

        occasion_path = self._root / gender_key / occasion_key
        if not occasion_path.is_dir():
            return None

        result: dict[str, list[dict[str, str]]] = {}
        for category_path in _subdirs(occasion_path):
            files = sorted(
                entry.name
                for entry in category_path.iterdir()
                if entry.is_file() and IMAGE_PATTERN.search(entry.name)
            )
            result[category_path.name] = [
                {
                    "filename": name,
                    "url": resolve_image_url(
                        gender_key,
                        occasion_key,
                        category_path.name,
                        name,
                        prefix=self._url_prefix,
                    ),
                }
                for name in files
            ]
        return result

    def catalog(self) -> list[dict[str, Any]]:
        """Return every gender folder with the occasions found beneath it."""

        if not self._root.is_dir():
            return []
        return [
            {"gender": gender.name, "occasions": [occasion.name for occasion in _subdirs(gender)]}
            for gender in _subdirs(self._root)
        ]
