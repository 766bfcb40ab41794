"""Builds outfit suggestions from the static catalog."""

from __future__ import annotations

import logging
import uuid
from typing import Any

from style_advisor.metrics.prometheus_exporter import outfit_generation_total
from style_advisor.services.catalog import CatalogSource, resolve_image_url
from style_advisor.services.errors import InvalidInputError, NotFoundError
from style_advisor.services.history import HistoryStore, Outfit

logger = logging.getLogger(__name__)


def _is_well_formed(definition: Any) -> bool:
    """Return ``True`` for an object whose ``items`` (if any) is a list of objects."""

    if not isinstance(definition, dict):
        return False
    items = definition.get("items")
    if items is None:
        return True
    return isinstance(items, list) and all(isinstance(item, dict) for item in items)


class OutfitGenerator:
    """Turns catalog definitions into outfit instances and records them."""

    def __init__(
        self,
        catalog: CatalogSource,
        history: HistoryStore,
        *,
        batch_size: int = 5,
        images_url_prefix: str = "/api/images",
    ) -> None:
        self._catalog = catalog
        self._history = history
        self._batch_size = batch_size
        self._images_url_prefix = images_url_prefix

    def _build_outfit(
        self,
        definition: dict[str, Any],
        index: int,
        gender: str,
        occasion: str,
    ) -> Outfit:
        gender_key = gender.lower()
        occasion_key = occasion.lower()
        items = [
            {
                **item,
                "imageUrl": resolve_image_url(
                    gender_key,
                    occasion_key,
                    str(item.get("category", "")),
                    str(item.get("file", "")),
                    prefix=self._images_url_prefix,
                ),
            }
            for item in definition.get("items") or []
        ]
        return {
            "id": str(uuid.uuid4()),
            "index": index,
            "name": definition.get("name") or f"Outfit {index}",
            "gender": gender,
            "occasion": occasion,
            "tags": definition.get("tags") or [],
            "items": items,
        }

    def generate(
        self,
        gender: str | None,
        occasion: str | None,
        user_id: str | None = None,
    ) -> list[Outfit]:
        """
        Return the first catalog outfits for ``gender``/``occasion``.

        The order follows the catalog file, so repeated calls yield the same
        outfits apart from ids. When ``user_id`` is set the batch is added to
        that user's history.
        """

        if not gender or not occasion:
            raise InvalidInputError("gender and occasion are required.")

        data = self._catalog.load(gender.lower())
        if data is None:
            raise NotFoundError(f"No outfit data found for gender: {gender}")

        definitions = data.get(occasion.lower())
        if not isinstance(definitions, list):
            raise NotFoundError(f"No outfits found for occasion: {occasion}")

        selected = definitions[: self._batch_size]
        if not all(_is_well_formed(definition) for definition in selected):
            logger.warning("Malformed catalog entries for %s/%s", gender.lower(), occasion.lower())
            raise NotFoundError(f"No outfits found for occasion: {occasion}")

        outfits = [
            self._build_outfit(definition, position, gender, occasion)
            for position, definition in enumerate(selected, start=1)
        ]
        outfit_generation_total.labels(gender=gender.lower(), occasion=occasion.lower()).inc()

        if user_id:
            self._history.record_generated(user_id, outfits)
            logger.info("Recorded %d generated outfits for user %s", len(outfits), user_id)
        return outfits
