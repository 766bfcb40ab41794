"""Per-user outfit history kept in process memory."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any, Iterable

from style_advisor.services.errors import NotFoundError

Outfit = dict[str, Any]

GENERATED = "generated"
CUSTOM = "custom"


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class HistoryStore:
    """Newest-first history per user plus an uncapped list of custom saves."""

    def __init__(self, limit: int = 50, query_cap: int = 100) -> None:
        self._limit = limit
        self._query_cap = query_cap
        self._history: dict[str, list[Outfit]] = {}
        self._custom: dict[str, list[Outfit]] = {}

    def _prepend(self, user_id: str, entry: Outfit) -> None:
        history = self._history.setdefault(user_id, [])
        history.insert(0, entry)

    def _truncate(self, user_id: str) -> None:
        self._history[user_id] = self._history[user_id][: self._limit]

    def record_generated(self, user_id: str, outfits: Iterable[Outfit]) -> None:
        """Prepend each outfit in input order, then keep the most recent entries."""

        self._history.setdefault(user_id, [])
        for outfit in outfits:
            self._prepend(user_id, {**outfit, "type": GENERATED, "savedAt": _now()})
        self._truncate(user_id)

    def record_custom(self, user_id: str, outfit: Outfit) -> Outfit:
        saved = {**outfit, "id": str(uuid.uuid4()), "type": CUSTOM, "savedAt": _now()}
        self._prepend(user_id, saved)
        self._truncate(user_id)
        self._custom.setdefault(user_id, []).append(saved)
        return saved

    def list(
        self,
        user_id: str,
        type: str | None = None,
        occasion: str | None = None,
        limit: int | None = None,
    ) -> list[Outfit]:
        """Return history filtered by type and occasion, newest first."""

        outfits = list(self._history.get(user_id, []))
        if type:
            outfits = [outfit for outfit in outfits if outfit.get("type") == type]
        if occasion:
            wanted = occasion.lower()
            outfits = [
                outfit
                for outfit in outfits
                if isinstance(outfit.get("occasion"), str) and outfit["occasion"].lower() == wanted
            ]
        if limit is not None:
            outfits = outfits[: max(0, min(limit, self._query_cap))]
        return outfits

    def remove(self, user_id: str, outfit_id: str) -> None:
        history = self._history.get(user_id)
        if history is None:
            raise NotFoundError("No history found for this user.")

        for position, outfit in enumerate(history):
            if outfit.get("id") == outfit_id:
                del history[position]
                return
        raise NotFoundError("Outfit not found in history.")

    def clear(self, user_id: str) -> None:
        self._history[user_id] = []

    def custom_outfits(self, user_id: str) -> list[Outfit]:
        return list(self._custom.get(user_id, []))
