"""Shared stores attached to the application and handed to routes."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from fastapi import Request

from style_advisor.config.settings import Settings
from style_advisor.services.assets import AssetLibrary
from style_advisor.services.catalog import CatalogSource, JsonCatalogSource
from style_advisor.services.history import HistoryStore
from style_advisor.services.outfit import OutfitGenerator
from style_advisor.services.users import UserStore


@dataclass(slots=True)
class AppContext:
    """Container for objects shared across route handlers."""

    settings: Settings
    users: UserStore
    history: HistoryStore
    generator: OutfitGenerator
    assets: AssetLibrary

    @classmethod
    def build(cls, settings: Settings, catalog: CatalogSource | None = None) -> "AppContext":
        """Create empty stores wired according to ``settings``."""

        history = HistoryStore(limit=settings.history_limit, query_cap=settings.history_query_cap)
        generator = OutfitGenerator(
            catalog or JsonCatalogSource(Path(settings.data_root)),
            history,
            batch_size=settings.outfits_per_request,
            images_url_prefix=settings.images_url_prefix,
        )
        return cls(
            settings=settings,
            users=UserStore(),
            history=history,
            generator=generator,
            assets=AssetLibrary(Path(settings.assets_root), settings.images_url_prefix),
        )


def get_context(request: Request) -> AppContext:
    return request.app.state.context
