"""Routes describing the image assets available on disk."""

from typing import Any

from fastapi import APIRouter

from style_advisor.api.auth import ContextDependency
from style_advisor.api.context import AppContext
from style_advisor.services.errors import NotFoundError

router = APIRouter(prefix="/assets", tags=["assets"])


@router.get("/list")
async def list_assets(context: AppContext = ContextDependency) -> dict[str, Any]:
    """Return genders and the occasions discovered beneath each."""

    return {"genders": context.assets.catalog()}


@router.get("/{gender}/{occasion}")
async def occasion_assets(
    gender: str,
    occasion: str,
    context: AppContext = ContextDependency,
) -> dict[str, Any]:
    categories = context.assets.categories(gender, occasion)
    if categories is None:
        raise NotFoundError(f"No assets found for {gender}/{occasion}")
    return {"gender": gender, "occasion": occasion, "categories": categories}
