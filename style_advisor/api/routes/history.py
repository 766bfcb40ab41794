"""Routes for browsing and pruning a user's outfit history."""

from typing import Any

from fastapi import APIRouter, Query

from style_advisor.api.auth import ContextDependency
from style_advisor.api.context import AppContext

router = APIRouter(prefix="/history", tags=["history"])


@router.get("/{user_id}")
async def get_history(
    user_id: str,
    type: str | None = Query(default=None),
    occasion: str | None = Query(default=None),
    limit: int | None = Query(default=None),
    context: AppContext = ContextDependency,
) -> dict[str, Any]:
    """Return saved and generated outfits, newest first."""

    outfits = context.history.list(user_id, type=type, occasion=occasion, limit=limit)
    return {"userId": user_id, "count": len(outfits), "outfits": outfits}


@router.delete("/{user_id}/{outfit_id}")
async def delete_history_entry(
    user_id: str,
    outfit_id: str,
    context: AppContext = ContextDependency,
) -> dict[str, str]:
    context.history.remove(user_id, outfit_id)
    return {"message": "Outfit removed from history."}


@router.delete("/{user_id}")
async def clear_history(user_id: str, context: AppContext = ContextDependency) -> dict[str, str]:
    context.history.clear(user_id)
    return {"message": "History cleared."}
