"""Outfit generation and custom outfit routes."""

from typing import Any

from fastapi import APIRouter, status

from style_advisor.api.auth import ContextDependency
from style_advisor.api.context import AppContext
from style_advisor.api.schemas import CustomSaveRequest, GenerateOutfitsRequest
from style_advisor.metrics.prometheus_exporter import custom_outfit_saves_total
from style_advisor.services.errors import InvalidInputError

router = APIRouter(tags=["outfits"])


@router.post("/generate-outfits")
async def generate_outfits(
    payload: GenerateOutfitsRequest,
    context: AppContext = ContextDependency,
) -> dict[str, Any]:
    """Return predefined outfits for the requested gender and occasion."""

    outfits = context.generator.generate(payload.gender, payload.occasion, payload.user_id)
    return {"outfits": outfits}


@router.post("/custom-save", status_code=status.HTTP_201_CREATED)
async def custom_save(
    payload: CustomSaveRequest,
    context: AppContext = ContextDependency,
) -> dict[str, Any]:
    if not payload.user_id or payload.outfit is None:
        raise InvalidInputError("userId and outfit are required.")

    saved = context.history.record_custom(payload.user_id, payload.outfit)
    custom_outfit_saves_total.inc()
    return {"message": "Outfit saved.", "outfit": saved}


@router.get("/custom-saves/{user_id}")
async def list_custom_saves(user_id: str, context: AppContext = ContextDependency) -> dict[str, Any]:
    outfits = context.history.custom_outfits(user_id)
    return {"userId": user_id, "count": len(outfits), "outfits": outfits}
