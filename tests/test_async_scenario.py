"""Async walk-through of a user session against the ASGI app."""

from __future__ import annotations

import httpx
import pytest

from style_advisor.api.main import create_app
from style_advisor.config.settings import Settings


@pytest.mark.asyncio
async def test_register_generate_and_prune_history(settings: Settings) -> None:
    transport = httpx.ASGITransport(app=create_app(settings))
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        account = (
            await client.post("/api/auth/register", json={"username": "carol", "password": "pw"})
        ).json()
        user_id = account["userId"]

        generated = await client.post(
            "/api/generate-outfits",
            json={"gender": "male", "occasion": "party", "userId": user_id},
        )
        first_id = generated.json()["outfits"][0]["id"]

        removed = await client.delete(f"/api/history/{user_id}/{first_id}")
        history = (await client.get(f"/api/history/{user_id}")).json()

    assert removed.status_code == 200
    assert history["count"] == 1
    assert history["outfits"][0]["name"] == "Dance Floor"
