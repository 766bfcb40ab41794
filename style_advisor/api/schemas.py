"""Request bodies accepted by the HTTP API."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class RegisterRequest(BaseModel):
    username: str | None = None
    password: str | None = None
    profile: dict[str, Any] | None = None


class LoginRequest(BaseModel):
    username: str | None = None
    password: str | None = None


class GenerateOutfitsRequest(BaseModel):
    """Catalog selection, optionally attributed to a user's history."""

    model_config = ConfigDict(populate_by_name=True)

    gender: str | None = None
    occasion: str | None = None
    user_id: str | None = Field(default=None, alias="userId")


class CustomSaveRequest(BaseModel):
    """User-composed outfit; its fields are stored as submitted."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: str | None = Field(default=None, alias="userId")
    outfit: dict[str, Any] | None = None
