"""Account registration, login and profile routes."""

from typing import Any

from fastapi import APIRouter, Body, status

from style_advisor.api.auth import ContextDependency, SessionDependency, TokenDependency
from style_advisor.api.context import AppContext
from style_advisor.api.schemas import LoginRequest, RegisterRequest
from style_advisor.services.users import Session

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(payload: RegisterRequest, context: AppContext = ContextDependency) -> dict[str, Any]:
    result = context.users.register(payload.username, payload.password, payload.profile)
    return {"message": "Account created successfully.", **result}


@router.post("/login")
async def login(payload: LoginRequest, context: AppContext = ContextDependency) -> dict[str, Any]:
    result = context.users.login(payload.username, payload.password)
    return {"message": "Logged in successfully.", **result}


@router.post("/logout")
async def logout(
    token: str | None = TokenDependency,
    context: AppContext = ContextDependency,
) -> dict[str, str]:
    context.users.logout(token)
    return {"message": "Logged out."}


@router.get("/me")
async def me(
    session: Session = SessionDependency,
    context: AppContext = ContextDependency,
) -> dict[str, Any]:
    return context.users.get_current_user(session.token)


@router.put("/profile")
async def update_profile(
    partial: dict[str, Any] | None = Body(default=None),
    session: Session = SessionDependency,
    context: AppContext = ContextDependency,
) -> dict[str, Any]:
    """Merge height, weight, skin tone and similar keys into the profile."""

    profile = context.users.update_profile(session.token, partial or {})
    return {"message": "Profile updated.", "profile": profile}
