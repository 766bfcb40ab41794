"""Bearer token extraction and route dependencies."""

from fastapi import Depends, Header

from style_advisor.api.context import AppContext, get_context
from style_advisor.services.users import Session


def bearer_token(authorization: str | None = Header(default=None)) -> str | None:
    """Return the token from an ``Authorization: Bearer <token>`` header, if any."""

    if authorization and authorization.startswith("Bearer "):
        return authorization[len("Bearer "):]
    return None


def resolve_session(
    token: str | None = Depends(bearer_token),
    context: AppContext = Depends(get_context),
) -> Session:
    """
    Map the request's bearer token to its session.

    Raises ``UnauthenticatedError`` (401) when the token is missing or unknown.
    """

    return context.users.resolve_session(token)


TokenDependency = Depends(bearer_token)
SessionDependency = Depends(resolve_session)
ContextDependency = Depends(get_context)
