"""Bearer-token authentication dependency for FastAPI."""
from functools import lru_cache
from typing import Optional
import logging

from fastapi import Depends, Request

from app.errors import AuthError
from app.services.security import TokenService

logger = logging.getLogger(__name__)

MISSING_TOKEN = "Access denied. No token provided."


@lru_cache
def get_token_service() -> TokenService:
    """Dependency for the shared TokenService (overridden in tests)."""
    return TokenService()


def extract_bearer_token(auth_header: Optional[str]) -> Optional[str]:
    """Return the credential part of an ``Authorization: Bearer <token>`` header."""
    if not auth_header:
        return None
    parts = auth_header.split(" ")
    if len(parts) < 2 or not parts[1]:
        return None
    return parts[1]


async def get_current_user_id(
    request: Request,
    tokens: TokenService = Depends(get_token_service),
) -> int:
    """
    Validate the bearer token and return the caller's user id.

    Raises:
        AuthError: If the token is missing, invalid or expired
    """
    token = extract_bearer_token(request.headers.get("authorization"))
    if token is None:
        raise AuthError(MISSING_TOKEN)
    return tokens.verify(token)
