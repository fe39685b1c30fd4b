"""User registration and login router."""
from functools import lru_cache
from typing import Any

from fastapi import APIRouter, Body, Depends, status
from sqlmodel import Session

from app.db.config import get_session
from app.middleware.auth import get_token_service
from app.schemas.auth import (
    ErrorResponse,
    LoginRequest,
    MessageResponse,
    RegisterRequest,
    TokenResponse,
)
from app.services.auth_service import AuthService
from app.services.security import PasswordHasher, TokenService
from app.stores.credential_store import SQLCredentialStore

router = APIRouter(prefix="/users", tags=["Users"])


@lru_cache
def get_password_hasher() -> PasswordHasher:
    """Dependency for the shared PasswordHasher (overridden in tests)."""
    return PasswordHasher()


def get_auth_service(
    session: Session = Depends(get_session),
    hasher: PasswordHasher = Depends(get_password_hasher),
    tokens: TokenService = Depends(get_token_service),
) -> AuthService:
    """Dependency for getting AuthService instance."""
    return AuthService(SQLCredentialStore(session), hasher, tokens)


@router.post(
    "/register",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
def register(request: RegisterRequest, service: AuthService = Depends(get_auth_service)):
    """Register a new user."""
    service.register(request.email, request.password)
    return MessageResponse(message="User registered")


@router.post(
    "/login",
    response_model=TokenResponse,
    responses={401: {"model": ErrorResponse}},
)
def login(
    body: Any = Body(None, description="LoginRequest: {email, password}"),
    service: AuthService = Depends(get_auth_service),
):
    """Exchange email and password for a signed token.

    Any JSON body is accepted here; anything that is not a credentials
    object fails as "Invalid credentials" rather than as a malformed request.
    """
    credentials = LoginRequest.model_validate(body) if isinstance(body, dict) else LoginRequest()
    token = service.login(credentials.email, credentials.password)
    return TokenResponse(token=token)
