"""Authentication schemas for the user service."""
from pydantic import BaseModel, field_validator
from typing import Any, Optional


class RegisterRequest(BaseModel):
    """Registration request body. Fields are checked by AuthService so that
    every bad input collapses to the same error message."""
    email: Optional[str] = None
    password: Optional[str] = None


class LoginRequest(BaseModel):
    """Login request body. Non-string fields are treated as absent so that
    AuthService answers them with "Invalid credentials"."""
    email: Optional[str] = None
    password: Optional[str] = None

    @field_validator("email", "password", mode="before")
    @classmethod
    def drop_non_strings(cls, value: Any) -> Optional[str]:
        return value if isinstance(value, str) else None


class MessageResponse(BaseModel):
    """Confirmation returned after registration."""
    message: str


class TokenResponse(BaseModel):
    """Response containing the signed JWT after login."""
    token: str


class ErrorResponse(BaseModel):
    """Body of every error response."""
    error: str
