"""User model for SQLModel."""
from sqlmodel import SQLModel, Field
from sqlalchemy import Column
from datetime import datetime

from app.models.types import UTCTimestamp
from app.utils.clock import utcnow


class User(SQLModel, table=True):
    """User entity for authentication and todo ownership."""

    id: int | None = Field(default=None, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=255)
    created_at: datetime = Field(
        default_factory=utcnow, sa_column=Column(UTCTimestamp, nullable=False)
    )
