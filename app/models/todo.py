"""Todo model for SQLModel."""
from sqlmodel import SQLModel, Field
from sqlalchemy import Column
from datetime import datetime

from app.models.types import UTCTimestamp
from app.utils.clock import utcnow


class Todo(SQLModel, table=True):
    """Todo item owned by exactly one user."""

    id: int | None = Field(default=None, primary_key=True)
    title: str
    description: str | None = Field(default=None)
    is_completed: bool = Field(default=False)
    # Owner id taken from the verified token; no FK so the todo table can live
    # in a separate database from the user table.
    user_id: int = Field(index=True)
    created_at: datetime = Field(
        default_factory=utcnow, sa_column=Column(UTCTimestamp, nullable=False)
    )
    updated_at: datetime = Field(
        default_factory=utcnow, sa_column=Column(UTCTimestamp, nullable=False)
    )
