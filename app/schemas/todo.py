"""Todo schemas. The wire format is camelCase."""
from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from datetime import datetime
from typing import Optional


class CamelModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class TodoCreate(CamelModel):
    """Schema for creating a todo. An absent or blank title is rejected by
    TodoService with "Title is required"."""
    title: Optional[str] = None
    description: Optional[str] = None


class TodoUpdate(CamelModel):
    """Schema for a partial update; only fields present in the body are applied."""
    title: Optional[str] = None
    description: Optional[str] = None
    is_completed: Optional[bool] = None


class TodoResponse(CamelModel):
    """Schema for todo API responses."""
    id: int
    title: str
    description: Optional[str]
    is_completed: bool
    user_id: int
    created_at: datetime
    updated_at: datetime
