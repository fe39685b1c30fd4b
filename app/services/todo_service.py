"""Todo CRUD scoped to the authenticated caller."""
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, Union
import logging
import re

from app.errors import AuthzError, ValidationError
from app.models.todo import Todo
from app.stores.todo_store import TodoStore
from app.utils.clock import utcnow

logger = logging.getLogger(__name__)

TODO_ID_PATTERN = re.compile(r"[0-9]+")
MAX_TODO_ID = 2**63 - 1


def parse_todo_id(raw: Union[str, int]) -> int:
    """Turn a path segment into a todo id or raise ValidationError("Invalid todo ID")."""
    if isinstance(raw, int) and not isinstance(raw, bool):
        todo_id = raw
    elif isinstance(raw, str) and TODO_ID_PATTERN.fullmatch(raw):
        todo_id = int(raw)
    else:
        raise ValidationError("Invalid todo ID")
    if todo_id > MAX_TODO_ID or todo_id < 0:
        raise ValidationError("Invalid todo ID")
    return todo_id


def _clean_title(title: Optional[str]) -> str:
    if title is None or not title.strip():
        raise ValidationError("Title is required")
    return title.strip()


class TodoService:
    """
    CRUD over todos owned by ``caller_id``.

    A todo that does not exist and a todo owned by someone else produce the
    same AuthzError, so callers cannot discover other users' ids.
    """

    def __init__(self, store: TodoStore, now: Callable[[], datetime] = utcnow):
        self.store = store
        self.now = now

    def create(self, caller_id: int, title: Optional[str], description: Optional[str] = None) -> Todo:
        """Create a todo owned by the caller."""
        timestamp = self.now()
        todo = Todo(
            title=_clean_title(title),
            description=description,
            is_completed=False,
            user_id=caller_id,
            created_at=timestamp,
            updated_at=timestamp,
        )
        todo = self.store.add(todo)
        logger.info(f"User {caller_id} created todo {todo.id}")
        return todo

    def list(self, caller_id: int) -> List[Todo]:
        """All of the caller's todos, newest first."""
        return self.store.list_by_owner(caller_id)

    def _owned(self, caller_id: int, raw_id: Union[str, int], denial: str) -> Todo:
        todo_id = parse_todo_id(raw_id)
        todo = self.store.get(todo_id)
        if todo is None or todo.user_id != caller_id:
            logger.warning(f"User {caller_id} denied access to todo {todo_id}")
            raise AuthzError(denial)
        return todo

    def get(self, caller_id: int, todo_id: Union[str, int]) -> Todo:
        return self._owned(caller_id, todo_id, "Unauthorized or Not Found")

    def update(self, caller_id: int, todo_id: Union[str, int], changes: Dict[str, Any]) -> Todo:
        """
        Apply the supplied fields and refresh ``updated_at``.

        Args:
            caller_id: Authenticated user id
            todo_id: Raw todo id from the request path
            changes: Subset of title/description/is_completed. A None title or
                is_completed is ignored; a None description clears it.
        """
        todo = self._owned(caller_id, todo_id, "Unauthorized")

        if changes.get("title") is not None:
            todo.title = _clean_title(changes["title"])
        if "description" in changes:
            todo.description = changes["description"]
        if changes.get("is_completed") is not None:
            todo.is_completed = changes["is_completed"]

        todo.updated_at = self.now()
        return self.store.save(todo)

    def delete(self, caller_id: int, todo_id: Union[str, int]) -> None:
        todo = self._owned(caller_id, todo_id, "Unauthorized")
        self.store.delete(todo)
        logger.info(f"User {caller_id} deleted todo {todo.id}")
