"""
Todo store: todo records and the owner-scoped listing query.
"""
from abc import ABC, abstractmethod
from typing import List, Optional
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from app.errors import InternalError
from app.models.todo import Todo

logger = logging.getLogger(__name__)


class TodoStore(ABC):
    """Holds todo records. Every method is a single-row (or single-query) call."""

    @abstractmethod
    def add(self, todo: Todo) -> Todo:
        """Insert ``todo`` and return it with its generated id."""

    @abstractmethod
    def get(self, todo_id: int) -> Optional[Todo]:
        """Return the todo with ``todo_id`` regardless of owner, or None."""

    @abstractmethod
    def list_by_owner(self, user_id: int) -> List[Todo]:
        """Return the owner's todos, newest ``created_at`` first."""

    @abstractmethod
    def save(self, todo: Todo) -> Todo:
        """Persist changes made to an existing todo."""

    @abstractmethod
    def delete(self, todo: Todo) -> None:
        """Remove ``todo``."""


class SQLTodoStore(TodoStore):
    """TodoStore over the ``todo`` table."""

    def __init__(self, session: Session):
        self.session = session

    def _commit(self, todo: Todo, action: str) -> Todo:
        try:
            self.session.add(todo)
            self.session.commit()
            self.session.refresh(todo)
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error(f"Todo {action} failed: {e}")
            raise InternalError("Internal server error") from e
        return todo

    def add(self, todo: Todo) -> Todo:
        return self._commit(todo, "insert")

    def get(self, todo_id: int) -> Optional[Todo]:
        try:
            return self.session.get(Todo, todo_id)
        except SQLAlchemyError as e:
            logger.error(f"Todo lookup failed: {e}")
            raise InternalError("Internal server error") from e

    def list_by_owner(self, user_id: int) -> List[Todo]:
        statement = (
            select(Todo)
            .where(Todo.user_id == user_id)
            .order_by(Todo.created_at.desc(), Todo.id.desc())
        )
        try:
            return list(self.session.exec(statement).all())
        except SQLAlchemyError as e:
            logger.error(f"Todo listing failed: {e}")
            raise InternalError("Internal server error") from e

    def save(self, todo: Todo) -> Todo:
        return self._commit(todo, "update")

    def delete(self, todo: Todo) -> None:
        try:
            self.session.delete(todo)
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error(f"Todo delete failed: {e}")
            raise InternalError("Internal server error") from e
