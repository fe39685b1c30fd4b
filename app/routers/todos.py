"""Todo router. Every route requires a bearer token."""
from fastapi import APIRouter, Depends, Response, status
from typing import List
from sqlmodel import Session

from app.db.config import get_session
from app.middleware.auth import get_current_user_id
from app.schemas.auth import ErrorResponse
from app.schemas.todo import TodoCreate, TodoResponse, TodoUpdate
from app.services.todo_service import TodoService
from app.stores.todo_store import SQLTodoStore

router = APIRouter(
    prefix="/todos",
    tags=["Todos"],
    responses={401: {"model": ErrorResponse}},
)

ID_ERRORS = {400: {"model": ErrorResponse}, 403: {"model": ErrorResponse}}


def get_todo_service(session: Session = Depends(get_session)) -> TodoService:
    """Dependency for getting TodoService instance."""
    return TodoService(SQLTodoStore(session))


@router.post(
    "",
    response_model=TodoResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
def create_todo(
    todo_data: TodoCreate,
    user_id: int = Depends(get_current_user_id),
    service: TodoService = Depends(get_todo_service),
):
    """Create a todo owned by the caller."""
    return service.create(user_id, todo_data.title, todo_data.description)


@router.get("", response_model=List[TodoResponse])
def list_todos(
    user_id: int = Depends(get_current_user_id),
    service: TodoService = Depends(get_todo_service),
):
    """List the caller's todos, newest first."""
    return service.list(user_id)


@router.get("/{todo_id}", response_model=TodoResponse, responses=ID_ERRORS)
def get_todo(
    todo_id: str,
    user_id: int = Depends(get_current_user_id),
    service: TodoService = Depends(get_todo_service),
):
    """Get one of the caller's todos."""
    return service.get(user_id, todo_id)


@router.put("/{todo_id}", response_model=TodoResponse, responses=ID_ERRORS)
def update_todo(
    todo_id: str,
    todo_data: TodoUpdate,
    user_id: int = Depends(get_current_user_id),
    service: TodoService = Depends(get_todo_service),
):
    """Update title, description and/or completion of one of the caller's todos."""
    return service.update(user_id, todo_id, todo_data.model_dump(exclude_unset=True))


@router.delete("/{todo_id}", status_code=status.HTTP_204_NO_CONTENT, responses=ID_ERRORS)
def delete_todo(
    todo_id: str,
    user_id: int = Depends(get_current_user_id),
    service: TodoService = Depends(get_todo_service),
):
    """Delete one of the caller's todos."""
    service.delete(user_id, todo_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
