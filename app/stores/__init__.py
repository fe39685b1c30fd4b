"""Record stores backing the services."""
from .credential_store import CredentialStore, SQLCredentialStore
from .todo_store import TodoStore, SQLTodoStore

__all__ = ["CredentialStore", "SQLCredentialStore", "TodoStore", "SQLTodoStore"]
