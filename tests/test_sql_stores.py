"""Tests for the SQLModel-backed stores."""

from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy.exc import OperationalError
from sqlmodel import Session

from app.errors import ConflictError, InternalError
from app.models.todo import Todo
from app.stores import SQLCredentialStore, SQLTodoStore


class TestSQLCredentialStore:
    def test_create_and_lookup(self, session):
        store = SQLCredentialStore(session)
        user = store.create("a@x.com", "hash")

        assert user.id is not None
        assert store.get_by_email("a@x.com").id == user.id
        assert store.get_by_email("A@x.com") is None

    def test_unique_constraint_maps_to_conflict(self, session):
        store = SQLCredentialStore(session)
        store.create("a@x.com", "hash")

        with pytest.raises(ConflictError):
            store.create("a@x.com", "other")

        # Session is usable again after the rollback
        assert store.get_by_email("a@x.com") is not None

    def test_database_failure_maps_to_internal_error(self, session, monkeypatch):
        def broken(*args, **kwargs):
            raise OperationalError("SELECT", {}, Exception("database is locked"))

        monkeypatch.setattr(session, "exec", broken)

        with pytest.raises(InternalError) as exc:
            SQLCredentialStore(session).get_by_email("a@x.com")
        assert exc.value.message == "Internal server error"


class TestSQLTodoStore:
    def test_list_by_owner_orders_newest_first(self, session):
        store = SQLTodoStore(session)
        base = datetime(2024, 1, 1, tzinfo=timezone.utc)
        old = store.add(Todo(title="old", user_id=1, created_at=base, updated_at=base))
        new = store.add(
            Todo(title="new", user_id=1, created_at=base + timedelta(minutes=1), updated_at=base)
        )
        store.add(Todo(title="other", user_id=2, created_at=base, updated_at=base))

        assert [t.id for t in store.list_by_owner(1)] == [new.id, old.id]

    def test_same_timestamp_falls_back_to_id(self, session):
        store = SQLTodoStore(session)
        stamp = datetime(2024, 1, 1, tzinfo=timezone.utc)
        first = store.add(Todo(title="first", user_id=1, created_at=stamp, updated_at=stamp))
        second = store.add(Todo(title="second", user_id=1, created_at=stamp, updated_at=stamp))

        assert [t.id for t in store.list_by_owner(1)] == [second.id, first.id]

    def test_get_save_delete(self, session):
        store = SQLTodoStore(session)
        todo = store.add(Todo(title="t", user_id=1))

        todo.is_completed = True
        store.save(todo)
        assert store.get(todo.id).is_completed is True

        store.delete(todo)
        assert store.get(todo.id) is None


class TestTimestamps:
    def test_round_trip_is_timezone_aware_utc(self, engine):
        with Session(engine) as session:
            store = SQLTodoStore(session)
            todo = store.add(Todo(title="t", user_id=1))
            todo_id = todo.id

        with Session(engine) as fresh:
            loaded = SQLTodoStore(fresh).get(todo_id)

        assert loaded.created_at.tzinfo is not None
        assert loaded.created_at.utcoffset() == timedelta(0)
        assert loaded.updated_at.utcoffset() == timedelta(0)

    def test_offset_values_normalised_to_utc(self, engine):
        plus_two = timezone(timedelta(hours=2))
        stamp = datetime(2024, 1, 1, 14, 0, tzinfo=plus_two)
        with Session(engine) as session:
            todo_id = SQLTodoStore(session).add(
                Todo(title="t", user_id=1, created_at=stamp, updated_at=stamp)
            ).id

        with Session(engine) as fresh:
            loaded = SQLTodoStore(fresh).get(todo_id)

        assert loaded.created_at == datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)

    def test_user_created_at_is_aware(self, session):
        user = SQLCredentialStore(session).create("a@x.com", "hash")
        assert user.created_at.utcoffset() == timedelta(0)
