"""
SQL operations on the todo table.

Each function issues its statements through the shared Storage handle and
hands back TodoOut snapshots. Failures surface as TodoNotFound or
StorageError; choosing an HTTP status is left to the route handlers.
"""
from typing import List

from sqlalchemy import case, delete, insert, update
from sqlmodel import select

from app.core.database import Storage
from app.core.errors import StorageError, TodoNotFound
from app.models import Todo
from app.schemas.todo import TodoIn, TodoOut


def list_todos(storage: Storage) -> List[TodoOut]:
    rows = storage.query(select(Todo))
    return [TodoOut.from_row(row) for row in rows]


def get_todo_by_id(storage: Storage, todo_id: str) -> TodoOut:
    try:
        row = storage.query_row(select(Todo).where(Todo.id == todo_id))
    except StorageError as exc:
        raise StorageError(f"todo {todo_id}: {exc.message}") from exc
    if row is None:
        raise TodoNotFound(f"todo {todo_id}: no such todo")
    return TodoOut.from_row(row)


def create_todo(storage: Storage, data: TodoIn) -> int:
    return storage.exec(insert(Todo).values(item=data.item, completed=data.completed))


def toggle_todo(storage: Storage, todo_id: str) -> TodoOut:
    # Flipped in one statement so concurrent toggles cannot interleave.
    storage.exec(
        update(Todo)
        .where(Todo.id == todo_id)
        .values(completed=case((Todo.completed == 0, 1), else_=0))
    )
    return get_todo_by_id(storage, todo_id)


def replace_todo(storage: Storage, todo_id: str, data: TodoIn) -> TodoOut:
    storage.exec(
        update(Todo)
        .where(Todo.id == todo_id)
        .values(item=data.item, completed=data.completed)
    )
    return get_todo_by_id(storage, todo_id)


def delete_todo(storage: Storage, todo_id: str) -> TodoOut:
    todo = get_todo_by_id(storage, todo_id)
    storage.exec(delete(Todo).where(Todo.id == todo_id))
    return todo
