from .todo import (
    create_todo,
    delete_todo,
    get_todo_by_id,
    list_todos,
    replace_todo,
    toggle_todo,
)

__all__ = [
    "create_todo",
    "delete_todo",
    "get_todo_by_id",
    "list_todos",
    "replace_todo",
    "toggle_todo",
]
