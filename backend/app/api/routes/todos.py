from fastapi import APIRouter, Depends

from app.api.deps import todo_body
from app.core.database import Storage, get_storage
from app.core.errors import ApiError, TodoError
from app import crud
from app.schemas.todo import TodoIn, TodoOut

router = APIRouter(prefix="/todos", tags=["todos"])

# Zero id/completed are dropped from every todo body.
todo_response = dict(response_model=TodoOut, response_model_exclude_defaults=True)

@router.get("", response_model=list[TodoOut], response_model_exclude_defaults=True)
def list_todos(storage: Storage = Depends(get_storage)):
    try:
        return crud.list_todos(storage)
    except TodoError as exc:
        raise ApiError(400, exc.message)

@router.post("", status_code=201, **todo_response)
def create_todo(data: TodoIn = Depends(todo_body), storage: Storage = Depends(get_storage)):
    if data.item == "":
        raise ApiError(400, "Item is required")
    try:
        crud.create_todo(storage, data)
    except TodoError as exc:
        raise ApiError(400, exc.message)
    return TodoOut.echo(data)

@router.get("/{todo_id}", **todo_response)
def get_todo(todo_id: str, storage: Storage = Depends(get_storage)):
    try:
        return crud.get_todo_by_id(storage, todo_id)
    except TodoError as exc:
        raise ApiError(404, exc.message)

@router.patch("/{todo_id}", **todo_response)
def toggle_todo(todo_id: str, storage: Storage = Depends(get_storage)):
    try:
        return crud.toggle_todo(storage, todo_id)
    except TodoError as exc:
        raise ApiError(400, exc.message)

@router.put("/{todo_id}", **todo_response)
def replace_todo(todo_id: str, data: TodoIn = Depends(todo_body), storage: Storage = Depends(get_storage)):
    try:
        return crud.replace_todo(storage, todo_id, data)
    except TodoError as exc:
        raise ApiError(400, exc.message)

@router.delete("/{todo_id}", **todo_response)
def delete_todo(todo_id: str, storage: Storage = Depends(get_storage)):
    try:
        return crud.delete_todo(storage, todo_id)
    except TodoError as exc:
        raise ApiError(400, exc.message)
