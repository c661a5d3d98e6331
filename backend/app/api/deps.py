from typing import Optional

from fastapi import Body, Request

from app.core.errors import INVALID_DATA, ApiError
from app.schemas.todo import TodoIn

async def todo_body(request: Request, data: Optional[TodoIn] = Body(default=None)) -> TodoIn:
    # A JSON null body decodes to an empty todo; no body at all is invalid.
    if data is None:
        if not await request.body():
            raise ApiError(400, INVALID_DATA)
        return TodoIn()
    return data
