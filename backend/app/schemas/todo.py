from pydantic import BaseModel, Field, field_validator

from app.models import Todo

class TodoIn(BaseModel):
    # "id" is echoed back by create but never written; storage assigns it.
    id: int = Field(default=0, strict=True)
    item: str = Field(default="", strict=True)
    completed: int = Field(default=0, ge=0, le=255, strict=True)

    @field_validator("id", "item", "completed", mode="before")
    @classmethod
    def null_keeps_zero_value(cls, value, info):
        if value is None:
            return cls.model_fields[info.field_name].default
        return value

class TodoOut(BaseModel):
    """Wire form of a todo. Zero id/completed are left out of responses."""

    id: int = 0
    item: str
    completed: int = 0

    @classmethod
    def from_row(cls, row: Todo) -> "TodoOut":
        return cls(id=row.id or 0, item=row.item, completed=row.completed or 0)

    @classmethod
    def echo(cls, data: TodoIn) -> "TodoOut":
        return cls(id=data.id, item=data.item, completed=data.completed)
