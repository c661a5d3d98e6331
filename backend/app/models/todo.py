from sqlmodel import SQLModel, Field
from sqlalchemy import Column, SmallInteger, String, text
from sqlalchemy.dialects.mysql import TINYINT
from typing import Optional

# TINYINT(1) UNSIGNED on MySQL, a plain small integer on other backends.
CompletedType = SmallInteger().with_variant(TINYINT(display_width=1, unsigned=True), "mysql")

class Todo(SQLModel, table=True):
    __tablename__ = "todo"

    id: Optional[int] = Field(default=None, primary_key=True)
    item: str = Field(sa_column=Column(String(255), nullable=False))
    completed: int = Field(
        default=0,
        sa_column=Column(CompletedType, server_default=text("0")),
    )
