"""Todo ORM — a single to-do item.

Invariants:
    - id is assigned by the store (autoincrement integer primary key)
    - title is never NULL
"""

from sqlalchemy import Boolean, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from minimal_api.db.base import Base


class Todo(Base):
    """Todo entity."""
    __tablename__ = "todos"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    title: Mapped[str] = mapped_column(String, nullable=False)
    is_completed: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
