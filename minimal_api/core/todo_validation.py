"""Todo Validation — rules applied to Todo request bodies before persistence."""

from pydantic import BaseModel

TITLE_MISSING = "Please include title!"
TITLE_EMPTY = "Title cannot be empty!"


def validate_todo(body: BaseModel) -> list[str]:
    title = getattr(body, "title", None)
    if title is None:
        return [TITLE_MISSING]
    if not title.strip():
        return [TITLE_EMPTY]
    return []
