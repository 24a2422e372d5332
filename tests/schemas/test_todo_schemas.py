"""Todo schemas — camelCase wire format and required title."""

import pytest
from pydantic import ValidationError

from minimal_api.models.todo import Todo
from minimal_api.schemas.todo import TodoRequest, TodoResponse


def test_request_requires_title():
    with pytest.raises(ValidationError):
        TodoRequest.model_validate({"isCompleted": True})


def test_request_accepts_camel_and_snake_case():
    camel = TodoRequest.model_validate({"title": "A", "isCompleted": True})
    snake = TodoRequest.model_validate({"title": "A", "is_completed": True})
    assert camel.is_completed is True
    assert snake.is_completed is True


def test_request_defaults():
    req = TodoRequest(title="A")
    assert req.id is None
    assert req.is_completed is False


def test_response_reads_orm_attributes():
    todo = Todo(id=4, title="A", is_completed=True)
    res = TodoResponse.model_validate(todo)
    assert res.model_dump(by_alias=True) == {
        "id": 4, "title": "A", "isCompleted": True,
    }
