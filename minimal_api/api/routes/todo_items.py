"""Todo Items — the /todoItems route group.

Invariants:
    - All five CRUD routes registered through ResourceEndpoints
    - Write bodies must carry a title; blank titles are persisted as sent

Design Decisions:
    - No validator registered: validate_todo stays available through EndpointOptions
      for route groups that want it
    - Write routes keep the confirmation-string responses; reads return TodoResponse rows
"""

from fastapi import APIRouter

from minimal_api.api.endpoints import ResourceEndpoints
from minimal_api.core.endpoint_options import EndpointOptions
from minimal_api.models.todo import Todo
from minimal_api.schemas.todo import TodoRequest, TodoResponse

router = APIRouter(prefix="/todoItems", tags=["todoItems"])

todo_write_options = EndpointOptions(request_model=TodoRequest)
todo_read_options = EndpointOptions(response_model=TodoResponse)

todo_endpoints = (
    ResourceEndpoints(router, Todo, TodoRequest, TodoResponse)
    .with_create(todo_write_options)
    .with_update(todo_write_options)
    .with_delete()
    .with_get_all(todo_read_options)
    .with_get_by_id(todo_read_options)
)
