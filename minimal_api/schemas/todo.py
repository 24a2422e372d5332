"""Todo Schemas — request/response contracts for the /todoItems route group.

Invariants:
    - Wire keys are camelCase (isCompleted); snake_case is accepted on input
    - title must be present in every write body; emptiness is checked by validate_todo
    - is_completed defaults to False, so PUT without it resets the flag

Design Decisions:
    - Request id is optional and only honored on create (the store assigns one otherwise)
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class TodoRequest(BaseModel):
    """Todo body for POST and PUT."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int | None = None
    title: str
    is_completed: bool = False


class TodoResponse(BaseModel):
    """Todo as returned to clients."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True,
    )

    id: int
    title: str
    is_completed: bool
