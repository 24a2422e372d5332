"""Endpoint Options — per-route configuration consumed at registration time.

Invariants:
    - Options are immutable once built (frozen dataclass)
    - A missing validator means every body is accepted
    - Validators are pure: body in, list of failure messages out

Design Decisions:
    - Explicit options object over chained register_* calls: everything a route
      needs is visible at the call site and nothing is recorded after the fact
"""

from dataclasses import dataclass
from typing import Callable

from pydantic import BaseModel

Validator = Callable[[BaseModel], list[str]]


@dataclass(frozen=True)
class EndpointOptions:
    """Hooks for a single registered route."""
    validator: Validator | None = None
    request_model: type[BaseModel] | None = None
    response_model: type[BaseModel] | None = None


DEFAULT_OPTIONS = EndpointOptions()


def run_validator(options: EndpointOptions, body: BaseModel) -> list[str]:
    """Return validation failures for body, empty if valid or unvalidated."""
    if options.validator is None:
        return []
    return list(options.validator(body))
