"""ORM Models — SQLAlchemy declarative models for all entities.

Design Decisions:
    - All models imported here so Base.metadata is complete before create_all runs
"""

from minimal_api.models.todo import Todo  # noqa: F401
