"""Resource Endpoints — generic registrar wiring CRUD routes for one ORM entity.

Invariants:
    - Every with_* call registers exactly one route and returns self (fluent)
    - Missing rows (or an empty collection) → ResourceNotFoundError (404)
    - Any exception while saving → rollback + PersistenceError (500)
    - PUT replaces every non-key column; columns the body omits take their defaults
    - The primary key never changes; a create body id of 0 means "store assigns"
    - Handlers hold no state; the store is reached only through the injected session

Design Decisions:
    - Body type chosen per route from EndpointOptions.request_model: handler
      annotations are bound when the closure is defined, so FastAPI sees a concrete model
    - Write routes answer with a confirmation string unless a response_model is set
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from sqlalchemy import inspect, select
from sqlalchemy.ext.asyncio import AsyncSession

from minimal_api.core.endpoint_options import (
    DEFAULT_OPTIONS, EndpointOptions, run_validator,
)
from minimal_api.core.errors import (
    ErrorContext, PersistenceError, RequestRejectedError, ResourceNotFoundError,
)
from minimal_api.db.base import Base
from minimal_api.infrastructure.database import get_db

logger = logging.getLogger(__name__)

CREATED = "Created!"
UPDATED = "Updated!"
DELETED = "Deleted!"


class ResourceEndpoints:
    """Registers Create/Update/Delete/GetAll/GetById routes for model on router."""

    def __init__(
        self,
        router: APIRouter,
        model: type[Base],
        request_model: type[BaseModel],
        response_model: type[BaseModel],
        name: str | None = None,
    ):
        self.router = router
        self.model = model
        self.request_model = request_model
        self.response_model = response_model
        self.name = name or model.__name__
        mapper = inspect(model)
        self._key = mapper.primary_key[0].key
        self._columns = [attr.key for attr in mapper.column_attrs]

    # ─── Write routes ────────────────────────────────────────────

    def with_create(self, options: EndpointOptions | None = None) -> "ResourceEndpoints":
        options = options or DEFAULT_OPTIONS
        request_model = options.request_model or self.request_model

        async def create(
            body: request_model, db: AsyncSession = Depends(get_db),
        ):
            self._check(options, body)
            entity = self.model(**self._values(body, include_key=True))
            db.add(entity)
            await self._save(db, "create", entity)
            logger.info(
                f"{self.name} created",
                extra={"entity": self.name, "entity_id": self._id_of(entity)},
            )
            return self._write_result(options, entity, CREATED)

        self.router.add_api_route(
            "/", create, methods=["POST"],
            name=f"create_{self.name.lower()}",
            status_code=status.HTTP_200_OK,
        )
        return self

    def with_update(self, options: EndpointOptions | None = None) -> "ResourceEndpoints":
        options = options or DEFAULT_OPTIONS
        request_model = options.request_model or self.request_model

        async def update(
            entity_id: int, body: request_model,
            db: AsyncSession = Depends(get_db),
        ):
            entity = await self._get_or_404(db, entity_id)
            self._check(options, body)
            for key, value in self._values(
                body, include_key=False, fill_defaults=True,
            ).items():
                setattr(entity, key, value)
            await self._save(db, "update", entity)
            logger.info(
                f"{self.name} {entity_id} updated",
                extra={"entity": self.name, "entity_id": entity_id},
            )
            return self._write_result(options, entity, UPDATED)

        self.router.add_api_route(
            "/{entity_id}", update, methods=["PUT"],
            name=f"update_{self.name.lower()}",
        )
        return self

    def with_delete(self, options: EndpointOptions | None = None) -> "ResourceEndpoints":
        options = options or DEFAULT_OPTIONS

        async def delete(entity_id: int, db: AsyncSession = Depends(get_db)):
            entity = await self._get_or_404(db, entity_id)
            await db.delete(entity)
            await self._save(db, "delete", entity)
            logger.info(
                f"{self.name} {entity_id} deleted",
                extra={"entity": self.name, "entity_id": entity_id},
            )
            return self._write_result(options, entity, DELETED)

        self.router.add_api_route(
            "/{entity_id}", delete, methods=["DELETE"],
            name=f"delete_{self.name.lower()}",
        )
        return self

    # ─── Read routes ─────────────────────────────────────────────

    def with_get_all(self, options: EndpointOptions | None = None) -> "ResourceEndpoints":
        options = options or DEFAULT_OPTIONS
        response_model = options.response_model or self.response_model

        async def get_all(db: AsyncSession = Depends(get_db)):
            key_column = getattr(self.model, self._key)
            result = await db.execute(select(self.model).order_by(key_column))
            items = result.scalars().all()
            if not items:
                raise ResourceNotFoundError(
                    self.name, context=ErrorContext(entity=self.name),
                )
            return items

        self.router.add_api_route(
            "/", get_all, methods=["GET"],
            name=f"list_{self.name.lower()}",
            response_model=list[response_model],
        )
        return self

    def with_get_by_id(self, options: EndpointOptions | None = None) -> "ResourceEndpoints":
        options = options or DEFAULT_OPTIONS
        response_model = options.response_model or self.response_model

        async def get_by_id(entity_id: int, db: AsyncSession = Depends(get_db)):
            return await self._get_or_404(db, entity_id)

        self.router.add_api_route(
            "/{entity_id}", get_by_id, methods=["GET"],
            name=f"get_{self.name.lower()}",
            response_model=response_model,
        )
        return self

    def with_all(
        self,
        create: EndpointOptions | None = None,
        update: EndpointOptions | None = None,
        delete: EndpointOptions | None = None,
        read: EndpointOptions | None = None,
    ) -> "ResourceEndpoints":
        """Register all five routes in one call."""
        return (
            self.with_create(create)
            .with_update(update)
            .with_delete(delete)
            .with_get_all(read)
            .with_get_by_id(read)
        )

    # ─── Helpers ─────────────────────────────────────────────────

    def _check(self, options: EndpointOptions, body: BaseModel) -> None:
        failures = run_validator(options, body)
        if failures:
            raise RequestRejectedError(
                failures, context=ErrorContext(entity=self.name),
            )

    def _values(
        self, body: BaseModel, include_key: bool, fill_defaults: bool = False,
    ) -> dict[str, Any]:
        """Column values carried by body.

        The key is kept only when set to a real id (0 means unset). With
        fill_defaults, columns the body does not carry take their defaults.
        """
        data = body.model_dump()
        values = {}
        for column in self._columns:
            if column == self._key:
                if include_key and data.get(column):
                    values[column] = data[column]
                continue
            if column in data:
                values[column] = data[column]
            elif fill_defaults:
                values[column] = self._default_of(column)
        return values

    def _default_of(self, column: str) -> Any:
        default = inspect(self.model).columns[column].default
        if default is not None and default.is_scalar:
            return default.arg
        return None

    def _id_of(self, entity: Base) -> Any:
        return getattr(entity, self._key)

    async def _get_or_404(self, db: AsyncSession, entity_id: int) -> Base:
        entity = await db.get(self.model, entity_id)
        if entity is None:
            raise ResourceNotFoundError(
                self.name, entity_id,
                context=ErrorContext(entity=self.name, entity_id=entity_id),
            )
        return entity

    async def _save(self, db: AsyncSession, operation: str, entity: Base) -> None:
        try:
            await db.commit()
        except Exception as e:
            await db.rollback()
            logger.error(
                f"Failed to {operation} {self.name}: {e}",
                exc_info=True,
                extra={"entity": self.name, "error_code": "PERSISTENCE_FAILURE"},
            )
            raise PersistenceError(
                str(e), context=ErrorContext(entity=self.name),
            ) from e

    def _write_result(self, options: EndpointOptions, entity: Base, message: str):
        if options.response_model is None:
            return message
        payload = options.response_model.model_validate(entity, from_attributes=True)
        return JSONResponse(
            status_code=status.HTTP_200_OK,
            content=payload.model_dump(mode="json", by_alias=True),
        )
