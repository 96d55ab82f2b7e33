"""
Fauna API: CRUD Router Factory
===============================

What:  Builds the list/create/update/delete router for one resource.
How:   A `Resource` describes the table (through its CrudService), the body
       and row schemas, the Spanish nouns used in messages, the gate for the
       list route and an optional hook applied to values before they are
       written. `build_crud_router` turns it into four routes:

           GET    /api/<path>            → 200 [rows]
           POST   /api/<path>            → 200 row
           PUT    /api/<path>/{row_id}   → 200 row | null
           DELETE /api/<path>/{row_id}   → 200 {"message": ...}

       Store failures surface as 500 {"error": <per-route message>} through
       StoreError and the global handler.
Who:   routes/especies.py, routes/usuarios.py, routes/avistamientos.py.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, List, Optional, Type

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from fauna_api.database import get_db_session
from fauna_api.exceptions import FaunaError, StoreError
from fauna_api.routes.deps import allow_anonymous
from fauna_api.schemas.auth import TokenClaims
from fauna_api.schemas.common import ErrorResponse, MessageResponse
from fauna_api.services.crud_service import CrudService

logger = logging.getLogger(__name__)


async def _unchanged(values: Dict[str, Any]) -> Dict[str, Any]:
    return values


@dataclass(frozen=True)
class Resource:
    """
    Everything the factory needs to know about one resource.

    Attributes:
        path:             URL segment under /api, e.g. "/especies".
        tag:              OpenAPI tag.
        service:          CrudService bound to the table and projection.
        schema_in:        Body model for create/update (dumped by alias).
        schema_out:       Row model for responses.
        singular/plural:  Nouns used in error messages ("especie"/"especies").
        deleted_message:  Fixed delete confirmation.
        list_gate:        Dependency run before list; returns claims or None.
        prepare:          Async hook applied to body values before create/update.
    """

    path: str
    tag: str
    service: CrudService
    schema_in: Type[BaseModel]
    schema_out: Type[BaseModel]
    singular: str
    plural: str
    deleted_message: str
    list_gate: Callable[..., Any] = allow_anonymous
    prepare: Callable[[Dict[str, Any]], Awaitable[Dict[str, Any]]] = field(default=_unchanged)

    async def values_from(self, payload: Optional[BaseModel], error_message: str) -> Dict[str, Any]:
        """Full field set from the body (missing fields as None), passed through `prepare`."""
        values = (payload or self.schema_in()).model_dump(by_alias=True)
        try:
            return await self.prepare(values)
        except FaunaError:
            raise
        except Exception as exc:
            logger.error("%s: %s", error_message, str(exc), exc_info=True)
            raise StoreError(message=error_message, context={"error_type": type(exc).__name__}) from exc


_ERRORS = {500: {"description": "Store failure", "model": ErrorResponse}}


def build_crud_router(resource: Resource) -> APIRouter:
    """Create the four CRUD routes for `resource` under the /api prefix."""
    router = APIRouter(prefix="/api", tags=[resource.tag])
    schema_in = resource.schema_in
    schema_out = resource.schema_out
    item_path = resource.path + "/{row_id}"

    @router.get(
        resource.path,
        response_model=List[schema_out],
        responses=_ERRORS,
        summary=f"List {resource.plural}",
    )
    async def list_rows(
        claims: Optional[TokenClaims] = Depends(resource.list_gate),
        db: AsyncSession = Depends(get_db_session),
    ) -> List[Dict[str, Any]]:
        if claims is not None:
            logger.info("Listing %s for user id=%s", resource.plural, claims.id)
        return await resource.service.list(db, f"Error al obtener {resource.plural}")

    @router.post(
        resource.path,
        response_model=schema_out,
        responses=_ERRORS,
        summary=f"Create {resource.singular}",
    )
    async def create_row(
        payload: Optional[schema_in] = None,
        db: AsyncSession = Depends(get_db_session),
    ) -> Dict[str, Any]:
        message = f"Error al crear {resource.singular}"
        values = await resource.values_from(payload, message)
        return await resource.service.create(db, values, message)

    @router.put(
        item_path,
        response_model=Optional[schema_out],
        responses=_ERRORS,
        summary=f"Replace {resource.singular}",
        description="Overwrites every field. Responds with null when no row has this id.",
    )
    async def update_row(
        row_id: str,
        payload: Optional[schema_in] = None,
        db: AsyncSession = Depends(get_db_session),
    ) -> Optional[Dict[str, Any]]:
        message = f"Error al actualizar {resource.singular} con ID {row_id}"
        values = await resource.values_from(payload, message)
        return await resource.service.update(db, row_id, values, message)

    @router.delete(
        item_path,
        response_model=MessageResponse,
        responses=_ERRORS,
        summary=f"Delete {resource.singular}",
        description="Idempotent: succeeds whether or not the row exists.",
    )
    async def delete_row(
        row_id: str,
        db: AsyncSession = Depends(get_db_session),
    ) -> MessageResponse:
        await resource.service.delete(
            db, row_id, f"Error al eliminar {resource.singular} con ID {row_id}"
        )
        return MessageResponse(message=resource.deleted_message)

    return router
