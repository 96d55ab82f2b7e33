"""
Fauna API: Sighting Image Routes
=================================

What:  Images nested under a sighting:

           GET    /api/avistamientos/{avistamiento_id}/imagenes
           POST   /api/avistamientos/{avistamiento_id}/imagenes
           DELETE /api/avistamientos/{avistamiento_id}/imagenes/{imagen_id}

How:   Same CrudService as the other resources, scoped by `id_avistamiento`.
       A delete only removes the image when both ids match; an image id
       paired with another sighting's id is left in place and the response
       is still the fixed confirmation.
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from fauna_api.database import get_db_session
from fauna_api.models.imagen import Imagen
from fauna_api.schemas.common import ErrorResponse, MessageResponse
from fauna_api.schemas.imagen import ImagenIn, ImagenOut
from fauna_api.services.crud_service import CrudService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/avistamientos/{avistamiento_id}/imagenes", tags=["Imagenes"])

imagenes = CrudService(Imagen)

_ERRORS = {500: {"description": "Store failure", "model": ErrorResponse}}


@router.get("", response_model=List[ImagenOut], responses=_ERRORS, summary="List images of a sighting")
async def list_imagenes(
    avistamiento_id: str,
    db: AsyncSession = Depends(get_db_session),
) -> List[Dict[str, Any]]:
    return await imagenes.list(
        db,
        f"Error al obtener imágenes del avistamiento con ID {avistamiento_id}",
        scope={"id_avistamiento": avistamiento_id},
    )


@router.post("", response_model=ImagenOut, responses=_ERRORS, summary="Attach an image to a sighting")
async def create_imagen(
    avistamiento_id: str,
    payload: Optional[ImagenIn] = None,
    db: AsyncSession = Depends(get_db_session),
) -> Dict[str, Any]:
    values = (payload or ImagenIn()).model_dump()
    values["id_avistamiento"] = avistamiento_id
    return await imagenes.create(
        db,
        values,
        f"Error al crear imagen para el avistamiento con ID {avistamiento_id}",
    )


@router.delete(
    "/{imagen_id}",
    response_model=MessageResponse,
    responses=_ERRORS,
    summary="Delete an image of a sighting",
)
async def delete_imagen(
    avistamiento_id: str,
    imagen_id: str,
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    await imagenes.delete(
        db,
        imagen_id,
        f"Error al eliminar imagen con ID {imagen_id} del avistamiento con ID {avistamiento_id}",
        scope={"id_avistamiento": avistamiento_id},
    )
    return MessageResponse(message="Imagen eliminada correctamente")
