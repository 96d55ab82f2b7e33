"""
Fauna API: Sighting Routes
===========================

/api/avistamientos CRUD. Species and user references are plain ids; the
database decides whether they must exist.
"""

from fauna_api.models.avistamiento import Avistamiento
from fauna_api.routes.crud import Resource, build_crud_router
from fauna_api.schemas.avistamiento import AvistamientoIn, AvistamientoOut
from fauna_api.services.crud_service import CrudService

avistamientos = Resource(
    path="/avistamientos",
    tag="Avistamientos",
    service=CrudService(Avistamiento),
    schema_in=AvistamientoIn,
    schema_out=AvistamientoOut,
    singular="avistamiento",
    plural="avistamientos",
    deleted_message="Avistamiento eliminado correctamente",
)

router = build_crud_router(avistamientos)
