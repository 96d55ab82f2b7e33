"""
Fauna API: Species Routes
==========================

/api/especies CRUD. The list route is the only gated route of the API:
it requires a valid bearer token, while create, update and delete on the
same table are open. Existing clients rely on this surface, so it is kept
as-is; gating the mutations is a deliberate, separate change.
"""

from fauna_api.models.especie import Especie
from fauna_api.routes.crud import Resource, build_crud_router
from fauna_api.routes.deps import require_token
from fauna_api.schemas.especie import EspecieIn, EspecieOut
from fauna_api.services.crud_service import CrudService

especies = Resource(
    path="/especies",
    tag="Especies",
    service=CrudService(Especie),
    schema_in=EspecieIn,
    schema_out=EspecieOut,
    singular="especie",
    plural="especies",
    deleted_message="Especie eliminada correctamente",
    list_gate=require_token,
)

router = build_crud_router(especies)
