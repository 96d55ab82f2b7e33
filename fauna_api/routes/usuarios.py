"""
Fauna API: User Routes
=======================

/api/usuarios CRUD. Responses never include the credential: every statement
projects `id, nombre, email, fecha_registro`. The `contraseña` received on
create and update is stored as a bcrypt hash so that POST /api/login can
verify it.
"""

from typing import Any, Dict

from fauna_api.models.usuario import Usuario
from fauna_api.routes.crud import Resource, build_crud_router
from fauna_api.schemas.usuario import UsuarioIn, UsuarioOut
from fauna_api.services.auth_service import hash_password
from fauna_api.services.crud_service import CrudService

PUBLIC_COLUMNS = ("id", "nombre", "email", "fecha_registro")


async def _hash_credential(values: Dict[str, Any]) -> Dict[str, Any]:
    return {**values, "contraseña": await hash_password(values.get("contraseña"))}


usuarios = Resource(
    path="/usuarios",
    tag="Usuarios",
    service=CrudService(Usuario, projection=PUBLIC_COLUMNS),
    schema_in=UsuarioIn,
    schema_out=UsuarioOut,
    singular="usuario",
    plural="usuarios",
    deleted_message="Usuario eliminado correctamente",
    prepare=_hash_credential,
)

router = build_crud_router(usuarios)
