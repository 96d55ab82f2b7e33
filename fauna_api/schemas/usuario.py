"""
Fauna API: User Schemas
========================

What:  Request body and public row for /api/usuarios.

The credential travels under the JSON key `contraseña`. It is accepted on
input only; `UsuarioOut` has no credential field, so it can never be
serialized back to a client.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field


class UsuarioIn(BaseModel):
    """Body of POST /api/usuarios and PUT /api/usuarios/{id}."""
    nombre: Any = None
    email: Any = None
    contrasena: Any = Field(default=None, alias="contraseña")

    model_config = {"extra": "ignore", "populate_by_name": True}


class UsuarioOut(BaseModel):
    """Projection used by list, create and update: id, nombre, email, fecha_registro."""
    id: int
    nombre: Optional[str] = None
    email: Optional[str] = None
    fecha_registro: Optional[datetime] = None

    model_config = {"from_attributes": True}
