"""
Fauna API: Sighting Schemas
============================

What:  Request body and response row for /api/avistamientos.

Input fields are not typed: "2024-03-10" and "7" are accepted as a date and
an id the same way the database casts them, and values it would reject fail
in the store with the route's message.
"""

from datetime import date
from typing import Any, Optional

from pydantic import BaseModel


class AvistamientoIn(BaseModel):
    """Body of POST /api/avistamientos and PUT /api/avistamientos/{id}."""
    id_especie: Any = None
    id_usuario: Any = None
    fecha_avistamiento: Any = None
    ubicacion: Any = None
    imagen_url: Any = None
    comentarios: Any = None

    model_config = {"extra": "ignore"}


class AvistamientoOut(BaseModel):
    id: int
    id_especie: Optional[int] = None
    id_usuario: Optional[int] = None
    fecha_avistamiento: Optional[date] = None
    ubicacion: Optional[str] = None
    imagen_url: Optional[str] = None
    comentarios: Optional[str] = None

    model_config = {"from_attributes": True}
