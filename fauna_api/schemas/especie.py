"""
Fauna API: Species Schemas
===========================

What:  Request body and response row for /api/especies.
How:   Every field is optional and untyped on input. Create and update send
       the full field set; missing fields are written as NULL and the
       database decides whether a value is acceptable.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field


class EspecieIn(BaseModel):
    """Body of POST /api/especies and PUT /api/especies/{id}."""
    nombre_cientifico: Any = Field(default=None, examples=["Panthera onca"])
    nombre_comun: Any = Field(default=None, examples=["Jaguar"])
    descripcion: Any = None
    estado_conservacion: Any = Field(default=None, examples=["Near Threatened"])
    habitat: Any = Field(default=None, examples=["Rainforest"])

    model_config = {"extra": "ignore"}


class EspecieOut(BaseModel):
    """A stored species row, including its generated id."""
    id: int
    nombre_cientifico: Optional[str] = None
    nombre_comun: Optional[str] = None
    descripcion: Optional[str] = None
    estado_conservacion: Optional[str] = None
    habitat: Optional[str] = None

    model_config = {"from_attributes": True}
