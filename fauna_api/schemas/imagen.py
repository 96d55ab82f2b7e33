"""
Fauna API: Sighting Image Schemas
==================================

What:  Request body and response row for /api/avistamientos/{id}/imagenes.
How:   The parent sighting id comes from the path, never from the body.
"""

from typing import Any, Optional

from pydantic import BaseModel


class ImagenIn(BaseModel):
    """Body of POST /api/avistamientos/{avistamiento_id}/imagenes."""
    url: Any = None
    metadatos: Any = None

    model_config = {"extra": "ignore"}


class ImagenOut(BaseModel):
    id: int
    id_avistamiento: Optional[int] = None
    url: Optional[str] = None
    metadatos: Any = None

    model_config = {"from_attributes": True}
