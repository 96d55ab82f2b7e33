"""
Fauna API: Sighting Image ORM Model
====================================

What:  The `imagenes` table: images attached to a sighting.
How:   Always accessed through the parent sighting id; deleting a sighting
       does not delete its images at this layer.
"""

from typing import Any

from sqlalchemy import JSON, ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from fauna_api.database import Base


class Imagen(Base):
    __tablename__ = "imagenes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    id_avistamiento: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("avistamientos.id"), nullable=True, index=True
    )
    url: Mapped[str | None] = mapped_column(Text, nullable=True)
    # Free-form client metadata (EXIF, camera, dimensions...)
    metadatos: Mapped[Any] = mapped_column(JSON, nullable=True)

    def __repr__(self) -> str:
        return f"<Imagen(id={self.id}, id_avistamiento={self.id_avistamiento})>"
