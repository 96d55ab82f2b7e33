"""
Fauna API: Species ORM Model
=============================

What:  The `especies` table, the species catalog referenced by sightings.
Who:   Used by the generic CRUD service (through `__table__`) and by Alembic.
"""

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from fauna_api.database import Base


class Especie(Base):
    """A catalog species. All descriptive columns are free text and nullable."""

    __tablename__ = "especies"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # e.g. "Panthera onca"
    nombre_cientifico: Mapped[str | None] = mapped_column(String(255), nullable=True)
    # e.g. "Jaguar"
    nombre_comun: Mapped[str | None] = mapped_column(String(255), nullable=True)
    descripcion: Mapped[str | None] = mapped_column(Text, nullable=True)
    # IUCN-style label, e.g. "Near Threatened"; not an enum at this layer
    estado_conservacion: Mapped[str | None] = mapped_column(String(100), nullable=True)
    habitat: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<Especie(id={self.id}, nombre_cientifico='{self.nombre_cientifico}')>"
