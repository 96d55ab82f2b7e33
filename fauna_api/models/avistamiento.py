"""
Fauna API: Sighting ORM Model
==============================

What:  The `avistamientos` table: one observation of a species by a user.
How:   References especies and usuarios by id. No cascade rules are declared;
       what happens to sightings when a species or user is deleted is up to
       the database.
"""

from datetime import date

from sqlalchemy import Date, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from fauna_api.database import Base


class Avistamiento(Base):
    __tablename__ = "avistamientos"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    id_especie: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("especies.id"), nullable=True
    )
    id_usuario: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("usuarios.id"), nullable=True
    )
    fecha_avistamiento: Mapped[date | None] = mapped_column(Date, nullable=True)
    ubicacion: Mapped[str | None] = mapped_column(String(255), nullable=True)
    imagen_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    comentarios: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return (
            f"<Avistamiento(id={self.id}, id_especie={self.id_especie}, "
            f"id_usuario={self.id_usuario})>"
        )
