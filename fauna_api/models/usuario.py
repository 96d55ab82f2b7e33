"""
Fauna API: User ORM Model
==========================

What:  The `usuarios` table: registered observers and their login credential.
Who:   Used by the CRUD service (list/create/update/delete) and by the login
       lookup in auth_service.

Credential column:
    The column is named `contraseña` in the database and in the JSON API.
    The Python attribute is `contrasena`; statements built from `__table__`
    use the real column name. The stored value is a bcrypt hash and is left out
    of every projection except the login lookup.
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer, String, text
from sqlalchemy.orm import Mapped, mapped_column

from fauna_api.database import Base


class Usuario(Base):
    """A user account. Email is unique by convention, not by constraint."""

    __tablename__ = "usuarios"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    nombre: Mapped[str | None] = mapped_column(String(255), nullable=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True, index=True)

    contrasena: Mapped[str] = mapped_column("contraseña", String(255), nullable=False)

    # Server-assigned at insert; returned by create/update/list
    fecha_registro: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
    )

    def __repr__(self) -> str:
        return f"<Usuario(id={self.id}, email='{self.email}')>"
