"""Create especies, usuarios, avistamientos and imagenes tables

Revision ID: 001
Revises: None
Create Date: 2024-05-20 00:00:00.000000+00:00

What:  Initial schema: species catalog, users, sightings and sighting images.
How:   Integer identity keys; sightings reference species and users, images
       reference sightings. No ON DELETE rules.

Rollback: downgrade() drops all four tables (destructive).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "especies",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("nombre_cientifico", sa.String(255), nullable=True),
        sa.Column("nombre_comun", sa.String(255), nullable=True),
        sa.Column("descripcion", sa.Text(), nullable=True),
        sa.Column(
            "estado_conservacion",
            sa.String(100),
            nullable=True,
            comment="Conservation status label, e.g. 'Near Threatened'",
        ),
        sa.Column("habitat", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "usuarios",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("nombre", sa.String(255), nullable=True),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column(
            "contraseña",
            sa.String(255),
            nullable=False,
            comment="bcrypt hash; never returned by the API",
        ),
        sa.Column(
            "fecha_registro",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    # Login looks users up by email
    op.create_index("ix_usuarios_email", "usuarios", ["email"])

    op.create_table(
        "avistamientos",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("id_especie", sa.Integer(), nullable=True),
        sa.Column("id_usuario", sa.Integer(), nullable=True),
        sa.Column("fecha_avistamiento", sa.Date(), nullable=True),
        sa.Column("ubicacion", sa.String(255), nullable=True),
        sa.Column("imagen_url", sa.Text(), nullable=True),
        sa.Column("comentarios", sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(["id_especie"], ["especies.id"]),
        sa.ForeignKeyConstraint(["id_usuario"], ["usuarios.id"]),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "imagenes",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("id_avistamiento", sa.Integer(), nullable=True),
        sa.Column("url", sa.Text(), nullable=True),
        sa.Column("metadatos", sa.JSON(), nullable=True),
        sa.ForeignKeyConstraint(["id_avistamiento"], ["avistamientos.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_imagenes_id_avistamiento", "imagenes", ["id_avistamiento"])


def downgrade() -> None:
    op.drop_index("ix_imagenes_id_avistamiento", table_name="imagenes")
    op.drop_table("imagenes")
    op.drop_table("avistamientos")
    op.drop_index("ix_usuarios_email", table_name="usuarios")
    op.drop_table("usuarios")
    op.drop_table("especies")
