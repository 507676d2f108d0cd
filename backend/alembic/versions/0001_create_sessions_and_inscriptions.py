"""Création des tables sessions_formation et inscriptions.

Rôle (fonctionnel) :
- sessions_formation : catalogue des sessions (fiche descriptive + compteurs de places).
- inscriptions : inscriptions des participants, rattachées par session_id (indexé).
  Pas de clé étrangère : l’intégrité (suppression bloquée) est gérée par l’application.

Revision ID: 0001
Revises:
Create Date: 2026-10-18
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# Identifiants Alembic
revision: str = "0001"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Application des changements de schéma."""
    op.create_table(
        "sessions_formation",
        sa.Column("id", sa.String(length=64), primary_key=True),
        sa.Column("title", sa.String(length=255), nullable=True),
        sa.Column("dates", sa.String(length=255), nullable=True),
        sa.Column("lieu", sa.String(length=255), nullable=True),
        sa.Column("price", sa.Float(), nullable=True),
        sa.Column("level", sa.String(length=100), nullable=True),
        sa.Column("category", sa.String(length=100), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("places_totales", sa.Integer(), nullable=True),
        sa.Column("places_reservees", sa.Integer(), nullable=True),
    )

    op.create_table(
        "inscriptions",
        sa.Column("id", sa.String(length=64), primary_key=True),
        sa.Column("session_id", sa.String(length=64), nullable=False),
        sa.Column("user_id", sa.String(length=64), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_inscriptions_session_id", "inscriptions", ["session_id"], unique=False)


def downgrade() -> None:
    """Retour arrière des changements de schéma."""
    op.drop_index("ix_inscriptions_session_id", table_name="inscriptions")
    op.drop_table("inscriptions")
    op.drop_table("sessions_formation")
