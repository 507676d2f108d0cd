from __future__ import annotations

import uuid

from sqlalchemy import Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from espace_formation.db.base import Base

"""
Model SessionFormation.

Rôle (fonctionnel) :
- Représente une session de formation du catalogue (offre planifiable avec capacité).
- Tous les champs descriptifs sont optionnels : le catalogue accepte des fiches incomplètes.

Compteurs de places :
- places_totales   : capacité totale ; une mise à jour ne l’applique que si > 0.
- places_reservees : places déjà prises ; jamais négatif (0 par défaut à la création).

Relation :
- 0..N Inscription via inscriptions.session_id, contrôlée par l’application
  (pas de FK en base : la suppression est refusée côté service tant que des inscriptions existent).
"""


def new_id() -> str:
    return str(uuid.uuid4())


class SessionFormation(Base):
    __tablename__ = "sessions_formation"

    # Identifiant (chaîne, attribué par le store si absent)
    id: Mapped[str] = mapped_column(String(64), primary_key=True, default=new_id)

    # Fiche descriptive
    title: Mapped[str | None] = mapped_column(String(255), nullable=True)
    dates: Mapped[str | None] = mapped_column(String(255), nullable=True)
    lieu: Mapped[str | None] = mapped_column(String(255), nullable=True)
    price: Mapped[float | None] = mapped_column(Float, nullable=True)
    level: Mapped[str | None] = mapped_column(String(100), nullable=True)
    category: Mapped[str | None] = mapped_column(String(100), nullable=True)

    # "desc" est un mot réservé SQL : colonne nommée description
    desc: Mapped[str | None] = mapped_column("description", Text, nullable=True)

    # Capacité
    places_totales: Mapped[int | None] = mapped_column(Integer, nullable=True)
    places_reservees: Mapped[int | None] = mapped_column(Integer, nullable=True, default=0)

    def __repr__(self) -> str:
        return f"<SessionFormation id={self.id!r} title={self.title!r}>"
