from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from espace_formation.db.base import Base
from espace_formation.models.session_formation import new_id

"""
Model Inscription.

Rôle (fonctionnel) :
- Inscription d’un participant à une session de formation.
- Rattachée à sa session par session_id (indexé) : c’est la clé interrogée
  avant toute suppression de session.

Note :
- Volontairement sans ForeignKey : l’intégrité est garantie par SessionService.delete_session.
"""


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Inscription(Base):
    __tablename__ = "inscriptions"

    id: Mapped[str] = mapped_column(String(64), primary_key=True, default=new_id)

    # Session ciblée (clé de recherche du garde de suppression)
    session_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)

    # Participant (identifiant côté front / auth) — optionnel
    user_id: Mapped[str | None] = mapped_column(String(64), nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)
