from __future__ import annotations

from typing import Optional, Protocol, Sequence

from espace_formation.models.inscription import Inscription
from espace_formation.models.session_formation import SessionFormation

"""
Interfaces des repositories.

Rôle (fonctionnel) :
- Décrit le contrat de persistance attendu par SessionService.
- Toute implémentation (SQL, mémoire, document store…) qui respecte ces méthodes est utilisable.
"""


class SessionRepository(Protocol):
    """Persistance des sessions de formation."""

    async def find_all(self) -> Sequence[SessionFormation]:
        """Toutes les sessions, sans filtre ni pagination."""
        ...

    async def find_by_id(self, session_id: str) -> Optional[SessionFormation]:
        """La session ou None si absente."""
        ...

    async def save(self, session: SessionFormation) -> SessionFormation:
        """
        Insère ou remplace la session (upsert sur l’id).
        Attribue un id si la session n’en a pas, et renvoie l’entité persistée.
        """
        ...

    async def delete_by_id(self, session_id: str) -> None:
        ...


class InscriptionRepository(Protocol):
    """Persistance des inscriptions (seul l’accès par session est nécessaire côté sessions)."""

    async def find_by_session_id(self, session_id: str) -> Sequence[Inscription]:
        ...

    async def save(self, inscription: Inscription) -> Inscription:
        ...
