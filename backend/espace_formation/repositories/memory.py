from __future__ import annotations

from datetime import datetime, timezone
from typing import Dict, List, Optional, Sequence

from espace_formation.models.inscription import Inscription
from espace_formation.models.session_formation import SessionFormation, new_id

"""
Repositories en mémoire.

Rôle (fonctionnel) :
- Implémentations sans base de données des protocoles SessionRepository / InscriptionRepository.
- Utilisées par les tests (HTTP et service) via app.dependency_overrides.

Notes :
- Les entités sont des instances ORM “transientes” (jamais attachées à une session SQLAlchemy).
- find_all renvoie les sessions dans l’ordre d’insertion (dict Python).
- Pas de verrou : une instance par test / par process mono-thread asyncio.
"""


class InMemorySessionRepository:
    def __init__(self) -> None:
        self._items: Dict[str, SessionFormation] = {}

    async def find_all(self) -> Sequence[SessionFormation]:
        return list(self._items.values())

    async def find_by_id(self, session_id: str) -> Optional[SessionFormation]:
        return self._items.get(session_id)

    async def save(self, session: SessionFormation) -> SessionFormation:
        if session.id is None:
            session.id = new_id()
        self._items[session.id] = session
        return session

    async def delete_by_id(self, session_id: str) -> None:
        self._items.pop(session_id, None)


class InMemoryInscriptionRepository:
    def __init__(self) -> None:
        self._items: List[Inscription] = []

    async def find_by_session_id(self, session_id: str) -> Sequence[Inscription]:
        return [i for i in self._items if i.session_id == session_id]

    async def save(self, inscription: Inscription) -> Inscription:
        if inscription.id is None:
            inscription.id = new_id()
        if inscription.created_at is None:
            inscription.created_at = datetime.now(timezone.utc)
        # Remplace une inscription existante de même id (upsert)
        self._items = [i for i in self._items if i.id != inscription.id]
        self._items.append(inscription)
        return inscription
