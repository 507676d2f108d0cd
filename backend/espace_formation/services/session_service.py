from __future__ import annotations

import logging
from typing import Sequence

from espace_formation.core.errors import ConflictError, NotFoundError
from espace_formation.models.session_formation import SessionFormation
from espace_formation.repositories.interfaces import InscriptionRepository, SessionRepository
from espace_formation.schemas.sessions import SessionFormationCreate, SessionFormationUpdate

"""
Session Service.

Rôle (fonctionnel) :
- Porte les règles métier du catalogue de sessions, indépendamment du transport HTTP :
  - création : places_reservees null ou négatif -> 0
  - mise à jour partielle : seuls les champs non nuls écrasent l’existant (“absent = inchangé”)
  - suppression : refusée tant que des inscriptions référencent la session
- Lève des erreurs typées (NotFoundError, ConflictError) ; les échecs de stockage
  remontent des repositories sous forme de StorageError.

Limite connue :
- Pas de contrôle de concurrence : deux PUT simultanés sur la même session peuvent
  s’écraser (lecture -> fusion -> écriture, dernier arrivé gagnant).
"""

log = logging.getLogger("espace_formation.sessions")

# Champs recopiés tels quels dès qu’ils sont fournis (non nuls)
MERGEABLE_FIELDS = ("title", "dates", "lieu", "price", "level", "category", "desc")

DELETE_BLOCKED_CODE = "SESSION_HAS_INSCRIPTIONS"


def sanitize_places_reservees(value: int | None) -> int:
    """Places réservées à la création : jamais null, jamais négatif."""
    if value is None or value < 0:
        return 0
    return value


def merge_session_update(session: SessionFormation, update: SessionFormationUpdate) -> SessionFormation:
    """
    Applique une mise à jour partielle sur `session` (mutée et renvoyée).

    - Champs descriptifs : écrasés si la valeur entrante n’est pas None.
    - places_totales : écrasé seulement si > 0.
    - places_reservees : écrasé seulement si >= 0.
    """
    for field in MERGEABLE_FIELDS:
        value = getattr(update, field)
        if value is not None:
            setattr(session, field, value)

    if update.places_totales is not None and update.places_totales > 0:
        session.places_totales = update.places_totales

    if update.places_reservees is not None and update.places_reservees >= 0:
        session.places_reservees = update.places_reservees

    return session


def delete_blocked_message(count: int) -> str:
    return (
        f"Impossible de supprimer cette session car {count} utilisateur(s) y sont déjà inscrit(s). "
        "Veuillez d'abord supprimer les inscriptions associées."
    )


class SessionService:
    """
    Cas d’usage CRUD sur les sessions de formation.

    Les repositories sont injectés (SQL en production, mémoire en test).
    """

    def __init__(self, sessions: SessionRepository, inscriptions: InscriptionRepository) -> None:
        self.sessions = sessions
        self.inscriptions = inscriptions

    async def list_sessions(self) -> Sequence[SessionFormation]:
        return await self.sessions.find_all()

    async def get_session(self, session_id: str) -> SessionFormation:
        session = await self.sessions.find_by_id(session_id)
        if session is None:
            raise NotFoundError("Session introuvable", details={"session_id": session_id})
        return session

    async def create_session(self, payload: SessionFormationCreate) -> SessionFormation:
        data = payload.model_dump(exclude={"places_reservees"})
        session = SessionFormation(**data)
        session.places_reservees = sanitize_places_reservees(payload.places_reservees)

        saved = await self.sessions.save(session)
        log.info("session_created", extra={"session_id": saved.id})
        return saved

    async def update_session(self, session_id: str, payload: SessionFormationUpdate) -> SessionFormation:
        session = await self.get_session(session_id)
        merge_session_update(session, payload)

        saved = await self.sessions.save(session)
        log.info("session_updated", extra={"session_id": saved.id})
        return saved

    async def delete_session(self, session_id: str) -> None:
        await self.get_session(session_id)

        inscriptions = await self.inscriptions.find_by_session_id(session_id)
        count = len(inscriptions)
        if count:
            log.warning(
                "session_delete_refused",
                extra={"session_id": session_id, "inscriptions_count": count},
            )
            raise ConflictError(
                DELETE_BLOCKED_CODE,
                delete_blocked_message(count),
                details={"session_id": session_id, "inscriptions_count": count},
            )

        await self.sessions.delete_by_id(session_id)
        log.info("session_deleted", extra={"session_id": session_id})
