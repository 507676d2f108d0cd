from __future__ import annotations

import logging
from typing import Optional, Sequence

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from espace_formation.core.errors import StorageError
from espace_formation.models.inscription import Inscription
from espace_formation.models.session_formation import SessionFormation, new_id

"""
Repositories SQL (SQLAlchemy async).

Rôle (fonctionnel) :
- Implémente SessionRepository / InscriptionRepository sur une AsyncSession.
- Le repository reçoit la session DB (Depends(get_db)) : il ne la crée ni ne la ferme.
- Les écritures sont commitées dans `save` / `delete_by_id` (une opération = une transaction).

Erreurs :
- Toute SQLAlchemyError est journalisée (stacktrace), suivie d’un rollback,
  puis convertie en StorageError (500 générique côté client).
"""

log = logging.getLogger("espace_formation.repositories")


class _SqlRepository:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def _fail(self, exc: SQLAlchemyError, operation: str) -> StorageError:
        log.error("storage_failure: %s", operation, exc_info=exc)
        await self.db.rollback()
        return StorageError()


class SqlSessionRepository(_SqlRepository):
    """Sessions de formation en base relationnelle (table sessions_formation)."""

    async def find_all(self) -> Sequence[SessionFormation]:
        try:
            result = await self.db.execute(select(SessionFormation).order_by(SessionFormation.id))
            return result.scalars().all()
        except SQLAlchemyError as exc:
            raise await self._fail(exc, "sessions.find_all") from exc

    async def find_by_id(self, session_id: str) -> Optional[SessionFormation]:
        try:
            return await self.db.get(SessionFormation, session_id)
        except SQLAlchemyError as exc:
            raise await self._fail(exc, "sessions.find_by_id") from exc

    async def save(self, session: SessionFormation) -> SessionFormation:
        try:
            if session.id is None:
                session.id = new_id()
                self.db.add(session)
            else:
                # Upsert : rattache (ou fusionne) l’instance sur la ligne existante
                session = await self.db.merge(session)
            await self.db.commit()
            await self.db.refresh(session)
            return session
        except SQLAlchemyError as exc:
            raise await self._fail(exc, "sessions.save") from exc

    async def delete_by_id(self, session_id: str) -> None:
        try:
            await self.db.execute(delete(SessionFormation).where(SessionFormation.id == session_id))
            await self.db.commit()
        except SQLAlchemyError as exc:
            raise await self._fail(exc, "sessions.delete_by_id") from exc


class SqlInscriptionRepository(_SqlRepository):
    """Inscriptions en base relationnelle (table inscriptions)."""

    async def find_by_session_id(self, session_id: str) -> Sequence[Inscription]:
        try:
            result = await self.db.execute(
                select(Inscription)
                .where(Inscription.session_id == session_id)
                .order_by(Inscription.created_at)
            )
            return result.scalars().all()
        except SQLAlchemyError as exc:
            raise await self._fail(exc, "inscriptions.find_by_session_id") from exc

    async def save(self, inscription: Inscription) -> Inscription:
        try:
            if inscription.id is None:
                inscription.id = new_id()
                self.db.add(inscription)
            else:
                inscription = await self.db.merge(inscription)
            await self.db.commit()
            await self.db.refresh(inscription)
            return inscription
        except SQLAlchemyError as exc:
            raise await self._fail(exc, "inscriptions.save") from exc
