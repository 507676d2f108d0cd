from __future__ import annotations

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from espace_formation.db.session import get_db
from espace_formation.repositories.interfaces import InscriptionRepository, SessionRepository
from espace_formation.repositories.sql import SqlInscriptionRepository, SqlSessionRepository
from espace_formation.services.session_service import SessionService

"""
Dépendances API.

Rôle (fonctionnel) :
- Câble les repositories SQL sur la session DB de la requête.
- Construit le SessionService injecté dans les routes.
- Point de substitution des tests : app.dependency_overrides[get_session_repository] = ...
"""


def get_session_repository(db: AsyncSession = Depends(get_db)) -> SessionRepository:
    return SqlSessionRepository(db)


def get_inscription_repository(db: AsyncSession = Depends(get_db)) -> InscriptionRepository:
    return SqlInscriptionRepository(db)


def get_session_service(
    sessions: SessionRepository = Depends(get_session_repository),
    inscriptions: InscriptionRepository = Depends(get_inscription_repository),
) -> SessionService:
    return SessionService(sessions, inscriptions)


# Dépendance prête à l’emploi pour les routes sessions
SessionServiceDep = Depends(get_session_service)
