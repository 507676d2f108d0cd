from __future__ import annotations

from typing import List

from fastapi import APIRouter, Response

from espace_formation.api.deps import SessionServiceDep
from espace_formation.schemas.sessions import (
    SessionFormationCreate,
    SessionFormationOut,
    SessionFormationUpdate,
)
from espace_formation.services.session_service import SessionService

"""
API Sessions de formation.

Rôle (fonctionnel) :
- Catalogue : liste complète et détail d’une session.
- Création (places réservées assainies), mise à jour partielle, suppression.
- La suppression est refusée (400) tant que des inscriptions référencent la session.

Les règles métier vivent dans SessionService ; les erreurs typées (404 / 400 / 500)
sont rendues au format standard par les handlers de main.py.
"""

router = APIRouter(prefix="/api/sessions", tags=["sessions"])


@router.get("", response_model=List[SessionFormationOut])
async def list_sessions(service: SessionService = SessionServiceDep):
    return await service.list_sessions()


@router.get("/{session_id}", response_model=SessionFormationOut)
async def get_session(session_id: str, service: SessionService = SessionServiceDep):
    return await service.get_session(session_id)


@router.post("", response_model=SessionFormationOut)
async def create_session(payload: SessionFormationCreate, service: SessionService = SessionServiceDep):
    return await service.create_session(payload)


@router.put("/{session_id}", response_model=SessionFormationOut)
async def update_session(
    session_id: str,
    payload: SessionFormationUpdate,
    service: SessionService = SessionServiceDep,
):
    return await service.update_session(session_id, payload)


@router.delete("/{session_id}", response_class=Response)
async def delete_session(session_id: str, service: SessionService = SessionServiceDep):
    await service.delete_session(session_id)
    # 200 sans corps (contrat historique du front)
    return Response(status_code=200)
