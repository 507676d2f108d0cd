from fastapi import APIRouter

from espace_formation.core.settings import settings

"""
API Health.

Rôle (fonctionnel) :
- Endpoint simple pour vérifier que l’API répond (sonde de déploiement).
"""

router = APIRouter()


@router.get("/health")
def health():
    return {
        "status": "ok",
        "app": settings.APP_NAME,
        "env": settings.ENV,
    }
