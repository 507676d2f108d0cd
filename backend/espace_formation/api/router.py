from fastapi import APIRouter

from .health import router as health_router
from .sessions import router as sessions_router

"""
Router principal de l’API.

Rôle (fonctionnel) :
- Regroupe les routeurs par domaine (health, sessions).
- Point d’entrée unique pour l’inclusion dans l’application FastAPI.
"""

api_router = APIRouter()

api_router.include_router(health_router, tags=["health"])
api_router.include_router(sessions_router)
