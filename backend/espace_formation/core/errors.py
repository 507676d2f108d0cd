from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import HTTPException

"""
Core Errors.

Rôle (fonctionnel) :
- Standardise le format des erreurs renvoyées par l’API (payload homogène).
- Fournit une exception applicative (AppHTTPException) et ses déclinaisons typées :
  - NotFoundError  : ressource absente (404, sans corps)
  - ConflictError  : suppression refusée, des inscriptions dépendent de la session (400, message texte)
  - StorageError   : échec de la couche de persistance (500, sans corps ; détail uniquement dans les logs)
- `body` indique la forme de la réponse : enveloppe JSON (défaut), texte brut, ou vide.
  Le front historique lit les erreurs de /api/sessions sans enveloppe.
- Les exceptions non prévues restent gérées par le handler global (500 INTERNAL_ERROR).

Convention de réponse enveloppée (exemple) :
{
  "error": {
    "code": "VALIDATION_ERROR",
    "message": "Requête invalide",
    "status": 422,
    "request_id": "...",
    "timestamp": "...",
    "details": {...}
  }
}
"""


# Forme du corps de réponse d’une AppHTTPException
BODY_ENVELOPE = "envelope"
BODY_TEXT = "text"
BODY_EMPTY = "empty"


def now_iso() -> str:
    """Timestamp ISO-8601 en UTC (utilisé dans toutes les erreurs)."""
    return datetime.now(timezone.utc).isoformat()


def error_payload(
    *,
    code: str,
    message: str,
    status: int,
    request_id: str,
    details: Optional[Any] = None,
) -> Dict[str, Any]:
    """Construit un payload d’erreur homogène pour l’API."""
    payload: Dict[str, Any] = {
        "error": {
            "code": code,
            "message": message,
            "status": status,
            "request_id": request_id,
            "timestamp": now_iso(),
        }
    }
    if details is not None:
        payload["error"]["details"] = details
    return payload


class AppHTTPException(HTTPException):
    """
    Exception applicative standardisée.

    Usage :
    - Lever une erreur “métier” avec un code stable et un message explicite.
    - Laisser la couche API/middlewares produire une réponse cohérente.

    Exemple :
        raise AppHTTPException(404, "NOT_FOUND", "Session introuvable")
    """

    body = BODY_ENVELOPE

    def __init__(self, status_code: int, code: str, message: str, details: Any = None):
        # On conserve le format attendu par la couche de gestion d’erreurs de l’app
        super().__init__(status_code=status_code, detail={"code": code, "message": message, "details": details})
        self.code = code
        self.message = message
        self.details = details


class NotFoundError(AppHTTPException):
    """Ressource demandée absente (404)."""

    body = BODY_EMPTY

    def __init__(self, message: str = "Ressource introuvable", details: Any = None):
        super().__init__(404, "NOT_FOUND", message, details)


class ConflictError(AppHTTPException):
    """
    Conflit d’intégrité référentielle.

    Le contrat HTTP historique du front renvoie 400 (et non 409) : on le conserve.
    """

    body = BODY_TEXT

    def __init__(self, code: str, message: str, details: Any = None):
        super().__init__(400, code, message, details)


class StorageError(AppHTTPException):
    """Échec de la persistance : message générique côté client, cause dans les logs."""

    body = BODY_EMPTY

    def __init__(self, message: str = "Erreur d’accès aux données"):
        super().__init__(500, "STORAGE_ERROR", message)
