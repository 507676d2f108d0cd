from __future__ import annotations

import uuid
from contextvars import ContextVar

"""
Core Request ID.

Rôle (fonctionnel) :
- Identifiant de corrélation (request_id) porté par un ContextVar, propre à chaque requête async.
- Repris du header entrant X-Request-Id s’il est fourni, sinon généré (UUID4).
- Lu par le logging (champ request_id) et par les handlers d’erreurs (payload d’erreur).
"""

REQUEST_ID_HEADER = "X-Request-Id"

# Longueur max acceptée depuis un header client (au-delà : on régénère)
MAX_REQUEST_ID_LENGTH = 64

_request_id: ContextVar[str | None] = ContextVar("request_id", default=None)


def set_request_id(rid: str | None) -> None:
    _request_id.set(rid)


def get_request_id() -> str | None:
    return _request_id.get()


def ensure_request_id(incoming: str | None = None) -> str:
    """
    Garantit un request_id pour le contexte courant.

    - Valeur entrante nettoyée et réutilisée si elle est raisonnable.
    - Sinon, un UUID4 est généré.
    """
    rid = (incoming or "").strip()
    if not rid or len(rid) > MAX_REQUEST_ID_LENGTH:
        rid = str(uuid.uuid4())
    set_request_id(rid)
    return rid
