from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

from .request_id import get_request_id

"""
Core Logging.

Rôle (fonctionnel) :
- Une ligne JSON par événement sur stdout, pour l’API comme pour uvicorn.
- Chaque ligne porte le request_id de la requête en cours.
- Événements métier du catalogue (session_created, session_delete_refused…) : l’id de session
  et le nombre d’inscriptions bloquantes sont des champs JSON à part entière.
"""

# Champs `extra` recopiés dans la ligne JSON
EXTRA_KEYS = (
    # accès HTTP (middleware d’observabilité)
    "method",
    "path",
    "status_code",
    "duration_ms",
    "client_ip",
    # catalogue
    "session_id",
    "inscriptions_count",
)


class RequestIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = get_request_id() or "-"
        return True


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        line: dict[str, Any] = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "request_id": getattr(record, "request_id", "-"),
            "msg": record.getMessage(),
        }
        line.update({key: getattr(record, key) for key in EXTRA_KEYS if hasattr(record, key)})

        if record.exc_info:
            line["exc_info"] = self.formatException(record.exc_info)

        # default=str : ids, dates ou Decimal passés en extra restent sérialisables
        return json.dumps(line, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO") -> None:
    """
    Installe le handler JSON sur le root logger (appelé une fois par main.py).

    Les handlers précédents sont retirés (rechargements uvicorn --reload),
    puis les loggers uvicorn partagent le même handler et le même niveau.
    """
    lvl = level.upper()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JsonFormatter())
    handler.addFilter(RequestIdFilter())

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(lvl)

    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers = [handler]
        uvicorn_logger.setLevel(lvl)
