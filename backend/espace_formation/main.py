from __future__ import annotations

import time
import uuid
import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.responses import JSONResponse, PlainTextResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from espace_formation.api.router import api_router
from espace_formation.api.sessions import router as sessions_router
from espace_formation.core.settings import settings
from espace_formation.core.logging import setup_logging
from espace_formation.core.errors import BODY_EMPTY, BODY_TEXT, error_payload, AppHTTPException
from espace_formation.core.request_id import REQUEST_ID_HEADER, set_request_id, get_request_id, ensure_request_id

"""
Application FastAPI (entrypoint).

Rôle (fonctionnel) :
- Configure l’application (settings, CORS, middleware, routers).
- Centralise l’observabilité :
  - request_id propagé (X-Request-Id)
  - logs structurés JSON (timing, status, client_ip)
  - seuil de “slow request”
- Uniformise les erreurs côté client, sans stacktrace :
  - /api/sessions : 404 et 500 sans corps, 400 en texte brut (contrat du front)
  - autres cas (422, route inconnue…) : enveloppe error_payload

Ce fichier ne contient pas de logique métier :
- Les règles métier sont dans espace_formation.services
- Les routes sont dans espace_formation.api
- Les composants transverses sont dans espace_formation.core
"""


class UTF8JSONResponse(JSONResponse):
    """Réponse JSON avec charset UTF-8 explicite (messages d’erreur accentués)."""
    media_type = "application/json; charset=utf-8"


setup_logging(settings.LOG_LEVEL)

log = logging.getLogger("espace_formation")

# logger dédié observabilité HTTP (séparé du métier)
http_log = logging.getLogger("espace_formation.http")

SLOW_MS = int(settings.SLOW_REQUEST_MS)


def _split_origins(value: str) -> list[str]:
    """Parse une liste d’origines CORS depuis une string 'a,b,c'."""
    if not value:
        return []
    return [o.strip() for o in value.split(",") if o.strip()]


def _request_id_of(request: Request) -> str:
    return getattr(request.state, "request_id", None) or get_request_id() or str(uuid.uuid4())


app = FastAPI(
    title=settings.APP_NAME,
    debug=settings.DEBUG,
    default_response_class=UTF8JSONResponse,
)

# --- CORS : front local (Vite) + déploiements Vercel ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=_split_origins(settings.CORS_ORIGINS),
    allow_origin_regex=settings.CORS_ORIGIN_REGEX or None,
    allow_credentials=False,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", REQUEST_ID_HEADER],
    expose_headers=[REQUEST_ID_HEADER],
)

app.include_router(api_router)


@app.middleware("http")
async def request_observability(request: Request, call_next):
    rid = ensure_request_id(request.headers.get(REQUEST_ID_HEADER))
    request.state.request_id = rid

    start = time.perf_counter()
    status_code = None
    try:
        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = rid
        status_code = response.status_code
        return response
    except Exception:
        # Rendue en 500 par unhandled_exception_handler
        status_code = 500
        raise
    finally:
        duration_ms = int((time.perf_counter() - start) * 1000)

        level = logging.WARNING if duration_ms >= SLOW_MS else logging.INFO
        http_log.log(
            level,
            "request",
            extra={
                "method": request.method,
                "path": request.url.path,
                "status_code": status_code,
                "duration_ms": duration_ms,
                "client_ip": request.client.host if request.client else None,
            },
        )

        set_request_id(None)


# --- Error handlers : format standard, pas de stacktrace côté client ---
@app.exception_handler(AppHTTPException)
async def app_http_exception_handler(request: Request, exc: AppHTTPException):
    """Erreurs applicatives typées : corps vide, texte brut ou payload standard selon exc.body."""
    rid = _request_id_of(request)
    headers = {REQUEST_ID_HEADER: rid}

    if exc.body == BODY_EMPTY:
        return Response(status_code=exc.status_code, headers=headers)
    if exc.body == BODY_TEXT:
        return PlainTextResponse(exc.message, status_code=exc.status_code, headers=headers)

    return UTF8JSONResponse(
        status_code=exc.status_code,
        content=error_payload(
            code=exc.code,
            message=exc.message,
            status=exc.status_code,
            request_id=rid,
            details=exc.details,
        ),
        headers=headers,
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Erreurs HTTP natives (route inconnue, 405…) -> payload standard."""
    code = "NOT_FOUND" if exc.status_code == 404 else "HTTP_ERROR"
    return UTF8JSONResponse(
        status_code=exc.status_code,
        content=error_payload(code=code, message=str(exc.detail), status=exc.status_code, request_id=_request_id_of(request)),
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Erreurs de validation Pydantic -> 422 + details=exc.errors()."""
    return UTF8JSONResponse(
        status_code=422,
        content=error_payload(
            code="VALIDATION_ERROR",
            message="Requête invalide",
            status=422,
            request_id=_request_id_of(request),
            details=jsonable_encoder(exc.errors()),
        ),
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """Fallback : toute exception non gérée -> 500 + log serveur (sans corps sur /api/sessions)."""
    log.exception("Unhandled error: %s", exc)

    # Ce handler s’exécute hors du middleware d’observabilité : on repose le header ici
    rid = _request_id_of(request)
    headers = {REQUEST_ID_HEADER: rid}

    if request.url.path.startswith(sessions_router.prefix):
        return Response(status_code=500, headers=headers)

    return UTF8JSONResponse(
        status_code=500,
        content=error_payload(
            code="INTERNAL_ERROR",
            message="Erreur interne du serveur",
            status=500,
            request_id=rid,
        ),
        headers=headers,
    )
