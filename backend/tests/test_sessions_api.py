# backend/tests/test_sessions_api.py
"""
Contrat HTTP de /api/sessions (stores en mémoire).

Couvre :
- CRUD complet et codes de retour (200 / 404 / 400 / 422 / 500)
- assainissement de placesReservees à la création
- fusion partielle à la mise à jour
- suppression bloquée par des inscriptions (message contenant le nombre)
- format d’erreur standard + propagation du X-Request-Id
"""

from __future__ import annotations

import asyncio

import pytest

from espace_formation.api.deps import get_session_repository
from espace_formation.core.errors import StorageError
from espace_formation.main import app
from espace_formation.models.inscription import Inscription

pytestmark = pytest.mark.unit

BASE = "/api/sessions"


# ---------- helpers ----------
def _create(client, **payload) -> dict:
    r = client.post(BASE, json=payload)
    assert r.status_code == 200, r.text
    return r.json()


def _inscrire(inscription_repo, session_id: str, n: int) -> None:
    for i in range(n):
        asyncio.run(inscription_repo.save(Inscription(session_id=session_id, user_id=f"user-{i}")))


class _BrokenSessionRepository:
    """Repository qui échoue à chaque appel (stockage indisponible ou bug)."""

    def __init__(self, exc: Exception) -> None:
        self.exc = exc

    async def find_all(self):
        raise self.exc

    async def find_by_id(self, session_id):
        raise self.exc

    async def save(self, session):
        raise self.exc

    async def delete_by_id(self, session_id):
        raise self.exc


# ---------- lecture ----------
def test_list_sessions_empty(client):
    r = client.get(BASE)
    assert r.status_code == 200
    assert r.json() == []


def test_list_sessions_returns_all(client):
    a = _create(client, title="Python")
    b = _create(client, title="SQL")

    r = client.get(BASE)
    assert r.status_code == 200
    ids = [s["id"] for s in r.json()]
    assert ids == [a["id"], b["id"]]


def test_get_session_by_id(client):
    created = _create(client, title="Docker", lieu="Lyon", price=620.5, placesTotales=12)

    r = client.get(f"{BASE}/{created['id']}")
    assert r.status_code == 200
    body = r.json()
    assert body["title"] == "Docker"
    assert body["lieu"] == "Lyon"
    assert body["price"] == 620.5
    assert body["placesTotales"] == 12


def test_get_unknown_session_returns_404(client):
    r = client.get(f"{BASE}/inconnue")
    assert r.status_code == 404
    assert r.content == b""


# ---------- création ----------
def test_create_clamps_negative_places_reservees_then_get_reflects_it(client):
    created = _create(client, title="Intro to X", placesReservees=-5)
    assert created["id"]
    assert created["placesReservees"] == 0

    r = client.get(f"{BASE}/{created['id']}")
    assert r.status_code == 200
    assert r.json()["placesReservees"] == 0


def test_create_defaults_missing_places_reservees_to_zero(client):
    created = _create(client, title="Sans compteur")
    assert created["placesReservees"] == 0


@pytest.mark.parametrize("value", [0, 3])
def test_create_keeps_non_negative_places_reservees(client, value):
    created = _create(client, title="Compteur", placesReservees=value)
    assert created["placesReservees"] == value


def test_create_serializes_camel_case_fields(client):
    created = _create(
        client,
        title="React",
        dates="3-5 mars 2026",
        level="Débutant",
        category="Développement",
        desc="Les fondamentaux",
        placesTotales=10,
        placesReservees=2,
    )
    assert created["desc"] == "Les fondamentaux"
    assert created["placesTotales"] == 10
    assert "places_totales" not in created


def test_create_with_invalid_type_returns_422(client):
    r = client.post(BASE, json={"title": "X", "price": "gratuit"})
    assert r.status_code == 422
    assert r.json()["error"]["code"] == "VALIDATION_ERROR"


# ---------- mise à jour ----------
def test_update_overwrites_only_provided_fields(client):
    created = _create(client, title="Avant", lieu="Paris", price=100.0, level="Débutant")

    r = client.put(f"{BASE}/{created['id']}", json={"title": "Après", "price": 150.0})
    assert r.status_code == 200
    body = r.json()
    assert body["title"] == "Après"
    assert body["price"] == 150.0
    assert body["lieu"] == "Paris"
    assert body["level"] == "Débutant"


def test_update_ignores_explicit_nulls(client):
    created = _create(client, title="Garde", category="Data")

    r = client.put(f"{BASE}/{created['id']}", json={"title": None, "category": None})
    assert r.status_code == 200
    assert r.json()["title"] == "Garde"
    assert r.json()["category"] == "Data"


def test_update_places_totales_requires_strictly_positive(client):
    created = _create(client, title="Capacité", placesTotales=12)
    sid = created["id"]

    assert client.put(f"{BASE}/{sid}", json={"placesTotales": 0}).json()["placesTotales"] == 12
    assert client.put(f"{BASE}/{sid}", json={"placesTotales": -4}).json()["placesTotales"] == 12
    assert client.put(f"{BASE}/{sid}", json={"placesTotales": 20}).json()["placesTotales"] == 20


def test_update_places_reservees_requires_non_negative(client):
    created = _create(client, title="Réservations", placesReservees=4)
    sid = created["id"]

    assert client.put(f"{BASE}/{sid}", json={"placesReservees": -1}).json()["placesReservees"] == 4
    assert client.put(f"{BASE}/{sid}", json={"placesReservees": 0}).json()["placesReservees"] == 0


def test_update_keeps_path_id(client):
    created = _create(client, title="Identité")

    r = client.put(f"{BASE}/{created['id']}", json={"id": "autre", "title": "Renommée"})
    assert r.status_code == 200
    assert r.json()["id"] == created["id"]
    assert client.get(f"{BASE}/autre").status_code == 404


def test_update_unknown_session_returns_404(client):
    r = client.put(f"{BASE}/inconnue", json={"title": "X"})
    assert r.status_code == 404


# ---------- suppression ----------
def test_delete_without_inscriptions(client):
    created = _create(client, title="À supprimer")

    r = client.delete(f"{BASE}/{created['id']}")
    assert r.status_code == 200
    assert r.content == b""

    assert client.get(f"{BASE}/{created['id']}").status_code == 404


def test_delete_blocked_by_inscriptions(client, inscription_repo):
    created = _create(client, title="Complète")
    _inscrire(inscription_repo, created["id"], 2)

    r = client.delete(f"{BASE}/{created['id']}")
    assert r.status_code == 400
    assert r.headers["content-type"].startswith("text/plain")
    assert r.text.startswith("Impossible de supprimer cette session car 2 utilisateur(s)")
    assert "supprimer les inscriptions associées" in r.text

    # La session est toujours là
    assert client.get(f"{BASE}/{created['id']}").status_code == 200


def test_delete_ignores_inscriptions_of_other_sessions(client, inscription_repo):
    cible = _create(client, title="Cible")
    autre = _create(client, title="Autre")
    _inscrire(inscription_repo, autre["id"], 3)

    assert client.delete(f"{BASE}/{cible['id']}").status_code == 200


def test_delete_unknown_session_returns_404(client):
    assert client.delete(f"{BASE}/inconnue").status_code == 404


# ---------- erreurs / observabilité ----------
def test_not_found_echoes_request_id_header(client):
    r = client.get(f"{BASE}/inconnue", headers={"X-Request-Id": "req-123"})
    assert r.status_code == 404
    assert r.headers["X-Request-Id"] == "req-123"
    assert r.content == b""


def test_request_id_generated_when_missing(client):
    r = client.get(BASE)
    assert r.headers.get("X-Request-Id")


def test_storage_failure_returns_empty_500(client):
    app.dependency_overrides[get_session_repository] = lambda: _BrokenSessionRepository(StorageError())

    r = client.post(BASE, json={"title": "X"})
    assert r.status_code == 500
    assert r.content == b""


def test_unexpected_failure_returns_empty_500_with_request_id(client):
    app.dependency_overrides[get_session_repository] = lambda: _BrokenSessionRepository(
        RuntimeError("connexion perdue vers 10.0.0.3")
    )

    r = client.get(BASE, headers={"X-Request-Id": "req-500"})
    assert r.status_code == 500
    assert r.content == b""
    assert r.headers["X-Request-Id"] == "req-500"


def test_validation_error_keeps_standard_payload(client):
    r = client.put(f"{BASE}/quelconque", json={"placesTotales": "beaucoup"}, headers={"X-Request-Id": "req-422"})
    assert r.status_code == 422
    error = r.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["request_id"] == "req-422"
    assert "timestamp" in error


def test_unknown_route_keeps_standard_payload(client):
    r = client.get("/api/inconnu")
    assert r.status_code == 404
    assert r.json()["error"]["code"] == "NOT_FOUND"


# ---------- CORS / health ----------
@pytest.mark.parametrize("origin", ["http://localhost:5173", "https://mon-espace.vercel.app"])
def test_cors_allows_known_origins(client, origin):
    r = client.options(
        BASE,
        headers={"Origin": origin, "Access-Control-Request-Method": "PUT"},
    )
    assert r.status_code == 200
    assert r.headers["access-control-allow-origin"] == origin


def test_cors_rejects_unknown_origin(client):
    r = client.options(
        BASE,
        headers={"Origin": "https://evil.example.com", "Access-Control-Request-Method": "GET"},
    )
    assert "access-control-allow-origin" not in r.headers


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"
