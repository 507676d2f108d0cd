# backend/tests/conftest.py
"""
Fixtures communes à la suite de tests.

Points clés :
- Stores en mémoire (InMemorySessionRepository / InMemoryInscriptionRepository) pour les tests
  du service et de l’API : aucune base requise.
- `client` : TestClient FastAPI dont les repositories SQL sont remplacés via dependency_overrides.
- `sqlite_db` : AsyncSession SQLite en mémoire (aiosqlite) + Base.metadata.create_all,
  pour tester les repositories SQL.
"""

from __future__ import annotations

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from espace_formation.api.deps import get_inscription_repository, get_session_repository
from espace_formation.db.base import Base
from espace_formation.main import app
from espace_formation.repositories.memory import InMemoryInscriptionRepository, InMemorySessionRepository
from espace_formation.services.session_service import SessionService


@pytest.fixture
def session_repo() -> InMemorySessionRepository:
    return InMemorySessionRepository()


@pytest.fixture
def inscription_repo() -> InMemoryInscriptionRepository:
    return InMemoryInscriptionRepository()


@pytest.fixture
def service(session_repo, inscription_repo) -> SessionService:
    return SessionService(session_repo, inscription_repo)


@pytest.fixture
def client(session_repo, inscription_repo):
    """TestClient branché sur les stores en mémoire (500 renvoyés, pas relevés)."""
    app.dependency_overrides[get_session_repository] = lambda: session_repo
    app.dependency_overrides[get_inscription_repository] = lambda: inscription_repo
    try:
        with TestClient(app, raise_server_exceptions=False) as c:
            yield c
    finally:
        app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def sqlite_db():
    """AsyncSession sur une base SQLite en mémoire partagée (schéma créé depuis la metadata)."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    factory = async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session

    await engine.dispose()
