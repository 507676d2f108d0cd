from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from espace_formation.core.settings import settings

"""
DB Session.

Rôle (fonctionnel) :
- Initialise l’engine SQLAlchemy en mode async (runtime FastAPI).
- Fournit une factory de sessions AsyncSession (AsyncSessionLocal).
- Expose `get_db()` comme dépendance FastAPI : une session par requête,
  injectée dans les repositories SQL (voir api/deps.py).

Notes :
- expire_on_commit=False : les entités restent lisibles après commit (sérialisation de la réponse).
- pool_pre_ping=True : une connexion morte du pool est détectée avant usage.
"""

engine = create_async_engine(settings.DATABASE_URL, echo=False, pool_pre_ping=True)

AsyncSessionLocal = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def get_db():
    """Dépendance FastAPI : yield une session DB et garantit sa fermeture."""
    async with AsyncSessionLocal() as session:
        yield session
