"""
espace_formation.db

Package base de données : base déclarative, engine async et dépendance `get_db`.

- base    : classe Base commune aux modèles ORM (sessions_formation, inscriptions).
- session : engine async + factory AsyncSession pour FastAPI (Depends(get_db)).
- migrations : Alembic (backend/alembic), côté sync via DATABASE_URL_SYNC.
"""
