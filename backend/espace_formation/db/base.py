from sqlalchemy.orm import DeclarativeBase

"""
DB Base.

Rôle (fonctionnel) :
- Classe Base SQLAlchemy commune aux modèles (SessionFormation, Inscription).
- Sa metadata sert aux migrations Alembic et à la création de schéma dans les tests.
"""


class Base(DeclarativeBase):
    pass
