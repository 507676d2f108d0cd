"""
espace_formation.repositories

Accès aux données (repository pattern).

- interfaces : protocoles SessionRepository / InscriptionRepository (contrat attendu par les services).
- sql        : implémentations SQLAlchemy async (runtime).
- memory     : implémentations en mémoire (tests, expérimentations locales).

Principe :
- Les services ne connaissent que les protocoles : le store est interchangeable.
- Les repositories SQL reçoivent une AsyncSession fournie par l’appelant (Depends(get_db)).
"""

from espace_formation.repositories.interfaces import InscriptionRepository, SessionRepository
from espace_formation.repositories.memory import InMemoryInscriptionRepository, InMemorySessionRepository
from espace_formation.repositories.sql import SqlInscriptionRepository, SqlSessionRepository

__all__ = [
    "SessionRepository",
    "InscriptionRepository",
    "SqlSessionRepository",
    "SqlInscriptionRepository",
    "InMemorySessionRepository",
    "InMemoryInscriptionRepository",
]
