"""
espace_formation.models

Package ORM (SQLAlchemy) : entités persistées en base.

- SessionFormation : session du catalogue de formations.
- Inscription      : inscription d’un participant, liée à une session par session_id.
"""

from espace_formation.models.session_formation import SessionFormation
from espace_formation.models.inscription import Inscription

__all__ = ["SessionFormation", "Inscription"]
