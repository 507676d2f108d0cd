"""
espace_formation

Package racine du backend “Mon Espace Formation”.

Rôle (fonctionnel) :
- Expose l’API REST du catalogue de sessions de formation (CRUD + garde sur les inscriptions).
- Sert de point d’ancrage pour les imports : `from espace_formation...`

Organisation (haute-level) :
- espace_formation.api          : routes FastAPI (contrats HTTP, dépendances)
- espace_formation.core         : briques transverses (settings, errors, logs, request_id)
- espace_formation.db           : base SQLAlchemy + session async
- espace_formation.models       : modèles ORM (sessions, inscriptions)
- espace_formation.schemas      : schémas Pydantic (entrées/sorties API)
- espace_formation.repositories : accès aux données (SQL + mémoire)
- espace_formation.services     : règles métier (assainissement, fusion partielle, suppression)
"""
