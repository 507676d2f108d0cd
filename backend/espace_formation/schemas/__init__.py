"""
espace_formation.schemas

Package des schémas API (Pydantic).

Rôle (fonctionnel) :
- Définit les modèles d’entrée/sortie utilisés par l’API (request/response).
- Sépare clairement :
  - les modèles ORM (espace_formation.models) = persistance DB
  - les schémas Pydantic (espace_formation.schemas) = contrat HTTP JSON (camelCase)
"""
