"""
espace_formation.core

Package “cœur” de l’application : tout ce qui est transversal (cross-cutting concerns),
indépendant du domaine métier (sessions, inscriptions).

- settings
  Centralise la configuration (variables d’environnement, CORS, URLs de base de données).

- errors
  Format d’erreur API uniforme (code, message, status, request_id, timestamp) et exceptions
  applicatives typées (NotFoundError, ConflictError, StorageError).

- logging
  Logs JSON (1 ligne = 1 événement) enrichis du request_id.

- request_id
  Identifiant de corrélation d’une requête, propagé via le header X-Request-Id.
"""
