"""
espace_formation.services

Logique applicative (use-cases) indépendante des endpoints HTTP.

Principe :
- espace_formation.api = transport HTTP (routes, validation, dépendances)
- espace_formation.services = règles métier (réutilisables, testables sans HTTP)
- espace_formation.repositories = persistance interchangeable
"""
