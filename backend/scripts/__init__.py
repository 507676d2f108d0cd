"""
scripts

Scripts exécutables (CLI) liés au projet : seed de données de démonstration, tâches ponctuelles.

Note :
- Les scripts orchestrent le code applicatif (`espace_formation.models`, settings…)
  sans porter de logique métier propre.
"""
