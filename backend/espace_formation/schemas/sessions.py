from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

"""
Schemas Sessions (Pydantic).

Rôle (fonctionnel) :
- Définit le contrat HTTP des sessions de formation (création, mise à jour partielle, lecture).
- Le front échange du JSON camelCase (placesTotales, placesReservees) : les alias Pydantic
  font le pont avec les attributs snake_case des modèles ORM.

Notes :
- Aucun champ n’est obligatoire : le catalogue accepte des fiches incomplètes.
- Les compteurs de places ne sont pas bornés ici : les valeurs négatives sont neutralisées
  par SessionService (clamp à la création, ignorées à la mise à jour), pas rejetées en 422.
- Les champs inconnus sont ignorés (tolérance vis-à-vis des anciennes versions du front).
"""


class SessionFormationBase(BaseModel):
    """Champs descriptifs communs (tous optionnels)."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    title: Optional[str] = None
    dates: Optional[str] = None
    lieu: Optional[str] = None
    price: Optional[float] = None
    level: Optional[str] = None
    category: Optional[str] = None
    desc: Optional[str] = None

    places_totales: Optional[int] = Field(default=None, alias="placesTotales")
    places_reservees: Optional[int] = Field(default=None, alias="placesReservees")


class SessionFormationCreate(SessionFormationBase):
    """Payload de création : l’id est normalement absent (attribué par le store)."""
    id: Optional[str] = None


class SessionFormationUpdate(SessionFormationBase):
    """Payload de mise à jour partielle : seuls les champs non nuls écrasent l’existant."""
    # Toléré pour compat front, jamais utilisé : l’id du chemin fait foi
    id: Optional[str] = None


class SessionFormationOut(SessionFormationBase):
    """Sortie API pour une session (sérialisée en camelCase)."""
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str
