"""
Schémas Pydantic pour les étudiants.
Les noms de champs JSON (id, nom, prenom, email, niveau) sont ceux attendus par les clients existants.
"""

from typing import Optional

from pydantic import BaseModel


class EtudiantIn(BaseModel):
    """
    Corps de requête pour POST et PUT /etudiants.
    Un id éventuellement fourni est accepté mais toujours ignoré.
    """
    id: Optional[int] = None
    nom: Optional[str] = None
    prenom: Optional[str] = None
    email: Optional[str] = None
    niveau: Optional[str] = None


class EtudiantResponse(BaseModel):
    """Schéma de réponse pour un étudiant."""
    id: int
    nom: Optional[str]
    prenom: Optional[str]
    email: Optional[str]
    niveau: Optional[str]

    model_config = {"from_attributes": True}
