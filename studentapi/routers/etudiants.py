"""
Router pour les étudiants.
GET    /etudiants       — liste
GET    /etudiants/{id}  — détail
POST   /etudiants       — création
PUT    /etudiants/{id}  — mise à jour (nom, prénom, email, niveau)
DELETE /etudiants/{id}  — suppression (idempotente)
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException

from studentapi.config import settings
from studentapi.deps import get_etudiant_service
from studentapi.models.etudiant import Etudiant
from studentapi.schemas.etudiant import EtudiantIn, EtudiantResponse
from studentapi.services.etudiant_service import EtudiantService

router = APIRouter(prefix="/etudiants", tags=["Étudiants"])


def _introuvable_ou_null(etudiant: Optional[Etudiant]) -> Optional[Etudiant]:
    """404 si absent, sauf en mode compatibilité où le corps vaut null (200)."""
    if etudiant is None and not settings.NOT_FOUND_AS_NULL:
        raise HTTPException(status_code=404, detail="Étudiant introuvable.")
    return etudiant


@router.get("", response_model=List[EtudiantResponse], summary="Lister les étudiants")
def list_etudiants(service: EtudiantService = Depends(get_etudiant_service)):
    return service.get_all()


@router.get("/{etudiant_id}", response_model=Optional[EtudiantResponse], summary="Détail d'un étudiant")
def get_etudiant(etudiant_id: int, service: EtudiantService = Depends(get_etudiant_service)):
    return _introuvable_ou_null(service.get_by_id(etudiant_id))


@router.post("", response_model=EtudiantResponse, status_code=201, summary="Créer un étudiant")
def create_etudiant(data: EtudiantIn, service: EtudiantService = Depends(get_etudiant_service)):
    """Crée un étudiant. L'id est attribué par la base, celui du corps est ignoré."""
    return service.create(data)


@router.put("/{etudiant_id}", response_model=Optional[EtudiantResponse], summary="Modifier un étudiant")
def update_etudiant(
    etudiant_id: int,
    data: EtudiantIn,
    service: EtudiantService = Depends(get_etudiant_service),
):
    """
    Remplace nom, prénom, email et niveau. Un champ absent du corps est remis à null.
    Ne crée jamais d'étudiant : un id inconnu donne 404 (ou null en mode compatibilité).
    """
    return _introuvable_ou_null(service.update(etudiant_id, data))


@router.delete("/{etudiant_id}", status_code=204, summary="Supprimer un étudiant")
def delete_etudiant(etudiant_id: int, service: EtudiantService = Depends(get_etudiant_service)):
    """Supprime un étudiant. Répond 204 même s'il n'existait pas."""
    service.delete(etudiant_id)
