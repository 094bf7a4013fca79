"""
Dépendances FastAPI : construction explicite des couches pour chaque requête.
session → EtudiantRepository → EtudiantService
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from studentapi.database import get_db
from studentapi.repositories.etudiant_repository import EtudiantRepository
from studentapi.services.etudiant_service import EtudiantService


def get_etudiant_service(db: Session = Depends(get_db)) -> EtudiantService:
    return EtudiantService(EtudiantRepository(db))
