"""
Service métier pour la gestion des étudiants.

Simple passe-plat vers le repository : aucune validation, aucune erreur métier.
Un étudiant introuvable est signalé par None, jamais par une exception.
Les erreurs de la couche de stockage remontent telles quelles.
"""

import logging
from typing import List, Optional

from studentapi.models.etudiant import Etudiant
from studentapi.repositories.etudiant_repository import EtudiantRepository
from studentapi.schemas.etudiant import EtudiantIn

logger = logging.getLogger(__name__)

# Champs recopiés lors d'une mise à jour ; l'id n'en fait jamais partie.
CHAMPS_MODIFIABLES = ("nom", "prenom", "email", "niveau")


class EtudiantService:

    def __init__(self, repository: EtudiantRepository):
        self.repository = repository

    def get_all(self) -> List[Etudiant]:
        return self.repository.find_all()

    def get_by_id(self, etudiant_id: int) -> Optional[Etudiant]:
        return self.repository.find_by_id(etudiant_id)

    def create(self, data: EtudiantIn) -> Etudiant:
        """Enregistre un nouvel étudiant. L'id éventuel de `data` est ignoré."""
        etudiant = Etudiant(**{champ: getattr(data, champ) for champ in CHAMPS_MODIFIABLES})
        saved = self.repository.save(etudiant)
        logger.info("Étudiant %s créé (%s %s)", saved.id, saved.prenom, saved.nom)
        return saved

    def update(self, etudiant_id: int, data: EtudiantIn) -> Optional[Etudiant]:
        """
        Écrase nom, prénom, email et niveau de l'étudiant existant.
        Retourne None si l'étudiant n'existe pas : aucune création dans ce cas.

        Lecture puis écriture sans verrou : deux mises à jour concurrentes
        du même étudiant peuvent s'écraser (dernier écrivain gagnant).
        """
        existing = self.get_by_id(etudiant_id)
        if existing is None:
            logger.debug("Mise à jour ignorée : étudiant %s introuvable", etudiant_id)
            return None

        for champ in CHAMPS_MODIFIABLES:
            setattr(existing, champ, getattr(data, champ))

        saved = self.repository.save(existing)
        logger.info("Étudiant %s mis à jour", saved.id)
        return saved

    def delete(self, etudiant_id: int) -> None:
        """Supprime l'étudiant. Idempotent : sans erreur s'il n'existe pas."""
        self.repository.delete_by_id(etudiant_id)
        logger.info("Étudiant %s supprimé", etudiant_id)
