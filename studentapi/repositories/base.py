"""
Repository générique d'accès aux données, indexé par un identifiant entier.

Responsabilité : CRUD, requêtes, persistance. Aucune logique métier.
Les erreurs SQLAlchemy ne sont ni interceptées ni traduites.
"""

from typing import Generic, List, Optional, Type, TypeVar

from sqlalchemy import delete, inspect, select
from sqlalchemy.orm import Session

ModelT = TypeVar("ModelT")


class SQLAlchemyRepository(Generic[ModelT]):
    """CRUD sur un modèle dont la clé primaire est la colonne `id`."""

    model: Type[ModelT]

    def __init__(self, session: Session):
        self.session = session

    def find_all(self) -> List[ModelT]:
        """Retourne toutes les lignes, dans l'ordre d'insertion."""
        return list(self.session.execute(
            select(self.model).order_by(self.model.id)
        ).scalars().all())

    def find_by_id(self, entity_id: int) -> Optional[ModelT]:
        """Retourne l'entité ou None si inexistante."""
        return self.session.get(self.model, entity_id)

    def save(self, entity: ModelT) -> ModelT:
        """
        Insère ou remplace une entité.

        Si `entity.id` correspond à une ligne existante, toutes ses colonnes sont
        remplacées par celles de `entity` (une colonne non renseignée devient NULL).
        Sinon l'entité est insérée et la base lui attribue un nouvel id
        (un id inconnu porté par l'entité est écarté).
        """
        existing = self.session.get(self.model, entity.id) if entity.id is not None else None
        if existing is not None:
            if existing is not entity:
                for attr in inspect(self.model).column_attrs:
                    setattr(existing, attr.key, getattr(entity, attr.key))
            entity = existing
        else:
            entity.id = None
            self.session.add(entity)
        self.session.commit()
        self.session.refresh(entity)
        return entity

    def delete_by_id(self, entity_id: int) -> None:
        """Supprime l'entité si elle existe, sans effet sinon."""
        self.session.execute(delete(self.model).where(self.model.id == entity_id))
        self.session.commit()
