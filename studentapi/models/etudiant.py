"""
Modèle SQLAlchemy pour la table etudiants.
Aucune contrainte de format : seul l'identifiant est géré par la base.
"""

from sqlalchemy import Column, Integer, String

from studentapi.database import Base


class Etudiant(Base):
    __tablename__ = "etudiants"

    id = Column(Integer, primary_key=True, autoincrement=True)
    nom = Column(String(255), nullable=True)
    prenom = Column(String(255), nullable=True)
    email = Column(String(255), nullable=True)
    niveau = Column(String(100), nullable=True)

    def __repr__(self) -> str:
        return f"<Etudiant id={self.id} nom={self.nom!r} prenom={self.prenom!r}>"
