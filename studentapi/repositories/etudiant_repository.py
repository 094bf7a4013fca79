from studentapi.models.etudiant import Etudiant
from studentapi.repositories.base import SQLAlchemyRepository


class EtudiantRepository(SQLAlchemyRepository[Etudiant]):
    model = Etudiant
