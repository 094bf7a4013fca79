# Importe tous les modèles pour enregistrer leurs tables dans Base.metadata
# avant l'appel à create_all.

from studentapi.models.etudiant import Etudiant  # noqa: F401
