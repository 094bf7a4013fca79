"""
Configuration de la journalisation.
Les modules utilisent logging.getLogger(__name__) ; seul le logger racine est configuré ici.
"""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """
    Configure le logger racine avec un handler console.
    Sans effet si des handlers sont déjà en place (redémarrages, tests).
    """
    root = logging.getLogger()
    if root.handlers:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
