"""
Configuration partagée pour tous les tests.
Base SQLite en mémoire : DATABASE_URL doit être défini avant l'import de l'application.
"""

import os

os.environ["DATABASE_URL"] = "sqlite://"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

import studentapi.models  # noqa: E402,F401
from studentapi.database import Base, SessionLocal, engine  # noqa: E402
from studentapi.main import app  # noqa: E402


@pytest.fixture
def db_session():
    """Session sur un schéma vierge, supprimé après le test."""
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client():
    """Client HTTP de test ; le lifespan crée les tables."""
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
    Base.metadata.drop_all(bind=engine)
