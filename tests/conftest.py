import os
import sys
from pathlib import Path

# Ajoute la racine du projet au PYTHONPATH EN PREMIER
sys.path.insert(0, str(Path(__file__).parent.parent))

# SQLite pour les tests, AVANT d'importer l'app (config lue à l'import)
os.environ["DATABASE_URL"] = "sqlite:///./test.db"

import pytest
from fastapi.testclient import TestClient

from taskpilot.core.database import Base, engine, SessionLocal, get_db
from taskpilot.core.security import create_access_token
from taskpilot.main import app
from taskpilot.models.user import User


def override_get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

# Override la dépendance
app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(autouse=True)
def setup_teardown():
    """Crée et nettoie la DB avant/après chaque test"""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client():
    """Client de test FastAPI"""
    return TestClient(app)


@pytest.fixture
def db():
    """Session DB pour les tests"""
    db = SessionLocal()
    yield db
    db.close()


def make_user(db, email="test@example.com", username="testuser"):
    user = User(email=email, username=username)
    user.set_password("pass123")
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def test_user(db):
    return make_user(db)


@pytest.fixture
def auth_headers(test_user):
    """Header Authorization avec un JWT valide"""
    token = create_access_token(test_user.id, test_user.email)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def other_headers(db):
    """Un deuxième utilisateur, pour vérifier l'isolation"""
    other = make_user(db, email="other@example.com", username="otheruser")
    token = create_access_token(other.id, other.email)
    return {"Authorization": f"Bearer {token}"}
