import mongomock
import pytest
from fastapi.testclient import TestClient

from smartclass.core.config import get_settings
from smartclass.db.mongodb import get_db, init_mongo_indexes
from smartclass.main import app


@pytest.fixture
def db():
    """Fresh in-memory database per test, with the real indexes."""
    database = mongomock.MongoClient()["smartclass_test"]
    init_mongo_indexes(database)
    return database


@pytest.fixture
def client(db):
    # Not used as a context manager, so startup never dials a real MongoDB
    app.dependency_overrides[get_db] = lambda: db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def set_auth_gate(monkeypatch):
    def _set(value):
        monkeypatch.setattr(get_settings(), "auth_gate", value)
    return _set


@pytest.fixture
def make_user(client):
    """Sign up and log in; returns the login response body."""
    def _make(role="admin", email="admin@school.edu", password="secret", name="Admin"):
        r = client.post("/signup", json={"role": role, "name": name, "email": email, "password": password})
        assert r.status_code == 200, r.json()
        r = client.post("/login", json={"role": role, "email": email, "password": password})
        assert r.status_code == 200, r.json()
        return r.json()
    return _make
