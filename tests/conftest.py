# tests/conftest.py
import mongomock
import pytest

from config.settings import Settings
from main import create_app
from services.database import MongoStore


@pytest.fixture
def store():
    """A MongoStore backed by an in-memory mongomock client"""
    return MongoStore(client=mongomock.MongoClient(), database_name="eduPulseTest")


@pytest.fixture
def app(store):
    return create_app(settings=Settings(), store=store)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def database(store):
    """Raw database handle, for asserting on what was actually stored"""
    store.ensure_connected()
    return store.db


@pytest.fixture
def make_user(client):
    def _make(email="student@example.com", name="Student", photo="https://img.example.com/s.png"):
        response = client.post("/users", json={"email": email, "name": name, "photo": photo})
        assert response.status_code == 200
        return response.get_json()["insertedId"]
    return _make


@pytest.fixture
def make_session(client):
    def _make(**overrides):
        body = {"title": "Algebra", "tutorEmail": "tutor@example.com", "tutorName": "Tutor"}
        body.update(overrides)
        response = client.post("/sessions", json=body)
        assert response.status_code == 200
        return response.get_json()["insertedId"]
    return _make
