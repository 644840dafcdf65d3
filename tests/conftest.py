import pytest
from fastapi.testclient import TestClient

from person_crud_api.app.core.config import settings
from person_crud_api.app.core.db import init_db
from person_crud_api.app.main import app
from person_crud_api.app.repositories.person_repository import PersonRepository


@pytest.fixture(name="database")
def database_fixture(tmp_path, monkeypatch):
    """Point the application at a fresh SQLite file with the schema applied."""
    db_path = tmp_path / "persons-test.db"
    monkeypatch.setattr(settings, "database_url", str(db_path))
    init_db()
    return db_path


@pytest.fixture(name="repository")
def repository_fixture(database):
    return PersonRepository()


@pytest.fixture(name="client")
def client_fixture(database):
    # Server errors are asserted as 500 responses rather than re-raised.
    with TestClient(app, raise_server_exceptions=False) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def person_payload():
    return {
        "firstName": "New",
        "lastName": "Person",
        "email": "new.person@example.com",
        "phoneNumber": "111-222-3333",
        "address": "789 Oak St",
        "age": 28,
    }
