import pytest
from fastapi.testclient import TestClient

from patient_scheduling.core.config import Settings
from patient_scheduling.core.database import Database
from patient_scheduling.main import create_app

@pytest.fixture
def test_settings(tmp_path):
    # Fresh SQLite file per test
    return Settings(
        TESTING=True,
        TEST_DATABASE_URL=f"sqlite:///{tmp_path / 'test.db'}",
        SEED_DEFAULT_PATIENT=True
    )

@pytest.fixture
def app(test_settings):
    return create_app(test_settings)

@pytest.fixture
def client(app):
    with TestClient(app, base_url="http://testserver") as test_client:
        yield test_client

@pytest.fixture
def database(test_settings):
    database = Database.from_settings(test_settings)
    database.open()
    database.init_db()
    yield database
    database.close()

@pytest.fixture
def db(database):
    session = database.session()
    try:
        yield session
    finally:
        session.close()
