import os
import random
import tempfile
import pytest
from fastapi.testclient import TestClient

# Keep the module-level app's session database and logs out of the working tree
os.environ.setdefault("SESSION_DATABASE_URL", "sqlite://")
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="trailstudy-logs-"))

from trailstudy.config.env import Settings
from trailstudy.database import create_session_factory
from trailstudy.main import create_app
from trailstudy.seed import seed_store
from trailstudy.services.auth import SessionGate
from trailstudy.services.quiz import QuizService
from trailstudy.services.session_storage import SessionStorage
from trailstudy.store import Store

ADMIN_ID = "2023305700"


@pytest.fixture
def store():
    """An empty store."""
    return Store()


@pytest.fixture
def seeded_store():
    """A store holding the admin account and the sample topic."""
    store = Store()
    seed_store(store, ADMIN_ID)
    return store


@pytest.fixture
def session_storage():
    # In-memory SQLite database, fresh for every test
    return SessionStorage(create_session_factory("sqlite://"))


@pytest.fixture
def session_gate(seeded_store, session_storage):
    return SessionGate(seeded_store, session_storage)


@pytest.fixture
def quiz_service(seeded_store):
    return QuizService(seeded_store, random.Random(42))


@pytest.fixture
def test_settings():
    return Settings(
        admin_user_id=ADMIN_ID,
        session_database_url="sqlite://",
        quiz_seed=42,
        _env_file=None
    )


@pytest.fixture
def app(test_settings):
    return create_app(test_settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


def login(client, user_id):
    response = client.post("/api/auth/login", json={"id": user_id, "password": user_id})
    assert response.status_code == 200
    return response.json()


@pytest.fixture
def student_client(client):
    """Client logged in as a student who exists in the store."""
    client.app.state.store.create_user("alice")
    login(client, "alice")
    return client


@pytest.fixture
def admin_client(client):
    login(client, ADMIN_ID)
    return client
