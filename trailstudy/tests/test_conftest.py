from fastapi.testclient import TestClient

from trailstudy.services.session_storage import SessionStorage
from trailstudy.store import Store


def test_store_fixture(store):
    """Test that the store fixture starts empty."""
    assert isinstance(store, Store)
    assert store.get_all_users() == []
    assert store.get_public_topics() == []


def test_session_storage_isolation(session_storage):
    """Test that each test gets a fresh session database."""
    assert isinstance(session_storage, SessionStorage)
    session_storage.set("isolation", "first test")
    assert session_storage.get("isolation") == "first test"


def test_session_storage_isolation_2(session_storage):
    """The record written by the previous test should not exist."""
    assert session_storage.get("isolation") is None


def test_client_fixture(client):
    """Test that the client fixture provides a working FastAPI test client."""
    assert isinstance(client, TestClient)
    response = client.get("/")
    assert response.status_code == 200


def test_client_uses_its_own_store(client, seeded_store):
    """Test that every app owns a separate store."""
    client.app.state.store.create_user("alice")
    assert seeded_store.get_user("alice") is None
    assert client.app.state.store.get_user("alice") is not None
