from .conftest import login


def create_topic(client, title="Test Topic", is_public=False):
    response = client.post(
        "/api/topics/",
        json={
            "title": title,
            "description": "Test Description",
            "is_public": is_public
        }
    )
    assert response.status_code == 200
    return response.json()


def test_topics_require_login(client):
    response = client.get("/api/topics/dashboard")
    assert response.status_code == 401


def test_create_topic(student_client):
    data = create_topic(student_client)
    assert data["title"] == "Test Topic"
    assert data["description"] == "Test Description"
    assert data["created_by"] == "alice"
    assert data["card_count"] == 0
    assert not data["is_public"]


def test_create_topic_requires_title(student_client):
    response = student_client.post("/api/topics/", json={"title": ""})
    assert response.status_code == 422


def test_get_topic(student_client):
    topic_id = create_topic(student_client)["id"]
    student_client.post(
        f"/api/flashcards/topic/{topic_id}",
        json={"question": "Q", "answer": "A"}
    )

    response = student_client.get(f"/api/topics/{topic_id}")
    assert response.status_code == 200
    data = response.json()
    assert data["card_count"] == 1
    assert len(data["flashcards"]) == 1
    assert data["flashcards"][0]["question"] == "Q"


def test_get_unknown_topic(student_client):
    response = student_client.get("/api/topics/topic-x")
    assert response.status_code == 404
    assert response.json()["detail"] == "Topic not found"


def test_dashboard_groups(student_client):
    store = student_client.app.state.store
    store.create_user("bob")
    bobs = store.create_topic(title="Bob's notes", created_by="bob")
    store.share_topic(bobs.id, "alice")
    mine = create_topic(student_client, title="Alice's notes")

    response = student_client.get("/api/topics/dashboard")
    assert response.status_code == 200
    data = response.json()
    assert [t["id"] for t in data["my_topics"]] == [mine["id"]]
    assert [t["id"] for t in data["shared_topics"]] == [bobs.id]
    assert [t["id"] for t in data["public_topics"]] == ["topic-1"]


def test_dashboard_search(student_client):
    create_topic(student_client, title="Organic Chemistry")
    create_topic(student_client, title="Linear Algebra")

    response = student_client.get("/api/topics/dashboard", params={"search": "CHEM"})
    data = response.json()
    assert [t["title"] for t in data["my_topics"]] == ["Organic Chemistry"]
    assert data["public_topics"] == []


def test_list_user_topics(student_client):
    create_topic(student_client, title="First")
    create_topic(student_client, title="Second")

    response = student_client.get("/api/topics/")
    assert response.status_code == 200
    assert [t["title"] for t in response.json()] == ["First", "Second"]


def test_update_topic(student_client):
    topic_id = create_topic(student_client)["id"]

    response = student_client.patch(
        f"/api/topics/{topic_id}",
        json={
            "title": "Updated Title",
            "is_public": True
        }
    )
    assert response.status_code == 200
    data = response.json()
    assert data["title"] == "Updated Title"
    assert data["description"] == "Test Description"
    assert data["is_public"]


def test_only_creator_updates_topic(student_client):
    response = student_client.patch("/api/topics/topic-1", json={"title": "Mine now"})
    assert response.status_code == 403


def test_delete_topic(student_client):
    topic_id = create_topic(student_client)["id"]
    card = student_client.post(
        f"/api/flashcards/topic/{topic_id}",
        json={"question": "Q", "answer": "A"}
    ).json()

    response = student_client.delete(f"/api/topics/{topic_id}")
    assert response.status_code == 200

    assert student_client.get(f"/api/topics/{topic_id}").status_code == 404
    assert student_client.get(f"/api/flashcards/{card['id']}").status_code == 404


def test_share_and_unshare_topic(student_client):
    store = student_client.app.state.store
    store.create_user("bob")
    topic_id = create_topic(student_client)["id"]

    response = student_client.post(f"/api/topics/{topic_id}/shares/bob")
    assert response.status_code == 200
    assert store.get_user("bob").shared_topic_ids == [topic_id]

    login(student_client, "bob")
    shared = student_client.get("/api/topics/dashboard").json()["shared_topics"]
    assert [t["id"] for t in shared] == [topic_id]

    login(student_client, "alice")
    response = student_client.delete(f"/api/topics/{topic_id}/shares/bob")
    assert response.status_code == 200
    assert store.get_user("bob").shared_topic_ids == []


def test_share_with_unknown_user(student_client):
    topic_id = create_topic(student_client)["id"]
    response = student_client.post(f"/api/topics/{topic_id}/shares/bob")
    assert response.status_code == 404
    assert response.json()["detail"] == "User not found"
