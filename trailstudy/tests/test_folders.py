from .conftest import login


def create_folder(client, name="Exams"):
    response = client.post("/api/folders/", json={"name": name})
    assert response.status_code == 200
    return response.json()


def test_create_and_list_folders(student_client):
    folder = create_folder(student_client)
    assert folder["name"] == "Exams"
    assert folder["topics"] == []
    assert folder["created_by"] == "alice"

    response = student_client.get("/api/folders/")
    assert [f["id"] for f in response.json()] == [folder["id"]]


def test_add_topic_to_folder(student_client):
    folder = create_folder(student_client)

    response = student_client.post(f"/api/folders/{folder['id']}/topics", json={"topic_id": "topic-1"})
    assert response.status_code == 200
    assert response.json()["topics"] == ["topic-1"]

    response = student_client.get(f"/api/folders/{folder['id']}/topics")
    assert [t["title"] for t in response.json()] == ["Introduction to JavaScript"]


def test_add_unknown_topic_to_folder(student_client):
    folder = create_folder(student_client)
    response = student_client.post(f"/api/folders/{folder['id']}/topics", json={"topic_id": "topic-x"})
    assert response.status_code == 404


def test_rename_and_delete_folder(student_client):
    folder = create_folder(student_client)

    response = student_client.patch(f"/api/folders/{folder['id']}", json={"name": "Finals"})
    assert response.status_code == 200
    assert response.json()["name"] == "Finals"
    assert student_client.get(f"/api/folders/{folder['id']}").json()["name"] == "Finals"

    response = student_client.delete(f"/api/folders/{folder['id']}")
    assert response.status_code == 200
    assert student_client.get(f"/api/folders/{folder['id']}").status_code == 404


def test_folders_are_private(student_client):
    student_client.app.state.store.create_user("bob")
    folder = create_folder(student_client)

    login(student_client, "bob")
    assert student_client.get(f"/api/folders/{folder['id']}").status_code == 404
    assert student_client.get("/api/folders/").json() == []
