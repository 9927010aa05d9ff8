from .conftest import login


def test_quiz_flow(client):
    login(client, "alice")

    response = client.post("/api/quiz/", json={"topic_id": "topic-1"})
    assert response.status_code == 200
    quiz = response.json()
    assert quiz["total"] == 2

    for correct in (True, False):
        response = client.post(
            f"/api/quiz/{quiz['id']}/answers",
            json={"user_answer": "something", "correct": correct}
        )
        assert response.status_code == 200

    quiz = client.get(f"/api/quiz/{quiz['id']}").json()
    assert quiz["complete"]
    assert quiz["correct_count"] == 1
    assert quiz["score_percent"] == 50
    assert len(quiz["results"]) == 2

    restarted = client.post(f"/api/quiz/{quiz['id']}/restart").json()
    assert restarted["answered_count"] == 0
    assert not restarted["complete"]


def test_quiz_requires_answer_text(client):
    login(client, "alice")
    quiz = client.post("/api/quiz/", json={"topic_id": "topic-1"}).json()

    response = client.post(f"/api/quiz/{quiz['id']}/answers", json={"user_answer": "  ", "correct": True})
    assert response.status_code == 422


def test_quiz_unknown_topic(client):
    login(client, "alice")
    response = client.post("/api/quiz/", json={"topic_id": "topic-x"})
    assert response.status_code == 404


def test_quiz_requires_login(client):
    response = client.post("/api/quiz/", json={"topic_id": "topic-1"})
    assert response.status_code == 401


def test_discard_quiz(client):
    login(client, "alice")
    quiz = client.post("/api/quiz/", json={"topic_id": "topic-1"}).json()

    response = client.delete(f"/api/quiz/{quiz['id']}")
    assert response.status_code == 200
    assert client.get(f"/api/quiz/{quiz['id']}").status_code == 404
    assert client.delete(f"/api/quiz/{quiz['id']}").status_code == 404
