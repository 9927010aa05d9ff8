import pytest
from fastapi import HTTPException


def test_start_quiz(quiz_service):
    quiz = quiz_service.start_quiz("topic-1")
    assert quiz.total == 2
    assert quiz.answered_count == 0
    assert quiz.progress == 0
    assert not quiz.complete
    assert quiz.current_card.id in {"card-1", "card-2"}
    assert quiz.topic_title == "Introduction to JavaScript"


def test_start_quiz_unknown_topic(quiz_service):
    with pytest.raises(HTTPException) as exc_info:
        quiz_service.start_quiz("topic-x")
    assert exc_info.value.status_code == 404


def test_start_quiz_empty_topic(quiz_service, seeded_store):
    topic = seeded_store.create_topic(title="Empty", created_by="alice")
    with pytest.raises(HTTPException) as exc_info:
        quiz_service.start_quiz(topic.id)
    assert exc_info.value.status_code == 400


def test_quiz_covers_every_card_once(quiz_service):
    quiz = quiz_service.start_quiz("topic-1")
    seen = []
    while not quiz.complete:
        seen.append(quiz.current_card.id)
        quiz = quiz_service.submit_answer(quiz.id, "my answer", correct=len(seen) == 1)

    assert sorted(seen) == ["card-1", "card-2"]
    assert quiz.current_card is None
    assert quiz.progress == 100
    assert quiz.correct_count == 1
    assert quiz.score_percent == 50
    assert [r.flashcard_id for r in quiz.results] == seen
    assert quiz.results[0].user_answer == "my answer"


def test_submit_after_completion(quiz_service):
    quiz = quiz_service.start_quiz("topic-1")
    quiz_service.submit_answer(quiz.id, "a", True)
    quiz_service.submit_answer(quiz.id, "b", True)
    with pytest.raises(HTTPException) as exc_info:
        quiz_service.submit_answer(quiz.id, "c", True)
    assert exc_info.value.status_code == 400


def test_restart_clears_results(quiz_service):
    quiz = quiz_service.start_quiz("topic-1")
    quiz_service.submit_answer(quiz.id, "a", False)
    quiz_service.submit_answer(quiz.id, "b", True)

    restarted = quiz_service.restart(quiz.id)
    assert not restarted.complete
    assert restarted.results == []
    assert restarted.answered_count == 0
    assert restarted.total == 2


def test_quiz_keeps_its_snapshot(quiz_service, seeded_store):
    quiz = quiz_service.start_quiz("topic-1")
    seeded_store.delete_flashcard("card-1")
    seeded_store.delete_flashcard("card-2")

    quiz = quiz_service.submit_answer(quiz.id, "a", True)
    assert quiz.total == 2
    assert quiz.results[0].question


def test_unknown_quiz(quiz_service):
    with pytest.raises(HTTPException) as exc_info:
        quiz_service.get_quiz("quiz-x")
    assert exc_info.value.status_code == 404


def test_score_rounds_halves_up(quiz_service, seeded_store):
    topic = seeded_store.create_topic(title="Eight cards", created_by="alice")
    for i in range(8):
        seeded_store.create_flashcard(topic_id=topic.id, question=f"Q{i}", answer=f"A{i}", created_by="alice")

    quiz = quiz_service.start_quiz(topic.id)
    quiz = quiz_service.submit_answer(quiz.id, "a", True)
    while not quiz.complete:
        quiz = quiz_service.submit_answer(quiz.id, "a", False)

    assert quiz.correct_count == 1
    assert quiz.score_percent == 13


def test_score_before_any_answer(quiz_service):
    quiz = quiz_service.start_quiz("topic-1")
    assert quiz.score_percent == 0


def test_discard_quiz(quiz_service):
    quiz = quiz_service.start_quiz("topic-1")
    quiz_service.submit_answer(quiz.id, "a", True)
    quiz_service.submit_answer(quiz.id, "b", True)

    quiz_service.discard_quiz(quiz.id)
    assert quiz.id not in quiz_service.quizzes
    with pytest.raises(HTTPException) as exc_info:
        quiz_service.restart(quiz.id)
    assert exc_info.value.status_code == 404


def test_discard_unknown_quiz(quiz_service):
    with pytest.raises(HTTPException) as exc_info:
        quiz_service.discard_quiz("quiz-x")
    assert exc_info.value.status_code == 404
