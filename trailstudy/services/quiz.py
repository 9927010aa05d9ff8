from fastapi import HTTPException
from typing import Dict, Optional
import logging
import random

from trailstudy.store import Store
from trailstudy.models.quiz import QuizResult, QuizSession
from trailstudy.utils.ids import generate_id
from trailstudy.api.models.responses.flashcard import FlashcardResponse
from trailstudy.api.models.responses.quiz import QuizResponse, QuizResultResponse

logger = logging.getLogger(__name__)


class QuizService:
    """Runs self-assessed quizzes over a topic's flashcards.

    A quiz works on a snapshot of the topic's cards taken when it starts, so
    later edits to the topic do not disturb a quiz in progress.
    """

    def __init__(self, store: Store, rng: Optional[random.Random] = None):
        self.store = store
        self.rng = rng or random.Random()
        self.quizzes: Dict[str, QuizSession] = {}

    def _get_or_404(self, quiz_id: str) -> QuizSession:
        quiz = self.quizzes.get(quiz_id)
        if not quiz:
            raise HTTPException(status_code=404, detail="Quiz not found")
        return quiz

    def start_quiz(self, topic_id: str) -> QuizResponse:
        topic = self.store.get_topic(topic_id)
        if not topic:
            raise HTTPException(status_code=404, detail="Topic not found")
        if not topic.flashcards:
            raise HTTPException(status_code=400, detail="Topic has no flashcards to quiz on")

        cards = list(topic.flashcards)
        self.rng.shuffle(cards)
        quiz = QuizSession(id=generate_id("quiz"), topic_id=topic_id, flashcards=cards)
        self.quizzes[quiz.id] = quiz
        logger.info(f"Started quiz {quiz.id} on topic {topic_id} with {len(cards)} cards")
        return self._to_response(quiz)

    def get_quiz(self, quiz_id: str) -> QuizResponse:
        return self._to_response(self._get_or_404(quiz_id))

    def submit_answer(self, quiz_id: str, user_answer: str, correct: bool) -> QuizResponse:
        """Record the answer to the current card and move to the next one."""
        quiz = self._get_or_404(quiz_id)
        card = quiz.current_card
        if card is None:
            raise HTTPException(status_code=400, detail="Quiz is already complete")

        quiz.results.append(QuizResult(flashcard_id=card.id, correct=correct, user_answer=user_answer))
        if quiz.current_index < len(quiz.flashcards) - 1:
            quiz.current_index += 1
        else:
            quiz.complete = True
            logger.info(f"Quiz {quiz_id} complete: {quiz.correct_count}/{len(quiz.results)} correct")
        return self._to_response(quiz)

    def restart(self, quiz_id: str) -> QuizResponse:
        """Reshuffle the same cards and clear all answers."""
        quiz = self._get_or_404(quiz_id)
        self.rng.shuffle(quiz.flashcards)
        quiz.current_index = 0
        quiz.results = []
        quiz.complete = False
        return self._to_response(quiz)

    def discard_quiz(self, quiz_id: str) -> dict:
        """Forget a finished or abandoned quiz."""
        self._get_or_404(quiz_id)
        del self.quizzes[quiz_id]
        logger.info(f"Discarded quiz {quiz_id}")
        return {"status": "success", "message": "Quiz discarded successfully"}

    def _to_response(self, quiz: QuizSession) -> QuizResponse:
        topic = self.store.get_topic(quiz.topic_id)
        cards = {c.id: c for c in quiz.flashcards}
        answered = len(quiz.results)
        current = quiz.current_card

        return QuizResponse(
            id=quiz.id,
            topic_id=quiz.topic_id,
            topic_title=topic.title if topic else "",
            total=len(quiz.flashcards),
            answered_count=answered,
            correct_count=quiz.correct_count,
            progress=quiz.progress,
            score_percent=quiz.score_percent,
            complete=quiz.complete,
            current_card=FlashcardResponse.model_validate(current) if current else None,
            results=[
                QuizResultResponse(
                    flashcard_id=r.flashcard_id,
                    question=cards[r.flashcard_id].question,
                    answer=cards[r.flashcard_id].answer,
                    user_answer=r.user_answer,
                    correct=r.correct
                )
                for r in quiz.results
            ]
        )
