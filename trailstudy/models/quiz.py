from typing import List, Optional

from pydantic import BaseModel, Field

from .flashcard import Flashcard


class QuizResult(BaseModel):
    flashcard_id: str
    correct: bool
    user_answer: Optional[str] = None


class QuizSession(BaseModel):
    id: str
    topic_id: str
    flashcards: List[Flashcard] = Field(default_factory=list, description="Cards in quiz order")
    current_index: int = 0
    results: List[QuizResult] = Field(default_factory=list)
    complete: bool = False

    @property
    def current_card(self) -> Optional[Flashcard]:
        if self.complete or self.current_index >= len(self.flashcards):
            return None
        return self.flashcards[self.current_index]

    @property
    def correct_count(self) -> int:
        return sum(1 for r in self.results if r.correct)

    @property
    def progress(self) -> float:
        """Percentage of the quiz answered so far."""
        if not self.flashcards:
            return 0.0
        answered = self.current_index + (1 if self.complete else 0)
        return answered / len(self.flashcards) * 100

    @property
    def score_percent(self) -> int:
        """Correct answers as a percentage of answered cards, halves rounded up."""
        answered = len(self.results)
        if not answered:
            return 0
        return (self.correct_count * 200 + answered) // (2 * answered)
