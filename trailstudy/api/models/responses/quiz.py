from pydantic import BaseModel, Field
from typing import List, Optional
from trailstudy.api.models.responses.flashcard import FlashcardResponse

class QuizResultResponse(BaseModel):
    flashcard_id: str
    question: str
    answer: str
    user_answer: Optional[str] = None
    correct: bool

class QuizResponse(BaseModel):
    id: str
    topic_id: str
    topic_title: str
    total: int = Field(..., description="Number of cards in the quiz")
    answered_count: int
    correct_count: int
    progress: float = Field(..., description="Percentage of cards answered")
    score_percent: int = Field(..., description="Correct answers as a rounded percentage of answered cards")
    complete: bool
    current_card: Optional[FlashcardResponse] = Field(default=None, description="Card to answer next, absent once complete")
    results: List[QuizResultResponse] = Field(default_factory=list)
