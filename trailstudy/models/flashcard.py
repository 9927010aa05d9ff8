from datetime import datetime, UTC
from typing import Optional

from pydantic import BaseModel, Field


class Flashcard(BaseModel):
    id: str
    topic_id: str
    question: str
    answer: str
    image_url: Optional[str] = None
    created_by: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
