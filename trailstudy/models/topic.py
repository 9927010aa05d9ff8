from datetime import datetime, UTC
from typing import List

from pydantic import BaseModel, Field

from .flashcard import Flashcard


class Topic(BaseModel):
    id: str
    title: str
    description: str = ""
    is_public: bool = False
    created_by: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    # Derived on read from the flashcard map; never stored on the record.
    flashcards: List[Flashcard] = Field(default_factory=list)
