from pydantic import BaseModel, ConfigDict
from typing import Optional
from datetime import datetime

class FlashcardResponse(BaseModel):
    id: str
    topic_id: str
    question: str
    answer: str
    image_url: Optional[str] = None
    created_by: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
