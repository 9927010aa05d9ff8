from pydantic import BaseModel, Field, ConfigDict
from typing import List
from datetime import datetime
from trailstudy.api.models.responses.flashcard import FlashcardResponse

class TopicResponse(BaseModel):
    id: str = Field(..., description="Topic ID")
    title: str = Field(..., description="Title of the topic")
    description: str = Field(default="", description="Description of the topic")
    is_public: bool = Field(..., description="Whether every user can see the topic")
    created_by: str = Field(..., description="ID of the user who created the topic")
    created_at: datetime
    card_count: int = Field(..., description="Number of flashcards in the topic")

    model_config = ConfigDict(from_attributes=True)

class TopicDetailResponse(TopicResponse):
    flashcards: List[FlashcardResponse] = Field(default_factory=list, description="Flashcards in creation order")

class DashboardResponse(BaseModel):
    """Topics visible to the current user, grouped the way the dashboard shows them."""
    my_topics: List[TopicResponse] = Field(default_factory=list)
    shared_topics: List[TopicResponse] = Field(default_factory=list)
    public_topics: List[TopicResponse] = Field(default_factory=list)
