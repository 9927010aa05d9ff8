from pydantic import BaseModel, Field
from typing import Optional

class TopicCreate(BaseModel):
    title: str = Field(..., min_length=1, description="Title of the topic")
    description: str = Field(default="", description="What the topic covers")
    is_public: bool = Field(default=False, description="Whether every user can see the topic")

class TopicUpdate(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1, description="New title of the topic")
    description: Optional[str] = Field(default=None, description="New description of the topic")
    is_public: Optional[bool] = Field(default=None, description="New visibility of the topic")
