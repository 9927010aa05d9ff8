from pydantic import BaseModel, Field, field_validator
from typing import Optional

class FlashcardCreate(BaseModel):
    question: str = Field(..., description="Question shown on the front of the card")
    answer: str = Field(..., description="Answer shown on the back of the card")
    image_url: Optional[str] = Field(default=None, description="Optional image illustrating the question")

    @field_validator('question', 'answer')
    @classmethod
    def validate_text(cls, v):
        v = v.strip()
        if not v:
            raise ValueError('Question and answer must not be empty')
        return v

class FlashcardUpdate(BaseModel):
    question: Optional[str] = Field(default=None, description="New question")
    answer: Optional[str] = Field(default=None, description="New answer")
    image_url: Optional[str] = Field(default=None, description="New image URL")

    @field_validator('question', 'answer')
    @classmethod
    def validate_text(cls, v):
        if v is not None:
            v = v.strip()
            if not v:
                raise ValueError('Question and answer must not be empty')
        return v
