from pydantic import BaseModel, Field, field_validator

class QuizStart(BaseModel):
    topic_id: str = Field(..., description="ID of the topic to quiz on")

class QuizAnswer(BaseModel):
    user_answer: str = Field(..., description="The answer the user typed before revealing the card")
    correct: bool = Field(..., description="Self-assessed correctness of the answer")

    @field_validator('user_answer')
    @classmethod
    def validate_user_answer(cls, v):
        v = v.strip()
        if not v:
            raise ValueError('Please enter an answer')
        return v
