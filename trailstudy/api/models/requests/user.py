from pydantic import BaseModel, Field

class UserCreate(BaseModel):
    id: str = Field(..., min_length=1, description="ID of the new user, also their password")
    is_admin: bool = Field(default=False, description="Grant administrator access")
