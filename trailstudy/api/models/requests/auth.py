from pydantic import BaseModel, Field

class LoginRequest(BaseModel):
    id: str = Field(..., description="User ID")
    password: str = Field(..., description="Password, which must equal the user ID")
