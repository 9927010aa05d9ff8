from pydantic import BaseModel


class SessionUser(BaseModel):
    """The persisted shape of the logged-in user."""
    id: str
    is_admin: bool = False
    full_name: str = "Student User"
