from pydantic import BaseModel, ConfigDict
from typing import List
from datetime import datetime
from trailstudy.api.models.responses.folder import FolderResponse

class UserResponse(BaseModel):
    id: str
    is_admin: bool
    created_topic_ids: List[str]
    shared_topic_ids: List[str]
    folders: List[FolderResponse]
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
