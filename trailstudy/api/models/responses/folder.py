from pydantic import BaseModel, ConfigDict
from typing import List

class FolderResponse(BaseModel):
    id: str
    name: str
    topics: List[str]
    created_by: str

    model_config = ConfigDict(from_attributes=True)
