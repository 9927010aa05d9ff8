from typing import List

from pydantic import BaseModel, Field


class Folder(BaseModel):
    id: str
    name: str
    topics: List[str] = Field(default_factory=list, description="Topic IDs in folder order")
    created_by: str
