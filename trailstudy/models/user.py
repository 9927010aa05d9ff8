from datetime import datetime, UTC
from typing import List

from pydantic import BaseModel, Field

from .folder import Folder


class User(BaseModel):
    id: str
    is_admin: bool = False
    shared_topic_ids: List[str] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    # Derived on read from the topic and folder maps.
    created_topic_ids: List[str] = Field(default_factory=list)
    folders: List[Folder] = Field(default_factory=list)
