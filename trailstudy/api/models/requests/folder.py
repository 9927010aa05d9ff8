from pydantic import BaseModel, Field

class FolderCreate(BaseModel):
    name: str = Field(..., min_length=1, description="Name of the folder")

class FolderUpdate(BaseModel):
    name: str = Field(..., min_length=1, description="New name of the folder")

class FolderTopicAdd(BaseModel):
    topic_id: str = Field(..., description="ID of the topic to file in the folder")
