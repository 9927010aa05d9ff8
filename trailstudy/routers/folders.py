from fastapi import APIRouter, Depends
from typing import List
from trailstudy.api.deps import get_store, get_current_user
from trailstudy.store import Store
from trailstudy.models.session_user import SessionUser
from trailstudy.services.folder import FolderService
from trailstudy.api.models.requests.folder import FolderCreate, FolderUpdate, FolderTopicAdd
from trailstudy.api.models.responses.folder import FolderResponse
from trailstudy.api.models.responses.topic import TopicResponse

router = APIRouter()

@router.get("/", response_model=List[FolderResponse])
async def get_folders(store: Store = Depends(get_store), user: SessionUser = Depends(get_current_user)):
    service = FolderService(store)
    return service.get_folders(user)

@router.post("/", response_model=FolderResponse)
async def create_folder(
    folder: FolderCreate,
    store: Store = Depends(get_store),
    user: SessionUser = Depends(get_current_user)
):
    service = FolderService(store)
    return service.create_folder(folder, user)

@router.get("/{folder_id}", response_model=FolderResponse)
async def get_folder(folder_id: str, store: Store = Depends(get_store), user: SessionUser = Depends(get_current_user)):
    service = FolderService(store)
    return service.get_folder(folder_id, user)

@router.patch("/{folder_id}", response_model=FolderResponse)
async def rename_folder(
    folder_id: str,
    folder_update: FolderUpdate,
    store: Store = Depends(get_store),
    user: SessionUser = Depends(get_current_user)
):
    service = FolderService(store)
    return service.rename_folder(folder_id, folder_update, user)

@router.delete("/{folder_id}")
async def delete_folder(folder_id: str, store: Store = Depends(get_store), user: SessionUser = Depends(get_current_user)):
    service = FolderService(store)
    return service.delete_folder(folder_id, user)

@router.post("/{folder_id}/topics", response_model=FolderResponse)
async def add_topic_to_folder(
    folder_id: str,
    body: FolderTopicAdd,
    store: Store = Depends(get_store),
    user: SessionUser = Depends(get_current_user)
):
    """File a topic in one of the user's folders."""
    service = FolderService(store)
    return service.add_topic(folder_id, body.topic_id, user)

@router.get("/{folder_id}/topics", response_model=List[TopicResponse])
async def get_folder_topics(folder_id: str, store: Store = Depends(get_store), user: SessionUser = Depends(get_current_user)):
    service = FolderService(store)
    return service.get_folder_topics(folder_id, user)
