from fastapi import APIRouter, Depends
from typing import List, Optional
from trailstudy.api.deps import get_store, get_current_user
from trailstudy.store import Store
from trailstudy.models.session_user import SessionUser
from trailstudy.services.topic import TopicService
from trailstudy.api.models.requests.topic import TopicCreate, TopicUpdate
from trailstudy.api.models.responses.topic import TopicResponse, TopicDetailResponse, DashboardResponse

router = APIRouter()

@router.get("/dashboard", response_model=DashboardResponse)
async def get_dashboard(
    search: Optional[str] = None,
    store: Store = Depends(get_store),
    user: SessionUser = Depends(get_current_user)
):
    """Get the user's own, shared and public topics."""
    service = TopicService(store)
    return service.get_dashboard(user, search)

@router.get("/", response_model=List[TopicResponse])
async def get_user_topics(store: Store = Depends(get_store), user: SessionUser = Depends(get_current_user)):
    """Get topics created by or shared with the user."""
    service = TopicService(store)
    return service.get_user_topics(user)

@router.post("/", response_model=TopicResponse)
async def create_topic(
    topic: TopicCreate,
    store: Store = Depends(get_store),
    user: SessionUser = Depends(get_current_user)
):
    service = TopicService(store)
    return service.create_topic(topic, user)

@router.get("/{topic_id}", response_model=TopicDetailResponse)
async def get_topic(topic_id: str, store: Store = Depends(get_store), user: SessionUser = Depends(get_current_user)):
    """Get a specific topic with all its cards."""
    service = TopicService(store)
    return service.get_topic(topic_id)

@router.patch("/{topic_id}", response_model=TopicResponse)
async def update_topic(
    topic_id: str,
    topic_update: TopicUpdate,
    store: Store = Depends(get_store),
    user: SessionUser = Depends(get_current_user)
):
    """Update a topic's metadata."""
    service = TopicService(store)
    return service.update_topic(topic_id, topic_update, user)

@router.delete("/{topic_id}")
async def delete_topic(topic_id: str, store: Store = Depends(get_store), user: SessionUser = Depends(get_current_user)):
    """Delete a topic and all of its cards."""
    service = TopicService(store)
    return service.delete_topic(topic_id, user)

@router.post("/{topic_id}/shares/{user_id}")
async def share_topic(
    topic_id: str,
    user_id: str,
    store: Store = Depends(get_store),
    user: SessionUser = Depends(get_current_user)
):
    service = TopicService(store)
    return service.share_topic(topic_id, user_id, user)

@router.delete("/{topic_id}/shares/{user_id}")
async def unshare_topic(
    topic_id: str,
    user_id: str,
    store: Store = Depends(get_store),
    user: SessionUser = Depends(get_current_user)
):
    service = TopicService(store)
    return service.unshare_topic(topic_id, user_id, user)
