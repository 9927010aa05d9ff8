from fastapi import APIRouter, Depends
from typing import List
from trailstudy.api.deps import get_store, get_current_user
from trailstudy.store import Store
from trailstudy.models.session_user import SessionUser
from trailstudy.services.flashcard import FlashcardService
from trailstudy.api.models.requests.flashcard import FlashcardCreate, FlashcardUpdate
from trailstudy.api.models.responses.flashcard import FlashcardResponse

router = APIRouter()

@router.post("/topic/{topic_id}", response_model=FlashcardResponse)
async def add_card_to_topic(
    topic_id: str,
    card: FlashcardCreate,
    store: Store = Depends(get_store),
    user: SessionUser = Depends(get_current_user)
):
    """Add a new card to a topic."""
    service = FlashcardService(store)
    return service.add_card_to_topic(topic_id, card, user)

@router.get("/topic/{topic_id}", response_model=List[FlashcardResponse])
async def get_topic_cards(topic_id: str, store: Store = Depends(get_store), user: SessionUser = Depends(get_current_user)):
    service = FlashcardService(store)
    return service.get_topic_cards(topic_id)

@router.get("/{card_id}", response_model=FlashcardResponse)
async def get_card(card_id: str, store: Store = Depends(get_store), user: SessionUser = Depends(get_current_user)):
    service = FlashcardService(store)
    return service.get_card(card_id)

@router.patch("/{card_id}", response_model=FlashcardResponse)
async def update_card(
    card_id: str,
    card_update: FlashcardUpdate,
    store: Store = Depends(get_store),
    user: SessionUser = Depends(get_current_user)
):
    service = FlashcardService(store)
    return service.update_card(card_id, card_update, user)

@router.delete("/{card_id}")
async def delete_card(card_id: str, store: Store = Depends(get_store), user: SessionUser = Depends(get_current_user)):
    service = FlashcardService(store)
    return service.delete_card(card_id, user)
