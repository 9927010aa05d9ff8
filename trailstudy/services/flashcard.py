from fastapi import HTTPException
from typing import List
import logging

from trailstudy.store import Store
from trailstudy.models.flashcard import Flashcard
from trailstudy.models.session_user import SessionUser
from trailstudy.api.models.requests.flashcard import FlashcardCreate, FlashcardUpdate
from trailstudy.api.models.responses.flashcard import FlashcardResponse

logger = logging.getLogger(__name__)


class FlashcardService:
    def __init__(self, store: Store):
        self.store = store

    def _get_or_404(self, card_id: str) -> Flashcard:
        card = self.store.get_flashcard(card_id)
        if not card:
            raise HTTPException(status_code=404, detail="Card not found")
        return card

    def _check_topic_owner(self, topic_id: str, user: SessionUser) -> None:
        topic = self.store.get_topic(topic_id)
        if not topic:
            raise HTTPException(status_code=404, detail="Topic not found")
        if topic.created_by != user.id and not user.is_admin:
            raise HTTPException(status_code=403, detail="You can only add flashcards to your own topics")

    def add_card_to_topic(self, topic_id: str, card: FlashcardCreate, user: SessionUser) -> FlashcardResponse:
        """Add a new card to a topic owned by the user."""
        self._check_topic_owner(topic_id, user)

        new_card = self.store.create_flashcard(
            topic_id=topic_id,
            question=card.question,
            answer=card.answer,
            image_url=card.image_url,
            created_by=user.id
        )
        if not new_card:
            raise HTTPException(status_code=404, detail="Topic not found")
        return FlashcardResponse.model_validate(new_card)

    def get_card(self, card_id: str) -> FlashcardResponse:
        return FlashcardResponse.model_validate(self._get_or_404(card_id))

    def get_topic_cards(self, topic_id: str) -> List[FlashcardResponse]:
        if not self.store.get_topic(topic_id):
            raise HTTPException(status_code=404, detail="Topic not found")
        return [FlashcardResponse.model_validate(c) for c in self.store.get_flashcards_by_topic(topic_id)]

    def update_card(self, card_id: str, card_update: FlashcardUpdate, user: SessionUser) -> FlashcardResponse:
        card = self._get_or_404(card_id)
        self._check_topic_owner(card.topic_id, user)

        changes = card_update.model_dump(exclude_unset=True, exclude_none=True)
        if not self.store.update_flashcard(card.model_copy(update=changes)):
            raise HTTPException(status_code=404, detail="Card not found")
        return FlashcardResponse.model_validate(self.store.get_flashcard(card_id))

    def delete_card(self, card_id: str, user: SessionUser) -> dict:
        card = self._get_or_404(card_id)
        self._check_topic_owner(card.topic_id, user)
        self.store.delete_flashcard(card_id)
        return {"status": "success", "message": "Card deleted successfully"}
