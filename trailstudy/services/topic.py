from fastapi import HTTPException
from typing import List, Optional
import logging

from trailstudy.store import Store
from trailstudy.models.topic import Topic
from trailstudy.models.session_user import SessionUser
from trailstudy.api.models.requests.topic import TopicCreate, TopicUpdate
from trailstudy.api.models.responses.topic import (
    TopicResponse,
    TopicDetailResponse,
    DashboardResponse
)
from trailstudy.api.models.responses.flashcard import FlashcardResponse

logger = logging.getLogger(__name__)


def to_topic_response(topic: Topic) -> TopicResponse:
    return TopicResponse(
        id=topic.id,
        title=topic.title,
        description=topic.description,
        is_public=topic.is_public,
        created_by=topic.created_by,
        created_at=topic.created_at,
        card_count=len(topic.flashcards)
    )


class TopicService:
    def __init__(self, store: Store):
        self.store = store

    def _get_or_404(self, topic_id: str) -> Topic:
        topic = self.store.get_topic(topic_id)
        if not topic:
            raise HTTPException(status_code=404, detail="Topic not found")
        return topic

    def _check_owner(self, topic: Topic, user: SessionUser) -> None:
        if topic.created_by != user.id and not user.is_admin:
            raise HTTPException(status_code=403, detail="You can only change your own topics")

    def get_dashboard(self, user: SessionUser, search: Optional[str] = None) -> DashboardResponse:
        """Group the user's own, shared and public topics, optionally filtered by title."""
        stored_user = self.store.get_user(user.id)
        shared_ids = stored_user.shared_topic_ids if stored_user else []

        user_topics = self.store.get_user_topics(user.id)
        seen = {t.id for t in user_topics}
        topics = user_topics + [t for t in self.store.get_public_topics() if t.id not in seen]

        if search:
            needle = search.lower()
            topics = [t for t in topics if needle in t.title.lower()]

        return DashboardResponse(
            my_topics=[to_topic_response(t) for t in topics if t.created_by == user.id],
            shared_topics=[to_topic_response(t) for t in topics if t.id in shared_ids],
            public_topics=[
                to_topic_response(t)
                for t in topics
                if t.is_public and t.created_by != user.id and t.id not in shared_ids
            ]
        )

    def get_topic(self, topic_id: str) -> TopicDetailResponse:
        """Get a topic with all its flashcards."""
        topic = self._get_or_404(topic_id)
        return TopicDetailResponse(
            **to_topic_response(topic).model_dump(),
            flashcards=[FlashcardResponse.model_validate(c) for c in topic.flashcards]
        )

    def get_user_topics(self, user: SessionUser) -> List[TopicResponse]:
        return [to_topic_response(t) for t in self.store.get_user_topics(user.id)]

    def create_topic(self, topic_data: TopicCreate, user: SessionUser) -> TopicResponse:
        topic = self.store.create_topic(
            title=topic_data.title,
            description=topic_data.description,
            is_public=topic_data.is_public,
            created_by=user.id
        )
        return to_topic_response(topic)

    def update_topic(self, topic_id: str, topic_update: TopicUpdate, user: SessionUser) -> TopicResponse:
        """Update a topic's metadata."""
        topic = self._get_or_404(topic_id)
        self._check_owner(topic, user)

        changes = topic_update.model_dump(exclude_unset=True, exclude_none=True)
        updated = topic.model_copy(update=changes)
        if not self.store.update_topic(updated):
            raise HTTPException(status_code=404, detail="Topic not found")
        return to_topic_response(self.store.get_topic(topic_id))

    def delete_topic(self, topic_id: str, user: SessionUser) -> dict:
        topic = self._get_or_404(topic_id)
        self._check_owner(topic, user)
        self.store.delete_topic(topic_id)
        return {"status": "success", "message": "Topic deleted successfully"}

    def share_topic(self, topic_id: str, user_id: str, user: SessionUser) -> dict:
        topic = self._get_or_404(topic_id)
        self._check_owner(topic, user)
        if not self.store.share_topic(topic_id, user_id):
            raise HTTPException(status_code=404, detail="User not found")
        return {"status": "success", "message": f"Topic shared with {user_id}"}

    def unshare_topic(self, topic_id: str, user_id: str, user: SessionUser) -> dict:
        topic = self._get_or_404(topic_id)
        self._check_owner(topic, user)
        if not self.store.unshare_topic_with_user(topic_id, user_id):
            raise HTTPException(status_code=404, detail="User not found")
        return {"status": "success", "message": f"Topic no longer shared with {user_id}"}
