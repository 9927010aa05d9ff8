import logging
from typing import Dict, List, Optional

from trailstudy.models.flashcard import Flashcard
from trailstudy.models.folder import Folder
from trailstudy.models.topic import Topic
from trailstudy.models.user import User
from trailstudy.utils.ids import generate_id

logger = logging.getLogger(__name__)


class Store:
    """In-memory repository for users, topics, flashcards and folders.

    Each entity type lives in exactly one map. Relationships that the
    application reads as embedded lists (a topic's flashcards, a user's
    created topics and folders) are computed on read, so there is no second
    copy to keep in sync. Every read returns a deep copy; state only changes
    through the methods below.

    Absent entities are reported with ``None``, an empty list or ``False``.
    """

    def __init__(self):
        self._users: Dict[str, User] = {}
        self._topics: Dict[str, Topic] = {}
        self._flashcards: Dict[str, Flashcard] = {}
        self._folders: Dict[str, Folder] = {}

    # User management

    def create_user(self, user_id: str, is_admin: bool = False) -> User:
        """Create a user. An existing user with the same id is replaced."""
        if user_id in self._users:
            logger.warning(f"Overwriting existing user {user_id}")
        self._users[user_id] = User(id=user_id, is_admin=is_admin)
        logger.info(f"Created user {user_id} (admin={is_admin})")
        return self._user_snapshot(self._users[user_id])

    def get_user(self, user_id: str) -> Optional[User]:
        user = self._users.get(user_id)
        return self._user_snapshot(user) if user else None

    def get_all_users(self) -> List[User]:
        return [self._user_snapshot(u) for u in self._users.values()]

    # Topic management

    def create_topic(
        self,
        title: str,
        created_by: str,
        description: str = "",
        is_public: bool = False,
        topic_id: Optional[str] = None
    ) -> Topic:
        """Create a topic with no flashcards.

        The creator does not have to exist; such a topic is simply owned by
        nobody until a user with that id is created.
        """
        topic = Topic(
            id=topic_id or generate_id("topic"),
            title=title,
            description=description,
            is_public=is_public,
            created_by=created_by
        )
        self._topics[topic.id] = topic
        if created_by not in self._users:
            logger.warning(f"Topic {topic.id} created by unknown user {created_by}")
        logger.info(f"Created topic {topic.id} ({title!r}) for {created_by}")
        return self._topic_snapshot(topic)

    def get_topic(self, topic_id: str) -> Optional[Topic]:
        topic = self._topics.get(topic_id)
        return self._topic_snapshot(topic) if topic else None

    def get_user_topics(self, user_id: str) -> List[Topic]:
        """Topics created by the user followed by topics shared with them."""
        user = self._users.get(user_id)
        if not user:
            return []

        topic_ids = self._created_topic_ids(user_id)
        topic_ids += [tid for tid in user.shared_topic_ids if tid not in topic_ids]
        return [
            self._topic_snapshot(self._topics[tid])
            for tid in topic_ids
            if tid in self._topics
        ]

    def get_public_topics(self) -> List[Topic]:
        return [self._topic_snapshot(t) for t in self._topics.values() if t.is_public]

    def update_topic(self, topic: Topic) -> bool:
        """Replace a topic's fields by id. Its flashcards are left alone."""
        existing = self._topics.get(topic.id)
        if not existing:
            logger.warning(f"Cannot update unknown topic {topic.id}")
            return False

        self._topics[topic.id] = topic.model_copy(
            deep=True,
            update={"created_at": existing.created_at, "flashcards": []}
        )
        logger.info(f"Updated topic {topic.id}")
        return True

    def delete_topic(self, topic_id: str) -> bool:
        """Delete a topic along with its flashcards and every reference to it."""
        card_ids = [c.id for c in self._flashcards.values() if c.topic_id == topic_id]
        for card_id in card_ids:
            del self._flashcards[card_id]

        for user in self._users.values():
            if topic_id in user.shared_topic_ids:
                user.shared_topic_ids = [t for t in user.shared_topic_ids if t != topic_id]

        for folder in self._folders.values():
            if topic_id in folder.topics:
                folder.topics = [t for t in folder.topics if t != topic_id]

        if self._topics.pop(topic_id, None) is None:
            return False
        logger.info(f"Deleted topic {topic_id} and {len(card_ids)} flashcards")
        return True

    # Flashcard management

    def create_flashcard(
        self,
        topic_id: str,
        question: str,
        answer: str,
        created_by: str,
        image_url: Optional[str] = None,
        card_id: Optional[str] = None
    ) -> Optional[Flashcard]:
        """Create a flashcard in an existing topic; ``None`` if the topic is unknown."""
        if topic_id not in self._topics:
            logger.warning(f"Rejected flashcard for unknown topic {topic_id}")
            return None

        card = Flashcard(
            id=card_id or generate_id("card"),
            topic_id=topic_id,
            question=question,
            answer=answer,
            image_url=image_url,
            created_by=created_by
        )
        self._flashcards[card.id] = card
        logger.info(f"Created flashcard {card.id} in topic {topic_id}")
        return card.model_copy(deep=True)

    def get_flashcard(self, card_id: str) -> Optional[Flashcard]:
        card = self._flashcards.get(card_id)
        return card.model_copy(deep=True) if card else None

    def get_flashcards_by_topic(self, topic_id: str) -> List[Flashcard]:
        return [
            c.model_copy(deep=True)
            for c in self._flashcards.values()
            if c.topic_id == topic_id
        ]

    def update_flashcard(self, card: Flashcard) -> bool:
        """Replace a flashcard by id, keeping its place in creation order.

        Moving a card to another topic is allowed as long as that topic exists.
        """
        existing = self._flashcards.get(card.id)
        if not existing or card.topic_id not in self._topics:
            logger.warning(f"Cannot update flashcard {card.id}")
            return False

        self._flashcards[card.id] = card.model_copy(
            deep=True,
            update={"created_at": existing.created_at}
        )
        return True

    def delete_flashcard(self, card_id: str) -> bool:
        if self._flashcards.pop(card_id, None) is None:
            return False
        logger.info(f"Deleted flashcard {card_id}")
        return True

    # Folder management

    def create_folder(
        self,
        name: str,
        created_by: str,
        topics: Optional[List[str]] = None
    ) -> Folder:
        folder = Folder(
            id=generate_id("folder"),
            name=name,
            topics=list(topics or []),
            created_by=created_by
        )
        self._folders[folder.id] = folder
        logger.info(f"Created folder {folder.id} ({name!r}) for {created_by}")
        return folder.model_copy(deep=True)

    def get_folder(self, folder_id: str) -> Optional[Folder]:
        folder = self._folders.get(folder_id)
        return folder.model_copy(deep=True) if folder else None

    def get_user_folders(self, user_id: str) -> List[Folder]:
        if user_id not in self._users:
            return []
        return [
            f.model_copy(deep=True)
            for f in self._folders.values()
            if f.created_by == user_id
        ]

    def update_folder(self, folder: Folder) -> bool:
        if folder.id not in self._folders:
            logger.warning(f"Cannot update unknown folder {folder.id}")
            return False
        self._folders[folder.id] = folder.model_copy(deep=True)
        return True

    def delete_folder(self, folder_id: str) -> bool:
        if self._folders.pop(folder_id, None) is None:
            return False
        logger.info(f"Deleted folder {folder_id}")
        return True

    def add_topic_to_folder(self, folder_id: str, topic_id: str) -> bool:
        folder = self._folders.get(folder_id)
        if not folder or topic_id not in self._topics:
            return False
        if topic_id not in folder.topics:
            folder.topics.append(topic_id)
        return True

    def get_topics_in_folder(self, folder_id: str) -> List[Topic]:
        folder = self._folders.get(folder_id)
        if not folder:
            return []
        return [
            self._topic_snapshot(self._topics[tid])
            for tid in folder.topics
            if tid in self._topics
        ]

    # Sharing management

    def share_topic(self, topic_id: str, user_id: str) -> bool:
        user = self._users.get(user_id)
        if topic_id not in self._topics or not user:
            logger.warning(f"Cannot share topic {topic_id} with {user_id}")
            return False

        if topic_id not in user.shared_topic_ids:
            user.shared_topic_ids.append(topic_id)
            logger.info(f"Shared topic {topic_id} with {user_id}")
        return True

    def unshare_topic_with_user(self, topic_id: str, user_id: str) -> bool:
        user = self._users.get(user_id)
        if not user:
            return False
        user.shared_topic_ids = [t for t in user.shared_topic_ids if t != topic_id]
        return True

    # Derived views

    def _created_topic_ids(self, user_id: str) -> List[str]:
        return [t.id for t in self._topics.values() if t.created_by == user_id]

    def _topic_snapshot(self, topic: Topic) -> Topic:
        return topic.model_copy(
            deep=True,
            update={"flashcards": self.get_flashcards_by_topic(topic.id)}
        )

    def _user_snapshot(self, user: User) -> User:
        return user.model_copy(
            deep=True,
            update={
                "created_topic_ids": self._created_topic_ids(user.id),
                "folders": self.get_user_folders(user.id)
            }
        )