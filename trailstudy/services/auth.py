import logging
from typing import Optional

from pydantic import ValidationError

from trailstudy.models.session_user import SessionUser
from trailstudy.services.session_storage import SessionStorage
from trailstudy.store import Store

logger = logging.getLogger(__name__)

ADMIN_FULL_NAME = "Admin User"
STUDENT_FULL_NAME = "Student User"


class SessionGate:
    """Tracks whether someone is logged in and persists that across restarts.

    The gate is either anonymous (``current_user`` is ``None``) or
    authenticated. The credential check is deliberately trivial: the submitted
    id must equal the submitted secret. The role is read from the user's
    record in the store.
    """

    def __init__(self, store: Store, storage: SessionStorage, session_key: str = "trailstudy_user"):
        self.store = store
        self.storage = storage
        self.session_key = session_key
        self.current_user: Optional[SessionUser] = None

    @property
    def is_authenticated(self) -> bool:
        return self.current_user is not None

    @property
    def is_admin(self) -> bool:
        return self.current_user is not None and self.current_user.is_admin

    def restore(self) -> Optional[SessionUser]:
        """Load a previously persisted session, discarding it if unreadable."""
        raw = self.storage.get(self.session_key)
        if raw is None:
            return None

        try:
            self.current_user = SessionUser.model_validate_json(raw)
        except ValidationError:
            logger.warning(f"Discarding unreadable session record {self.session_key}")
            self.storage.delete(self.session_key)
            self.current_user = None
            return None

        logger.info(f"Restored session for {self.current_user.id}")
        return self.current_user

    def login(self, user_id: str, secret: str) -> Optional[SessionUser]:
        if not user_id or user_id != secret:
            logger.warning(f"Rejected login for {user_id!r}")
            return None

        user = self.store.get_user(user_id)
        is_admin = bool(user and user.is_admin)
        self.current_user = SessionUser(
            id=user_id,
            is_admin=is_admin,
            full_name=ADMIN_FULL_NAME if is_admin else STUDENT_FULL_NAME
        )
        self.storage.set(self.session_key, self.current_user.model_dump_json())
        logger.info(f"Logged in {user_id} (admin={is_admin})")
        return self.current_user

    def logout(self) -> None:
        if self.current_user:
            logger.info(f"Logged out {self.current_user.id}")
        self.current_user = None
        self.storage.delete(self.session_key)
