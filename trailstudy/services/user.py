from fastapi import HTTPException
from typing import List, Optional
import logging

from trailstudy.store import Store
from trailstudy.api.models.requests.user import UserCreate
from trailstudy.api.models.responses.user import UserResponse

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, store: Store):
        self.store = store

    def get_users(self, search: Optional[str] = None) -> List[UserResponse]:
        """List users, optionally filtered by a case-insensitive ID substring."""
        users = self.store.get_all_users()
        if search:
            needle = search.lower()
            users = [u for u in users if needle in u.id.lower()]
        return [UserResponse.model_validate(u) for u in users]

    def get_user(self, user_id: str) -> UserResponse:
        user = self.store.get_user(user_id)
        if not user:
            raise HTTPException(status_code=404, detail="User not found")
        return UserResponse.model_validate(user)

    def create_user(self, user_data: UserCreate) -> UserResponse:
        user_id = user_data.id.strip()
        if not user_id:
            raise HTTPException(status_code=400, detail="Please enter a user ID")
        # The store overwrites duplicates, so the check has to happen here
        if self.store.get_user(user_id):
            logger.warning(f"Refused to create duplicate user {user_id}")
            raise HTTPException(status_code=400, detail="User ID already exists")
        return UserResponse.model_validate(self.store.create_user(user_id, is_admin=user_data.is_admin))
