from fastapi import APIRouter, Depends
from typing import List, Optional
from trailstudy.api.deps import get_store, get_admin_user
from trailstudy.store import Store
from trailstudy.models.session_user import SessionUser
from trailstudy.services.user import UserService
from trailstudy.api.models.requests.user import UserCreate
from trailstudy.api.models.responses.user import UserResponse

router = APIRouter()

@router.get("/", response_model=List[UserResponse])
async def get_users(
    search: Optional[str] = None,
    store: Store = Depends(get_store),
    admin: SessionUser = Depends(get_admin_user)
):
    """List all users. Administrators only."""
    service = UserService(store)
    return service.get_users(search)

@router.post("/", response_model=UserResponse)
async def create_user(
    user: UserCreate,
    store: Store = Depends(get_store),
    admin: SessionUser = Depends(get_admin_user)
):
    """Create a user. Administrators only."""
    service = UserService(store)
    return service.create_user(user)

@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: str, store: Store = Depends(get_store), admin: SessionUser = Depends(get_admin_user)):
    service = UserService(store)
    return service.get_user(user_id)
