from fastapi import APIRouter, Depends, HTTPException
from trailstudy.api.deps import get_session_gate, get_current_user
from trailstudy.api.models.requests.auth import LoginRequest
from trailstudy.models.session_user import SessionUser
from trailstudy.services.auth import SessionGate

router = APIRouter()

@router.post("/login", response_model=SessionUser)
async def login(credentials: LoginRequest, gate: SessionGate = Depends(get_session_gate)):
    """Log in with an ID and a password equal to it."""
    user = gate.login(credentials.id, credentials.password)
    if not user:
        raise HTTPException(status_code=401, detail="ID and password must match")
    return user

@router.post("/logout")
async def logout(gate: SessionGate = Depends(get_session_gate)):
    gate.logout()
    return {"status": "success", "message": "You have been logged out successfully"}

@router.get("/me", response_model=SessionUser)
async def get_me(user: SessionUser = Depends(get_current_user)):
    return user
