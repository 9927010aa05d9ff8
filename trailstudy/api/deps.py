from fastapi import Depends, HTTPException, Request, status

from trailstudy.models.session_user import SessionUser
from trailstudy.services.auth import SessionGate
from trailstudy.services.quiz import QuizService
from trailstudy.store import Store


def get_store(request: Request) -> Store:
    return request.app.state.store


def get_session_gate(request: Request) -> SessionGate:
    return request.app.state.session_gate


def get_quiz_service(request: Request) -> QuizService:
    return request.app.state.quiz_service


async def get_current_user(gate: SessionGate = Depends(get_session_gate)) -> SessionUser:
    """Resolve the logged-in user or reject anonymous callers."""
    if not gate.is_authenticated:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not logged in")
    return gate.current_user


async def get_admin_user(user: SessionUser = Depends(get_current_user)) -> SessionUser:
    if not user.is_admin:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Administrator access required")
    return user
