from fastapi import APIRouter, Depends
from trailstudy.api.deps import get_quiz_service, get_current_user
from trailstudy.models.session_user import SessionUser
from trailstudy.services.quiz import QuizService
from trailstudy.api.models.requests.quiz import QuizStart, QuizAnswer
from trailstudy.api.models.responses.quiz import QuizResponse

router = APIRouter()

@router.post("/", response_model=QuizResponse)
async def start_quiz(
    body: QuizStart,
    service: QuizService = Depends(get_quiz_service),
    user: SessionUser = Depends(get_current_user)
):
    """Start a quiz over a topic's cards in shuffled order."""
    return service.start_quiz(body.topic_id)

@router.get("/{quiz_id}", response_model=QuizResponse)
async def get_quiz(
    quiz_id: str,
    service: QuizService = Depends(get_quiz_service),
    user: SessionUser = Depends(get_current_user)
):
    return service.get_quiz(quiz_id)

@router.post("/{quiz_id}/answers", response_model=QuizResponse)
async def submit_answer(
    quiz_id: str,
    answer: QuizAnswer,
    service: QuizService = Depends(get_quiz_service),
    user: SessionUser = Depends(get_current_user)
):
    """Record the answer to the current card."""
    return service.submit_answer(quiz_id, answer.user_answer, answer.correct)

@router.post("/{quiz_id}/restart", response_model=QuizResponse)
async def restart_quiz(
    quiz_id: str,
    service: QuizService = Depends(get_quiz_service),
    user: SessionUser = Depends(get_current_user)
):
    return service.restart(quiz_id)

@router.delete("/{quiz_id}")
async def discard_quiz(
    quiz_id: str,
    service: QuizService = Depends(get_quiz_service),
    user: SessionUser = Depends(get_current_user)
):
    """Drop a quiz once the user is done with it."""
    return service.discard_quiz(quiz_id)
