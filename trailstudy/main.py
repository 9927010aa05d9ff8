from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from typing import Optional
import random
import uvicorn
import logging

from trailstudy.config.logging import setup_logging
from trailstudy.config.env import Settings, settings as default_settings
from trailstudy.database import create_session_factory
from trailstudy.routers import auth, topics, flashcards, folders, users, quiz
from trailstudy.seed import seed_store
from trailstudy.services.auth import SessionGate
from trailstudy.services.quiz import QuizService
from trailstudy.services.session_storage import SessionStorage
from trailstudy.store import Store

# Set up logging
setup_logging(default_settings.log_dir)
logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application and the objects it owns for its lifetime."""
    settings = settings or default_settings

    app = FastAPI(
        title=settings.api_title,
        description=settings.api_description,
        version=settings.api_version
    )

    store = Store()
    if settings.seed_demo_data:
        seed_store(store, settings.admin_user_id)

    storage = SessionStorage(create_session_factory(settings.session_database_url))
    app.state.settings = settings
    app.state.store = store
    app.state.session_gate = SessionGate(store, storage, settings.session_key)
    app.state.quiz_service = QuizService(store, random.Random(settings.quiz_seed))

    @app.on_event("startup")
    async def startup_event():
        """Pick up the session persisted by a previous run."""
        user = app.state.session_gate.restore()
        if user:
            logger.info(f"Resumed session for {user.id}")

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Allows all origins
        allow_credentials=True,
        allow_methods=["*"],  # Allows all methods
        allow_headers=["*"],  # Allows all headers
    )

    # Include routers
    app.include_router(auth.router, prefix="/api/auth", tags=["auth"])
    app.include_router(topics.router, prefix="/api/topics", tags=["topics"])
    app.include_router(flashcards.router, prefix="/api/flashcards", tags=["flashcards"])
    app.include_router(folders.router, prefix="/api/folders", tags=["folders"])
    app.include_router(users.router, prefix="/api/users", tags=["users"])
    app.include_router(quiz.router, prefix="/api/quiz", tags=["quiz"])

    @app.get("/")
    async def root():
        return {"message": "Welcome to the TrailStudy API"}

    return app


app = create_app()

if __name__ == "__main__":
    logger.info("Starting TrailStudy API server")
    uvicorn.run("trailstudy.main:app", host="0.0.0.0", port=8000, reload=True)
