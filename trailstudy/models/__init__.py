from .base import Base
from .flashcard import Flashcard
from .folder import Folder
from .quiz import QuizResult, QuizSession
from .session_record import SessionRecord
from .session_user import SessionUser
from .topic import Topic
from .user import User

__all__ = [
    'Base',
    'Flashcard',
    'Folder',
    'QuizResult',
    'QuizSession',
    'SessionRecord',
    'SessionUser',
    'Topic',
    'User',
]
