from datetime import datetime, timezone

from learnpath.config import settings
from learnpath.database import db
from learnpath.services.quiz_repository import QuizRepository
from learnpath.services.result_repository import ResultRepository


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def get_clock():
    return utcnow


def get_quiz_repository() -> QuizRepository:
    return QuizRepository(
        db.get_collection(settings.QUIZ_COLLECTION),
        db.get_collection(settings.COURSE_COLLECTION),
    )


def get_result_repository() -> ResultRepository:
    return ResultRepository(db.get_collection(settings.RESULT_COLLECTION))
