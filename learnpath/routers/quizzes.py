from fastapi import APIRouter, Depends
from learnpath.auth import Principal, get_current_principal
from learnpath.dependencies import get_clock, get_quiz_repository
from learnpath.errors import NotFound
from learnpath.models.quiz import (
    AnswerSubmission,
    EvaluationResult,
    Quiz,
    QuizCreate,
    QuizUpdate,
)
from learnpath.services.evaluator import grade
from learnpath.services.quiz_repository import QuizRepository
from typing import List
import logging

router = APIRouter(prefix="/quizzes", tags=["Quizzes"])

logger = logging.getLogger(__name__)


@router.get("", response_model=List[Quiz])
async def list_quizzes(repository: QuizRepository = Depends(get_quiz_repository)):
    return await repository.find_all(populate=True)


@router.get("/{quiz_id}", response_model=Quiz)
async def get_quiz(quiz_id: str, repository: QuizRepository = Depends(get_quiz_repository)):
    return await repository.find_by_id(quiz_id, populate=True)


@router.post("", response_model=Quiz, status_code=201)
async def create_quiz(
    payload: QuizCreate,
    principal: Principal = Depends(get_current_principal),
    repository: QuizRepository = Depends(get_quiz_repository),
    clock=Depends(get_clock),
):
    logger.info(f"User {principal.id} creating quiz '{payload.title}'")
    return await repository.create(payload, now=clock())


@router.put("/{quiz_id}", response_model=Quiz)
async def update_quiz(
    quiz_id: str,
    patch: QuizUpdate,
    principal: Principal = Depends(get_current_principal),
    repository: QuizRepository = Depends(get_quiz_repository),
    clock=Depends(get_clock),
):
    logger.info(f"User {principal.id} updating quiz {quiz_id}")
    return await repository.update(quiz_id, patch, now=clock())


@router.delete("/{quiz_id}")
async def delete_quiz(
    quiz_id: str,
    principal: Principal = Depends(get_current_principal),
    repository: QuizRepository = Depends(get_quiz_repository),
):
    logger.info(f"User {principal.id} deleting quiz {quiz_id}")
    await repository.delete(quiz_id)
    return {"message": "Quiz deleted"}


@router.post(
    "/{quiz_id}/questions/{question_id}/evaluate", response_model=EvaluationResult
)
async def evaluate_answer(
    quiz_id: str,
    question_id: str,
    submission: AnswerSubmission,
    repository: QuizRepository = Depends(get_quiz_repository),
):
    """
    Grade a single answer. Free-text questions come back with
    ``correct=None`` and ``pendingReview=True``.
    """
    quiz = await repository.find_by_id(quiz_id)
    question = quiz.find_question(question_id)
    if question is None:
        raise NotFound("Question not found")

    correct = grade(question, submission.answer)
    return EvaluationResult(
        questionId=question.id,
        correct=correct,
        pendingReview=correct is None,
        explanation=question.explanation,
    )
