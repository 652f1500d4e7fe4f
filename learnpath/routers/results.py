from fastapi import APIRouter, Depends
from learnpath.auth import Principal, get_current_principal
from learnpath.dependencies import get_clock, get_quiz_repository, get_result_repository
from learnpath.errors import Unauthorized
from learnpath.models.result import Result, SubmissionCreate
from learnpath.services.grading import grade_submission
from learnpath.services.quiz_repository import QuizRepository
from learnpath.services.result_repository import ResultRepository
from typing import List

router = APIRouter(prefix="/results", tags=["Results"])


@router.post("", response_model=Result, status_code=201)
async def submit_result(
    submission: SubmissionCreate,
    principal: Principal = Depends(get_current_principal),
    quiz_repository: QuizRepository = Depends(get_quiz_repository),
    result_repository: ResultRepository = Depends(get_result_repository),
    clock=Depends(get_clock),
):
    """
    Grade a full quiz submission for the authenticated user and store it
    """
    quiz = await quiz_repository.find_by_id(submission.quizId)
    result = grade_submission(quiz, principal.id, submission.answers)
    return await result_repository.create(result, now=clock())


@router.get("/{user_id}", response_model=List[Result])
async def list_results(
    user_id: str,
    principal: Principal = Depends(get_current_principal),
    result_repository: ResultRepository = Depends(get_result_repository),
):
    if principal.id != user_id:
        raise Unauthorized("Cannot read another user's results")
    return await result_repository.find_by_user(user_id)
