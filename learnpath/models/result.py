from datetime import datetime
from typing import List, Optional, Union

from pydantic import BaseModel


class SubmittedAnswer(BaseModel):
    questionId: str
    answer: Union[List[str], str, None] = None


class SubmissionCreate(BaseModel):
    quizId: str
    answers: List[SubmittedAnswer] = []


class AnswerRecord(BaseModel):
    questionId: str
    answer: Union[List[str], str, None] = None
    correct: Optional[bool] = None  # None while awaiting manual review


class ResultCreate(BaseModel):
    userId: str
    quizId: str
    answers: List[AnswerRecord]
    score: int
    total: int
    pendingReview: int = 0


class Result(ResultCreate):
    id: str
    createdAt: datetime
