from datetime import datetime
from typing import Annotated, List, Literal, Optional, Union

from bson import ObjectId
from pydantic import BaseModel, Field


def new_id() -> str:
    return str(ObjectId())


class Option(BaseModel):
    id: str
    content: str


class QuestionBase(BaseModel):
    id: str = Field(default_factory=new_id)
    content: str
    explanation: Optional[str] = None


class SingleChoiceQuestion(QuestionBase):
    type: Literal["single"]
    options: List[Option] = []
    correctAnswer: str


class MultipleChoiceQuestion(QuestionBase):
    type: Literal["multiple"]
    options: List[Option] = []
    correctAnswer: List[str]  # compared as a set


class TextQuestion(QuestionBase):
    type: Literal["text"]
    correctAnswer: str = ""


Question = Annotated[
    Union[SingleChoiceQuestion, MultipleChoiceQuestion, TextQuestion],
    Field(discriminator="type"),
]

CHOICE_TYPES = ("single", "multiple")


class CourseSummary(BaseModel):
    id: str
    title: str
    description: Optional[str] = None


class QuizCreate(BaseModel):
    courseId: str
    title: str
    description: Optional[str] = None
    questions: List[Question] = []


class QuizUpdate(BaseModel):
    courseId: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    questions: Optional[List[Question]] = None


class Quiz(QuizCreate):
    id: str
    # Either the raw course id or the populated course document
    courseId: Union[CourseSummary, str]
    createdAt: datetime
    updatedAt: datetime

    def find_question(self, question_id: str):
        for question in self.questions:
            if question.id == question_id:
                return question
        return None


class AnswerSubmission(BaseModel):
    answer: Union[List[str], str, None] = None


class EvaluationResult(BaseModel):
    questionId: str
    correct: Optional[bool]
    pendingReview: bool = False
    explanation: Optional[str] = None
