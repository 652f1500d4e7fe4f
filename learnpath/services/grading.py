from typing import List

from learnpath.errors import UnknownQuestion
from learnpath.models.quiz import Quiz
from learnpath.models.result import AnswerRecord, ResultCreate, SubmittedAnswer
from learnpath.services.evaluator import grade


def grade_submission(quiz: Quiz, user_id: str, answers: List[SubmittedAnswer]) -> ResultCreate:
    """
    Grade every question of the quiz against the submitted answers.

    Unanswered gradeable questions count as incorrect; free-text questions
    are recorded with ``correct=None`` and counted in ``pendingReview``.
    """
    submitted = {}
    for item in answers:
        if quiz.find_question(item.questionId) is None:
            raise UnknownQuestion(item.questionId)
        submitted[item.questionId] = item.answer

    records = []
    score = total = pending = 0
    for question in quiz.questions:
        answer = submitted.get(question.id)
        correct = grade(question, answer)
        if correct is None:
            pending += 1
        else:
            total += 1
            score += int(correct)
        records.append(
            AnswerRecord(questionId=question.id, answer=answer, correct=correct)
        )

    return ResultCreate(
        userId=user_id,
        quizId=quiz.id,
        answers=records,
        score=score,
        total=total,
        pendingReview=pending,
    )
