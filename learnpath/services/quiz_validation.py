from learnpath.errors import (
    DanglingAnswerReference,
    DuplicateQuestionId,
    EmptyOptionSet,
    MissingField,
)
from learnpath.models.quiz import CHOICE_TYPES


def _is_blank(value) -> bool:
    return value is None or not str(value).strip()


def validate_quiz(quiz) -> None:
    """Raise a ValidationError subclass if the quiz is malformed or inconsistent."""
    if _is_blank(quiz.title):
        raise MissingField("title")
    if _is_blank(quiz.courseId):
        raise MissingField("courseId")

    seen_ids = set()
    for question in quiz.questions:
        if question.id in seen_ids:
            raise DuplicateQuestionId(question.id)
        seen_ids.add(question.id)

        if _is_blank(question.content):
            raise MissingField(f"questions[{question.id}].content")

        if question.type not in CHOICE_TYPES:
            continue

        if not question.options:
            raise EmptyOptionSet(question.id)

        option_ids = {option.id for option in question.options}
        referenced = (
            [question.correctAnswer]
            if question.type == "single"
            else question.correctAnswer
        )
        for option_id in referenced:
            if option_id not in option_ids:
                raise DanglingAnswerReference(question.id, option_id)
