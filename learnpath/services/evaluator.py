"""Answer correctness rules, one per question type."""

from typing import Optional

from learnpath.errors import InvalidQuestionType, UngradableQuestion


def _evaluate_single(correct_answer, submitted_answer) -> bool:
    return isinstance(submitted_answer, str) and submitted_answer == correct_answer


def _evaluate_multiple(correct_answer, submitted_answer) -> bool:
    if isinstance(submitted_answer, str) or not isinstance(
        submitted_answer, (list, tuple, set, frozenset)
    ):
        return False
    return set(submitted_answer) == set(correct_answer)


def _evaluate_text(correct_answer, submitted_answer) -> bool:
    raise UngradableQuestion("Free-text answers are reviewed manually")


EVALUATORS = {
    "single": _evaluate_single,
    "multiple": _evaluate_multiple,
    "text": _evaluate_text,
}


def evaluate(question, submitted_answer) -> bool:
    """
    Decide whether ``submitted_answer`` is correct for ``question``.

    ``single`` answers must match the option id exactly. ``multiple`` answers
    are compared as sets, so order and repeated ids do not matter. ``text``
    answers are never graded automatically and raise UngradableQuestion.
    """
    evaluator = EVALUATORS.get(getattr(question, "type", None))
    if evaluator is None:
        raise InvalidQuestionType(getattr(question, "type", None))
    return evaluator(question.correctAnswer, submitted_answer)


def grade(question, submitted_answer) -> Optional[bool]:
    """Like evaluate, but returns None for answers pending manual review."""
    try:
        return evaluate(question, submitted_answer)
    except UngradableQuestion:
        return None
