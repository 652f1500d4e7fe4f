class LearnPathError(Exception):
    """Base error. Carries a short user-facing message and an HTTP status."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFound(LearnPathError):
    status_code = 404


class ValidationError(LearnPathError):
    status_code = 400


class MissingField(ValidationError):
    def __init__(self, field: str):
        super().__init__(f"Missing required field: {field}")
        self.field = field


class EmptyOptionSet(ValidationError):
    def __init__(self, question_id: str):
        super().__init__(f"Question {question_id} has no options")
        self.question_id = question_id


class DanglingAnswerReference(ValidationError):
    def __init__(self, question_id: str, option_id: str):
        super().__init__(
            f"Question {question_id} references unknown option {option_id}"
        )
        self.question_id = question_id
        self.option_id = option_id


class DuplicateQuestionId(ValidationError):
    def __init__(self, question_id: str):
        super().__init__(f"Duplicate question id: {question_id}")
        self.question_id = question_id


class UnknownQuestion(ValidationError):
    def __init__(self, question_id: str):
        super().__init__(f"Question {question_id} is not part of this quiz")
        self.question_id = question_id


class InvalidQuestionType(LearnPathError):
    status_code = 400

    def __init__(self, question_type):
        super().__init__(f"Invalid question type: {question_type}")
        self.question_type = question_type


class UngradableQuestion(LearnPathError):
    status_code = 422


class Unauthenticated(LearnPathError):
    status_code = 401


class Unauthorized(LearnPathError):
    status_code = 403


class PersistenceFailure(LearnPathError):
    status_code = 500
