from learnhub.domain.assessment.entities import (
    ChoiceOption,
    Evaluation,
    GradeResult,
    InvalidQuestion,
    MultipleChoice,
    QuestionResult,
    QuestionSpec,
    QuestionType,
    QuizSpec,
    ShortAnswer,
    TrueFalse,
    build_correctness,
)
from learnhub.domain.assessment.errors import (
    AssessmentError,
    AttemptsExhausted,
    ConcurrencyConflict,
    ConfigurationWarning,
    NotEnrolled,
    QuizConfigurationError,
    QuizNotFound,
)
from learnhub.domain.assessment.evaluation import evaluate
from learnhub.domain.assessment.grading import grade

__all__ = [
    "ChoiceOption",
    "Evaluation",
    "GradeResult",
    "InvalidQuestion",
    "MultipleChoice",
    "QuestionResult",
    "QuestionSpec",
    "QuestionType",
    "QuizSpec",
    "ShortAnswer",
    "TrueFalse",
    "build_correctness",
    "AssessmentError",
    "AttemptsExhausted",
    "ConcurrencyConflict",
    "ConfigurationWarning",
    "NotEnrolled",
    "QuizConfigurationError",
    "QuizNotFound",
    "evaluate",
    "grade",
]
