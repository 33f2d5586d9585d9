# apps/domains/quizzes/models/__init__.py
from .quiz import Quiz
from .question import Question
from .quiz_attempt import QuizAttempt

__all__ = [
    "Quiz",
    "Question",
    "QuizAttempt",
]
