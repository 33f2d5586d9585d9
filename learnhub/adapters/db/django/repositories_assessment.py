"""
Assessment read model: Django ORM 구현 (메서드 내부에서만 apps.domains.* import)

ORM row -> 순수 도메인 스냅샷(QuizSpec/QuestionSpec) 변환은 여기서만 한다.
"""
from __future__ import annotations

from typing import Optional

from learnhub.application.ports.read_model import AssessmentReadModel
from learnhub.domain.assessment.entities import (
    InvalidQuestion,
    QuestionSpec,
    QuizSpec,
    build_correctness,
)
from learnhub.domain.assessment.errors import QuizConfigurationError


def _question_to_spec(q) -> QuestionSpec:
    try:
        correctness = build_correctness(
            q.question_type,
            options=q.options,
            correct_answer=q.correct_answer,
        )
    except (InvalidQuestion, ValueError) as e:
        raise QuizConfigurationError(f"question {q.id} is malformed: {e}") from e

    return QuestionSpec(
        id=str(q.id),
        points=int(q.points or 0),
        order=int(q.order or 0),
        correctness=correctness,
        text=q.text or "",
        explanation=q.explanation or None,
    )


def _quiz_to_spec(quiz) -> QuizSpec:
    return QuizSpec(
        id=int(quiz.id),
        lesson_id=int(quiz.lesson_id),
        course_id=int(quiz.lesson.course_id),
        passing_score=int(quiz.passing_score),
        attempts_allowed=(int(quiz.attempts_allowed) if quiz.attempts_allowed is not None else None),
        questions=tuple(_question_to_spec(q) for q in quiz.questions.all()),
        title=quiz.title or "",
        description=quiz.description or "",
    )


def _quiz_queryset():
    from apps.domains.quizzes.models import Quiz
    return Quiz.objects.select_related("lesson").prefetch_related("questions")


class DjangoAssessmentReadModel(AssessmentReadModel):
    """AssessmentReadModel 구현. ORM 접근은 모두 메서드 내부에서 lazy import."""

    def find_enrollment(self, learner_id: int, course_id: int, *, for_update: bool = False):
        """for_update=True 는 호출자가 이미 트랜잭션 안에 있어야 함 (row lock 유지)."""
        from apps.domains.enrollment.models import Enrollment
        qs = (
            Enrollment.objects.filter(user_id=int(learner_id), course_id=int(course_id))
            .exclude(status=Enrollment.Status.DROPPED)
        )
        if for_update:
            qs = qs.select_for_update()
        return qs.first()

    def get_quiz_with_questions(self, lesson_id: int) -> Optional[QuizSpec]:
        quiz = _quiz_queryset().filter(lesson_id=int(lesson_id)).first()
        return _quiz_to_spec(quiz) if quiz else None

    def get_quiz_by_id(self, quiz_id: int) -> Optional[QuizSpec]:
        quiz = _quiz_queryset().filter(id=int(quiz_id)).first()
        return _quiz_to_spec(quiz) if quiz else None

    def count_lessons(self, course_id: int) -> int:
        from apps.domains.courses.models import Lesson
        return Lesson.objects.filter(course_id=int(course_id)).count()
