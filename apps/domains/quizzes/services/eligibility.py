# apps/domains/quizzes/services/eligibility.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from apps.domains.quizzes.services.attempt_service import QuizAttemptService
from learnhub.application.ports.read_model import AssessmentReadModel
from learnhub.domain.assessment.entities import QuizSpec
from learnhub.domain.assessment.errors import AttemptsExhausted, NotEnrolled


@dataclass(frozen=True)
class Eligibility:
    enrollment: Any
    previous_attempt_count: int
    attempts_remaining: Optional[int]  # None = 무제한


class EligibilityGate:
    """
    제출 전 검사: 수강 여부 -> 남은 시도 횟수.
    실패 시 아무것도 기록하지 않고 예외로 끝난다.
    """

    @staticmethod
    def check(*, read_model: AssessmentReadModel, user_id: int, quiz: QuizSpec, for_update: bool = False) -> Eligibility:
        enrollment = read_model.find_enrollment(user_id, quiz.course_id, for_update=for_update)
        if enrollment is None:
            raise NotEnrolled()

        previous = QuizAttemptService.count_for(quiz_id=quiz.id, user_id=user_id)

        if quiz.attempts_allowed is None:
            return Eligibility(enrollment=enrollment, previous_attempt_count=previous, attempts_remaining=None)

        if previous >= quiz.attempts_allowed:
            raise AttemptsExhausted(
                attempts_allowed=quiz.attempts_allowed,
                attempts_used=previous,
                best_score=QuizAttemptService.best_score_for(quiz_id=quiz.id, user_id=user_id),
            )

        return Eligibility(
            enrollment=enrollment,
            previous_attempt_count=previous,
            attempts_remaining=quiz.attempts_allowed - previous,
        )
