# apps/domains/quizzes/services/attempt_service.py
from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from django.db import IntegrityError, transaction
from django.db.models import Max, QuerySet

from apps.domains.quizzes.models import QuizAttempt
from learnhub.domain.assessment.entities import Evaluation, QuizSpec
from learnhub.domain.assessment.errors import ConcurrencyConflict

logger = logging.getLogger(__name__)


def _json_safe_answers(answers: Optional[Mapping[Any, Any]]) -> dict:
    return {str(k): v for k, v in (answers or {}).items()}


class QuizAttemptService:
    """
    QuizAttempt 원장(append-only) 전담

    🔥 불변식:
    - (quiz, user) 기준 attempt_number = 1, 2, 3 ... 빈틈/중복 없음
    - 생성 후 수정/삭제 불가 (AppendOnlyQuerySet)
    """

    @staticmethod
    def history_for(*, quiz_id: int, user_id: int) -> QuerySet:
        return QuizAttempt.objects.filter(
            quiz_id=int(quiz_id), user_id=int(user_id)
        ).order_by("attempt_number")

    @staticmethod
    def count_for(*, quiz_id: int, user_id: int) -> int:
        return QuizAttempt.objects.filter(quiz_id=int(quiz_id), user_id=int(user_id)).count()

    @staticmethod
    def best_score_for(*, quiz_id: int, user_id: int) -> Optional[int]:
        return (
            QuizAttempt.objects.filter(quiz_id=int(quiz_id), user_id=int(user_id))
            .aggregate(best=Max("score_percentage"))
            .get("best")
        )

    @staticmethod
    def has_passed(*, quiz_id: int, user_id: int) -> bool:
        return QuizAttempt.objects.filter(
            quiz_id=int(quiz_id), user_id=int(user_id), passed=True
        ).exists()

    @staticmethod
    def record_attempt(
        *,
        quiz: QuizSpec,
        enrollment,
        user_id: int,
        answers: Optional[Mapping[Any, Any]],
        evaluation: Evaluation,
        previous_attempt_count: int,
        time_spent_seconds: int = 0,
    ) -> QuizAttempt:
        """
        호출자는 enrollment row lock 을 잡은 트랜잭션 안에서 호출해야 한다.
        (eligibility 재확인과 같은 atomic 단위에서 attempt_number 를 확정)
        """
        if not transaction.get_connection().in_atomic_block:
            raise RuntimeError("record_attempt must run inside an atomic block")

        attempt_number = int(previous_attempt_count) + 1

        # -------------------------------------------------
        # unique (quiz, user, attempt_number) 위반 = 동시 제출
        # savepoint 로 감싸서 바깥 트랜잭션은 깨지지 않게 한다
        # -------------------------------------------------
        try:
            with transaction.atomic():
                attempt = QuizAttempt.objects.create(
                    quiz_id=int(quiz.id),
                    user_id=int(user_id),
                    enrollment=enrollment,
                    attempt_number=attempt_number,
                    answers=_json_safe_answers(answers),
                    score_percentage=evaluation.score_percent,
                    passed=evaluation.passed,
                    earned_points=evaluation.earned_points,
                    total_points=evaluation.total_points,
                    time_spent_seconds=max(int(time_spent_seconds or 0), 0),
                )
        except IntegrityError as e:
            logger.warning(
                "[quiz_attempt] duplicate attempt_number quiz=%s user=%s number=%s",
                quiz.id, user_id, attempt_number,
            )
            raise ConcurrencyConflict() from e

        return attempt
