# apps/domains/quizzes/services/submission_service.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, List, Mapping, Optional

from django.conf import settings
from django.db import OperationalError

from apps.domains.courses.models import Lesson
from apps.domains.progress.dispatcher import dispatch_completion_events, dispatch_quiz_attempted
from apps.domains.progress.services.progression_cascade import CascadeOutcome, ProgressionCascader
from apps.domains.quizzes.models import QuizAttempt
from apps.domains.quizzes.services.attempt_service import QuizAttemptService
from apps.domains.quizzes.services.eligibility import EligibilityGate
from learnhub.adapters.db.django.uow import DjangoUnitOfWork
from learnhub.domain.assessment import evaluate
from learnhub.domain.assessment.entities import Evaluation, QuizSpec
from learnhub.domain.assessment.errors import (
    ConcurrencyConflict,
    ConfigurationWarning,
    QuizNotFound,
)
from learnhub.domain.shared.ids import generate_request_id

logger = logging.getLogger(__name__)

# PostgreSQL serialization_failure / deadlock_detected
_RETRYABLE_PGCODES = {"40001", "40P01"}


def _is_serialization_failure(exc: OperationalError) -> bool:
    cause = exc.__cause__ or exc
    if getattr(cause, "pgcode", None) in _RETRYABLE_PGCODES:
        return True
    # sqlite (개발/테스트)
    return "database is locked" in str(exc).lower()


@dataclass
class SubmissionOutcome:
    attempt: QuizAttempt
    quiz: QuizSpec
    evaluation: Evaluation
    attempts_remaining: Optional[int]
    cascade: Optional[CascadeOutcome] = None
    warnings: List[ConfigurationWarning] = field(default_factory=list)

    @property
    def lesson_completed(self) -> bool:
        # 통과한 제출에서만 cascade 가 실행된다
        return self.cascade is not None

    @property
    def enrollment(self):
        if self.cascade is not None:
            return self.cascade.enrollment
        return self.attempt.enrollment


class QuizSubmissionService:
    """
    퀴즈 제출 오케스트레이터 (SSOT)

    흐름 (한 트랜잭션):
    1) Eligibility (enrollment row lock)
    2) Evaluate (순수 채점)
    3) Attempt 원장 기록
    4) 통과 시 Progression cascade
    5) 커밋 이후 알림 이벤트 (on_commit)

    동시 제출 충돌(ConcurrencyConflict)은 트랜잭션 밖에서 설정 횟수만큼 재시도.
    """

    def __init__(
        self,
        *,
        uow_factory: Callable[[], DjangoUnitOfWork] = DjangoUnitOfWork,
        cascader: Optional[ProgressionCascader] = None,
        max_conflict_retries: Optional[int] = None,
    ) -> None:
        self._uow_factory = uow_factory
        self._cascader = cascader
        if max_conflict_retries is None:
            max_conflict_retries = getattr(settings, "LEARNHUB_ATTEMPT_CONFLICT_RETRIES", 1)
        self._max_conflict_retries = max(int(max_conflict_retries), 0)

    def submit(
        self,
        *,
        user_id: int,
        quiz_id: int,
        answers: Optional[Mapping[Any, Any]],
        time_spent_seconds: int = 0,
    ) -> SubmissionOutcome:
        request_id = generate_request_id()
        retries = 0

        while True:
            try:
                try:
                    return self._submit_once(
                        request_id=request_id,
                        user_id=user_id,
                        quiz_id=quiz_id,
                        answers=answers,
                        time_spent_seconds=time_spent_seconds,
                    )
                except OperationalError as e:
                    if not _is_serialization_failure(e):
                        raise
                    raise ConcurrencyConflict() from e
            except ConcurrencyConflict:
                if retries >= self._max_conflict_retries:
                    logger.warning(
                        "[quiz_submit:%s] conflict not resolved after %s retries (quiz=%s user=%s)",
                        request_id, retries, quiz_id, user_id,
                    )
                    raise
                retries += 1
                logger.info(
                    "[quiz_submit:%s] concurrent submission detected, retrying (%s/%s)",
                    request_id, retries, self._max_conflict_retries,
                )

    # ---------------------------------------------------------
    # Internal: single transactional attempt
    # ---------------------------------------------------------
    def _submit_once(
        self,
        *,
        request_id: str,
        user_id: int,
        quiz_id: int,
        answers: Optional[Mapping[Any, Any]],
        time_spent_seconds: int,
    ) -> SubmissionOutcome:
        with self._uow_factory() as uow:
            read_model = uow.read_model

            quiz = read_model.get_quiz_by_id(quiz_id)
            if quiz is None:
                raise QuizNotFound()

            # 1️⃣ gate (enrollment row lock 유지)
            eligibility = EligibilityGate.check(
                read_model=read_model,
                user_id=user_id,
                quiz=quiz,
                for_update=True,
            )

            # 2️⃣ 채점 (설정 오류면 attempt 소비 없이 중단)
            evaluation = evaluate(quiz, answers)

            # 3️⃣ 원장 기록
            attempt = QuizAttemptService.record_attempt(
                quiz=quiz,
                enrollment=eligibility.enrollment,
                user_id=user_id,
                answers=answers,
                evaluation=evaluation,
                previous_attempt_count=eligibility.previous_attempt_count,
                time_spent_seconds=time_spent_seconds,
            )

            remaining = eligibility.attempts_remaining
            if remaining is not None:
                remaining -= 1

            outcome = SubmissionOutcome(
                attempt=attempt,
                quiz=quiz,
                evaluation=evaluation,
                attempts_remaining=remaining,
            )

            # 4️⃣ 통과 시 레슨 완료 cascade
            if evaluation.passed:
                cascader = self._cascader or ProgressionCascader(read_model=read_model)
                lesson = Lesson.objects.get(id=quiz.lesson_id)
                outcome.cascade = cascader.cascade(
                    enrollment=eligibility.enrollment,
                    lesson=lesson,
                    attempt=attempt,
                )
                outcome.warnings.extend(outcome.cascade.warnings)

            # 5️⃣ 커밋 이후 이벤트
            dispatch_quiz_attempted(
                user_id=user_id,
                quiz_title=quiz.title,
                score=evaluation.score_percent,
                passing_score=evaluation.passing_score,
                passed=evaluation.passed,
            )
            dispatch_completion_events(user_id=user_id, cascade=outcome.cascade)

        logger.info(
            "[quiz_submit:%s] quiz=%s user=%s attempt=#%s score=%s passed=%s remaining=%s",
            request_id, quiz.id, user_id, attempt.attempt_number,
            evaluation.score_percent, evaluation.passed, remaining,
        )
        return outcome
