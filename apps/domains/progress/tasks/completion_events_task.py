# apps/domains/progress/tasks/completion_events_task.py
from __future__ import annotations

import logging

from celery import shared_task

from apps.support.notifications.services import (
    get_certificate_issuer,
    get_completion_notifier,
)

logger = logging.getLogger(__name__)


@shared_task(
    bind=True,
    autoretry_for=(Exception,),
    retry_backoff=5,
    retry_kwargs={"max_retries": 3},
)
def notify_quiz_attempted_task(
    self,
    *,
    user_id: int,
    quiz_title: str,
    score: int,
    passing_score: int,
    passed: bool,
) -> None:
    get_completion_notifier().quiz_attempted(
        user_id=user_id,
        quiz_title=quiz_title,
        score=score,
        passing_score=passing_score,
        passed=passed,
    )


@shared_task(
    bind=True,
    autoretry_for=(Exception,),
    retry_backoff=5,
    retry_kwargs={"max_retries": 3},
)
def notify_lesson_completed_task(self, *, user_id: int, lesson_id: int) -> None:
    from apps.domains.courses.models import Lesson

    lesson = Lesson.objects.filter(id=int(lesson_id)).first()
    if lesson is None:
        logger.warning("[completion_events] lesson %s vanished before notification", lesson_id)
        return

    get_completion_notifier().lesson_completed(
        user_id=user_id,
        lesson_id=lesson.id,
        lesson_title=lesson.title,
        course_id=lesson.course_id,
    )


@shared_task(
    bind=True,
    autoretry_for=(Exception,),
    retry_backoff=5,
    retry_kwargs={"max_retries": 3},
)
def handle_enrollment_completed_task(self, *, enrollment_id: int) -> None:
    """
    수료 후처리: 수료증 발급 -> 수료 알림.
    발급 실패는 재시도 (autoretry), 수강 상태에는 영향 없음.
    """
    from apps.domains.enrollment.models import Enrollment

    enrollment = (
        Enrollment.objects.select_related("course")
        .filter(id=int(enrollment_id))
        .first()
    )
    if enrollment is None:
        logger.warning("[completion_events] enrollment %s not found", enrollment_id)
        return

    certificate_id = get_certificate_issuer().issue(
        user_id=enrollment.user_id,
        enrollment_id=enrollment.id,
        course_id=enrollment.course_id,
    )
    logger.info(
        "[completion_events] enrollment=%s completed certificate=%s",
        enrollment.id, certificate_id,
    )

    get_completion_notifier().enrollment_completed(
        user_id=enrollment.user_id,
        enrollment_id=enrollment.id,
        course_id=enrollment.course_id,
        course_title=enrollment.course.title,
    )
