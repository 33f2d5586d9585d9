# apps/domains/progress/services/lesson_activity.py
from __future__ import annotations

import logging
from typing import Optional, Tuple

from django.db import transaction
from django.utils import timezone

from apps.domains.enrollment.models import Enrollment
from apps.domains.progress.models import LessonProgress

logger = logging.getLogger(__name__)


class LessonActivityService:
    """
    학습 활동(열람/재생 위치/학습 시간) 누적.
    완료 처리는 하지 않는다 -> ProgressionCascader 전담.
    """

    @staticmethod
    @transaction.atomic
    def record(
        *,
        enrollment: Enrollment,
        lesson,
        time_spent_seconds: int = 0,
        last_position: Optional[int] = None,
    ) -> Tuple[LessonProgress, Enrollment]:
        if int(lesson.course_id) != int(enrollment.course_id):
            raise ValueError(
                f"lesson {lesson.id} does not belong to course {enrollment.course_id}"
            )

        enrollment = Enrollment.objects.select_for_update().get(id=enrollment.id)
        now = timezone.now()
        spent = max(int(time_spent_seconds or 0), 0)

        lp, created = LessonProgress.objects.get_or_create(
            enrollment=enrollment,
            lesson=lesson,
            defaults={
                "status": LessonProgress.Status.IN_PROGRESS,
                "started_at": now,
                "time_spent_seconds": spent,
                "last_position": last_position,
                "visits": 1,
            },
        )

        if not created:
            if lp.status == LessonProgress.Status.NOT_STARTED:
                lp.status = LessonProgress.Status.IN_PROGRESS
            if lp.started_at is None:
                lp.started_at = now
            lp.time_spent_seconds = int(lp.time_spent_seconds or 0) + spent
            if last_position is not None:
                lp.last_position = last_position
            lp.visits = int(lp.visits or 0) + 1
            lp.save()

        # ENROLLED -> IN_PROGRESS (COMPLETED 는 절대 되돌리지 않음)
        if enrollment.status == Enrollment.Status.ENROLLED:
            enrollment.status = Enrollment.Status.IN_PROGRESS
            enrollment.started_at = enrollment.started_at or now
            enrollment.save(update_fields=["status", "started_at", "updated_at"])

        logger.debug(
            "[lesson_activity] enrollment=%s lesson=%s visits=%s spent=%s",
            enrollment.id, lesson.id, lp.visits, lp.time_spent_seconds,
        )
        return lp, enrollment
