# apps/domains/progress/services/progression_cascade.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from django.db import transaction
from django.utils import timezone

from apps.domains.enrollment.models import Enrollment
from apps.domains.progress.models import LessonProgress
from learnhub.application.ports.read_model import AssessmentReadModel
from learnhub.domain.assessment.errors import ConfigurationWarning
from learnhub.domain.shared.rounding import percent

logger = logging.getLogger(__name__)


@dataclass
class CascadeOutcome:
    lesson_progress: LessonProgress
    enrollment: Enrollment
    lesson_newly_completed: bool = False
    enrollment_newly_completed: bool = False
    completed_lessons: int = 0
    total_lessons: int = 0
    warnings: List[ConfigurationWarning] = field(default_factory=list)


class ProgressionCascader:
    """
    레슨 완료 -> 수강 진도 재계산 -> 수료 전이 (SSOT)

    ✅ 보장:
    - 멱등: 이미 COMPLETED 인 레슨을 다시 완료해도 completed_at / 진도 변화 없음
    - progress_percentage = round-half-up(100 * 완료 레슨 / 전체 레슨), 매번 재계산
    - 100% 도달 시 Enrollment COMPLETED (terminal, 되돌리지 않음)
    - 레슨 0개 코스는 enrollment 를 건드리지 않고 warning 만 남긴다
    """

    def __init__(self, read_model: Optional[AssessmentReadModel] = None) -> None:
        if read_model is None:
            from learnhub.adapters.db.django.repositories_assessment import DjangoAssessmentReadModel
            read_model = DjangoAssessmentReadModel()
        self.read_model = read_model

    @transaction.atomic
    def cascade(self, *, enrollment: Enrollment, lesson, attempt=None) -> CascadeOutcome:
        if int(lesson.course_id) != int(enrollment.course_id):
            raise ValueError(
                f"lesson {lesson.id} does not belong to course {enrollment.course_id}"
            )

        # -------------------------------------------------
        # 1️⃣ enrollment row lock (같은 수강의 동시 완료 직렬화)
        # -------------------------------------------------
        enrollment = Enrollment.objects.select_for_update().get(id=enrollment.id)
        now = timezone.now()
        spent = int(getattr(attempt, "time_spent_seconds", 0) or 0)

        # -------------------------------------------------
        # 2️⃣ LessonProgress upsert
        # -------------------------------------------------
        lp, created = LessonProgress.objects.get_or_create(
            enrollment=enrollment,
            lesson=lesson,
            defaults={
                "status": LessonProgress.Status.COMPLETED,
                "started_at": now,
                "completed_at": now,
                "time_spent_seconds": spent,
                "visits": 1,
            },
        )

        lesson_newly_completed = created
        if not created and lp.status != LessonProgress.Status.COMPLETED:
            lp.status = LessonProgress.Status.COMPLETED
            lp.completed_at = now
            if lp.started_at is None:
                lp.started_at = now
            lp.time_spent_seconds = int(lp.time_spent_seconds or 0) + spent
            lp.save(update_fields=[
                "status",
                "completed_at",
                "started_at",
                "time_spent_seconds",
                "updated_at",
            ])
            lesson_newly_completed = True

        outcome = CascadeOutcome(
            lesson_progress=lp,
            enrollment=enrollment,
            lesson_newly_completed=lesson_newly_completed,
        )

        # -------------------------------------------------
        # 3️⃣ 진도 재계산 (upsert 이후 카운트)
        # -------------------------------------------------
        total = int(self.read_model.count_lessons(enrollment.course_id))
        outcome.total_lessons = total
        if total <= 0:
            logger.warning(
                "[progression] course has no lessons (course_id=%s, enrollment_id=%s)",
                enrollment.course_id, enrollment.id,
            )
            outcome.warnings.append(
                ConfigurationWarning(
                    code="course_has_no_lessons",
                    detail=f"Course {enrollment.course_id} has no lessons; progress was not updated.",
                )
            )
            return outcome

        completed = LessonProgress.objects.filter(
            enrollment=enrollment,
            lesson__course_id=enrollment.course_id,
            status=LessonProgress.Status.COMPLETED,
        ).count()
        outcome.completed_lessons = completed

        pct = percent(min(completed, total), total)

        # -------------------------------------------------
        # 4️⃣ Enrollment 반영 (COMPLETED 는 terminal)
        # -------------------------------------------------
        update_fields = []
        if enrollment.progress_percentage != pct:
            enrollment.progress_percentage = pct
            update_fields.append("progress_percentage")

        # ENROLLED -> IN_PROGRESS 는 LessonActivityService 담당 (여기서는 COMPLETED 전이만)
        if pct == 100 and enrollment.status != Enrollment.Status.COMPLETED:
            enrollment.status = Enrollment.Status.COMPLETED
            enrollment.completed_at = now
            update_fields += ["status", "completed_at"]
            outcome.enrollment_newly_completed = True

        if update_fields:
            enrollment.save(update_fields=update_fields + ["updated_at"])

        logger.info(
            "[progression] enrollment=%s lesson=%s newly_completed=%s progress=%s%% (%s/%s) status=%s",
            enrollment.id, lesson.id, lesson_newly_completed, pct, completed, total, enrollment.status,
        )
        return outcome
