# apps/domains/progress/models.py
from __future__ import annotations

from django.db import models

from apps.core.models import TimestampModel


class LessonProgress(TimestampModel):
    """
    Enrollment x Lesson 단위 진행 스냅샷

    ✅ 단일 진실:
    - status 전이는 progress 서비스만 수행
      NOT_STARTED/IN_PROGRESS -> COMPLETED (ProgressionCascader, 멱등)
      NOT_STARTED -> IN_PROGRESS (LessonActivityService)
    - completed_at 은 최초 COMPLETED 전이 때 1회만 기록
    - row 는 첫 상호작용 시 lazy 생성
    """

    class Status(models.TextChoices):
        NOT_STARTED = "NOT_STARTED", "Not started"
        IN_PROGRESS = "IN_PROGRESS", "In progress"
        COMPLETED = "COMPLETED", "Completed"

    enrollment = models.ForeignKey(
        "enrollment.Enrollment",
        on_delete=models.CASCADE,
        related_name="lesson_progress",
    )
    lesson = models.ForeignKey(
        "courses.Lesson",
        on_delete=models.CASCADE,
        related_name="progress_rows",
    )

    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.NOT_STARTED,
    )

    started_at = models.DateTimeField(null=True, blank=True)
    completed_at = models.DateTimeField(null=True, blank=True)

    # ----- activity -----
    time_spent_seconds = models.PositiveIntegerField(default=0)
    last_position = models.PositiveIntegerField(null=True, blank=True)
    visits = models.PositiveIntegerField(default=0)

    class Meta:
        constraints = [
            models.UniqueConstraint(
                fields=["enrollment", "lesson"],
                name="unique_lesson_progress_per_enrollment",
            )
        ]
        ordering = ["lesson__order", "id"]

    def __str__(self):
        return (
            f"LessonProgress(enroll={self.enrollment_id}, "
            f"lesson={self.lesson_id}, status={self.status})"
        )

    @property
    def is_completed(self) -> bool:
        return self.status == self.Status.COMPLETED
