from django.conf import settings
from django.core.validators import MaxValueValidator
from django.db import models

from apps.core.models import TimestampModel
from apps.domains.courses.models import Course


# ========================================================
# Enrollment (강의 단위 수강 등록)
# ========================================================

class Enrollment(TimestampModel):
    """
    학습자가 특정 강의를 수강하는 행위 + 진도 스냅샷.

    ✅ 단일 진실:
    - progress_percentage / status(COMPLETED) 는 ProgressionCascader 만 쓴다.
      (관리자 수동 완료도 cascade 를 거친다)
    - progress_percentage == round(100 * completed_lessons / total_lessons)
    - COMPLETED 는 종료 상태 (되돌리지 않음)
    """

    class Status(models.TextChoices):
        ENROLLED = "ENROLLED", "Enrolled"
        IN_PROGRESS = "IN_PROGRESS", "In progress"
        COMPLETED = "COMPLETED", "Completed"
        DROPPED = "DROPPED", "Dropped"

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="enrollments",
    )
    course = models.ForeignKey(
        Course,
        on_delete=models.CASCADE,
        related_name="enrollments",
    )

    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.ENROLLED,
    )
    progress_percentage = models.PositiveSmallIntegerField(
        default=0,
        validators=[MaxValueValidator(100)],
    )

    enrolled_at = models.DateTimeField(auto_now_add=True)
    started_at = models.DateTimeField(null=True, blank=True)
    completed_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        constraints = [
            models.UniqueConstraint(
                fields=["user", "course"],
                name="unique_enrollment_per_course",
            )
        ]
        ordering = ["-enrolled_at", "-id"]

    def __str__(self):
        return f"{self.user} -> {self.course.title}"

    @property
    def is_completed(self) -> bool:
        return self.status == self.Status.COMPLETED
