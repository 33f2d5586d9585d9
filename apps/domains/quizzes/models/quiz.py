from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from apps.core.models import BaseModel


class Quiz(BaseModel):
    """
    레슨에 달린 퀴즈 정의 (1 lesson : 1 quiz)

    - passing_score : 0~100 정수 퍼센트, score >= passing_score 면 통과
    - attempts_allowed : None 이면 무제한
    ⚠️ attempt 가 생긴 이후의 수정은 지원하지 않는다 (채점 스냅샷 보장 불가)
    """

    lesson = models.OneToOneField(
        "courses.Lesson",
        on_delete=models.CASCADE,
        related_name="quiz",
    )

    title = models.CharField(max_length=255)
    description = models.TextField(blank=True)

    passing_score = models.PositiveSmallIntegerField(
        default=70,
        validators=[MinValueValidator(0), MaxValueValidator(100)],
    )
    attempts_allowed = models.PositiveIntegerField(
        null=True,
        blank=True,
        validators=[MinValueValidator(1)],
        help_text="비우면 무제한",
    )

    class Meta:
        db_table = "quizzes_quiz"
        ordering = ["-created_at"]

    def __str__(self):
        return self.title

    def save(self, *args, **kwargs):
        # passing_score 0~100, attempts_allowed >= 1 (또는 None) 은 저장 경계에서 강제
        self.full_clean()
        super().save(*args, **kwargs)

    @property
    def course_id(self) -> int:
        return self.lesson.course_id
