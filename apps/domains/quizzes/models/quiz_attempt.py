from django.conf import settings
from django.db import models


class AppendOnlyQuerySet(models.QuerySet):
    """QuizAttempt 는 감사 기록: bulk update/delete 차단."""

    def update(self, **kwargs):
        raise TypeError("QuizAttempt rows are append-only")

    def delete(self):
        raise TypeError("QuizAttempt rows are append-only")


class QuizAttempt(models.Model):
    """
    학습자의 '퀴즈 1회 제출'을 나타내는 엔티티 (append-only)

    ✅ 설계 고정 사항
    --------------------------------------------------
    1) 생성 후 수정/삭제 없음 (감사 기록)
    2) attempt_number 는 (quiz, user) 별 1부터 빈틈없이 증가
       - UniqueConstraint 가 저장소 레벨 최종 방어선
       - 번호 계산은 QuizAttemptService 가 enrollment row lock 안에서만 수행
    3) score_percentage / passed 는 제출 시점의 채점 스냅샷
    """

    quiz = models.ForeignKey(
        "quizzes.Quiz",
        on_delete=models.PROTECT,
        related_name="attempts",
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="quiz_attempts",
    )
    enrollment = models.ForeignKey(
        "enrollment.Enrollment",
        on_delete=models.PROTECT,
        related_name="quiz_attempts",
    )

    # 1부터 시작 (n번째 제출)
    attempt_number = models.PositiveIntegerField(help_text="1부터 시작")

    # { "<question_id>": "<submitted answer>" }
    answers = models.JSONField(default=dict, blank=True)

    score_percentage = models.PositiveSmallIntegerField()
    passed = models.BooleanField(default=False)
    earned_points = models.PositiveIntegerField(default=0)
    total_points = models.PositiveIntegerField(default=0)

    time_spent_seconds = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)

    objects = AppendOnlyQuerySet.as_manager()

    class Meta:
        db_table = "quizzes_quiz_attempt"
        constraints = [
            models.UniqueConstraint(
                fields=["quiz", "user", "attempt_number"],
                name="unique_attempt_number_per_quiz_user",
            )
        ]
        indexes = [
            models.Index(fields=["quiz", "user"], name="quiz_attempt_quiz_user_idx"),
        ]
        ordering = ["-created_at", "-id"]

    def __str__(self):
        return f"QuizAttempt quiz={self.quiz_id} user={self.user_id} #{self.attempt_number}"

    def save(self, *args, **kwargs):
        if not self._state.adding:
            raise TypeError("QuizAttempt rows are immutable once created")
        super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        raise TypeError("QuizAttempt rows are append-only")
