from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from django.db import models

from apps.core.models import BaseModel
from learnhub.domain.assessment.entities import InvalidQuestion, build_correctness

from .quiz import Quiz


class Question(BaseModel):
    """
    퀴즈 문항 정의

    정답 데이터 (유형별):
    - MULTIPLE_CHOICE : options = [{"id": "a", "text": "...", "is_correct": true}, ...]
                        is_correct 는 정확히 1개
    - TRUE_FALSE      : correct_answer = "true" | "false"
    - SHORT_ANSWER    : correct_answer = 정답 문자열

    ⚠️ options.is_correct / correct_answer / explanation 은 제출 전 절대 노출 금지
    """

    class QuestionType(models.TextChoices):
        MULTIPLE_CHOICE = "MULTIPLE_CHOICE", "Multiple choice"
        TRUE_FALSE = "TRUE_FALSE", "True / False"
        SHORT_ANSWER = "SHORT_ANSWER", "Short answer"

    quiz = models.ForeignKey(
        Quiz,
        on_delete=models.CASCADE,
        related_name="questions",
    )

    question_type = models.CharField(
        max_length=20,
        choices=QuestionType.choices,
    )
    text = models.TextField()
    points = models.PositiveIntegerField(
        default=1,
        validators=[MinValueValidator(1)],
    )
    order = models.PositiveIntegerField(default=0)

    options = models.JSONField(null=True, blank=True)
    correct_answer = models.CharField(max_length=500, null=True, blank=True)
    explanation = models.TextField(null=True, blank=True)

    class Meta:
        db_table = "quizzes_question"
        ordering = ["order", "id"]

    def __str__(self):
        return f"{self.quiz} Q{self.order}"

    def clean(self):
        super().clean()
        try:
            build_correctness(
                self.question_type,
                options=self.options,
                correct_answer=self.correct_answer,
            )
        except (InvalidQuestion, ValueError) as e:
            raise ValidationError({"options": str(e)}) from e

    def save(self, *args, **kwargs):
        # points >= 1, MULTIPLE_CHOICE 정답 1개 규칙은 저장 경계에서 강제
        self.full_clean()
        super().save(*args, **kwargs)
