from django.db import models

from apps.core.models import TimestampModel


# ========================================================
# Course
# ========================================================

class Course(TimestampModel):
    """
    강의 정의 (read model)
    - 생성/수정 CRUD 는 외부 협력자 책임, 엔진은 읽기만 한다.
    """

    title = models.CharField(max_length=255)
    slug = models.SlugField(max_length=255, unique=True)
    description = models.TextField(blank=True)

    is_published = models.BooleanField(default=True)

    def __str__(self):
        return self.title


# ========================================================
# Lesson
# ========================================================

class Lesson(TimestampModel):
    class ContentType(models.TextChoices):
        VIDEO = "VIDEO", "Video"
        ARTICLE = "ARTICLE", "Article"
        QUIZ = "QUIZ", "Quiz"

    course = models.ForeignKey(
        Course,
        on_delete=models.CASCADE,
        related_name="lessons",
    )

    order = models.PositiveIntegerField()
    title = models.CharField(max_length=255)
    content_type = models.CharField(
        max_length=20,
        choices=ContentType.choices,
        default=ContentType.ARTICLE,
    )
    duration_minutes = models.PositiveIntegerField(null=True, blank=True)

    class Meta:
        ordering = ["order", "id"]

    def __str__(self):
        return f"{self.course.title} - {self.order}. {self.title}"
