# apps/domains/progress/admin.py
from django.contrib import admin

from .models import LessonProgress


@admin.register(LessonProgress)
class LessonProgressAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "enrollment",
        "lesson",
        "status",
        "time_spent_seconds",
        "visits",
        "completed_at",
    )
    list_filter = ("status",)
    search_fields = ("enrollment__user__username", "lesson__title")
    ordering = ("-id",)

    # 상태 전이는 ProgressionCascader / LessonActivityService 만
    readonly_fields = ("status", "started_at", "completed_at", "created_at", "updated_at")
