from django.contrib import admin

from .models import Enrollment


@admin.register(Enrollment)
class EnrollmentAdmin(admin.ModelAdmin):
    """
    ⚠️ progress_percentage / status / completed_at 은 read-only.
    수동 완료 처리는 /api/v1/progress/complete/ (cascade 경유)로만.
    """

    list_display = ("id", "user", "course", "status", "progress_percentage", "enrolled_at", "completed_at")
    list_display_links = ("id", "user")
    list_filter = ("status", "course")
    search_fields = ("user__username", "user__name", "course__title")
    readonly_fields = ("progress_percentage", "status", "started_at", "completed_at", "enrolled_at")
    ordering = ("-id",)
