from django.contrib import admin

from .models import Question, Quiz, QuizAttempt


class QuestionInline(admin.StackedInline):
    model = Question
    extra = 0
    fields = ("order", "question_type", "text", "points", "options", "correct_answer", "explanation")
    ordering = ("order", "id")


@admin.register(Quiz)
class QuizAdmin(admin.ModelAdmin):
    list_display = ("id", "title", "lesson", "passing_score", "attempts_allowed", "created_at")
    search_fields = ("title", "lesson__title", "lesson__course__title")
    inlines = [QuestionInline]


@admin.register(QuizAttempt)
class QuizAttemptAdmin(admin.ModelAdmin):
    """감사 기록: 조회만 가능"""

    list_display = ("id", "quiz", "user", "attempt_number", "score_percentage", "passed", "created_at")
    list_filter = ("passed",)
    search_fields = ("user__username", "quiz__title")
    readonly_fields = [f.name for f in QuizAttempt._meta.fields]

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
