# apps/domains/quizzes/filters.py

import django_filters

from .models import QuizAttempt


class QuizAttemptFilter(django_filters.FilterSet):
    """
    /api/v1/quizzes/admin/attempts/?quiz={quizId}&user={userId}&passed=true
    """

    course = django_filters.NumberFilter(field_name="quiz__lesson__course_id")
    min_score = django_filters.NumberFilter(field_name="score_percentage", lookup_expr="gte")

    class Meta:
        model = QuizAttempt
        fields = {
            "quiz": ["exact"],
            "user": ["exact"],
            "enrollment": ["exact"],
            "passed": ["exact"],
        }
