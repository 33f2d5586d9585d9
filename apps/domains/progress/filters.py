# apps/domains/progress/filters.py
import django_filters

from .models import LessonProgress


class LessonProgressFilter(django_filters.FilterSet):
    course = django_filters.NumberFilter(field_name="lesson__course_id")
    user = django_filters.NumberFilter(field_name="enrollment__user_id")

    class Meta:
        model = LessonProgress
        fields = {
            "enrollment": ["exact"],
            "lesson": ["exact"],
            "status": ["exact"],
        }
