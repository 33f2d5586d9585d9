# apps/domains/enrollment/filters.py

import django_filters

from .models import Enrollment


class EnrollmentFilter(django_filters.FilterSet):
    """
    Enrollment list filtering (staff 조회용).
    /api/v1/enrollments/?course={courseId}&status=COMPLETED
    """

    min_progress = django_filters.NumberFilter(field_name="progress_percentage", lookup_expr="gte")

    class Meta:
        model = Enrollment
        fields = {
            "course": ["exact"],
            "user": ["exact"],
            "status": ["exact"],
        }
