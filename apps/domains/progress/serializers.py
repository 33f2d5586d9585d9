# apps/domains/progress/serializers.py
from rest_framework import serializers

from apps.domains.enrollment.serializers import EnrollmentProgressSerializer

from .models import LessonProgress


class LessonProgressSerializer(serializers.ModelSerializer):
    lesson_title = serializers.CharField(source="lesson.title", read_only=True)
    lesson_order = serializers.IntegerField(source="lesson.order", read_only=True)

    class Meta:
        model = LessonProgress
        fields = [
            "id",
            "enrollment",
            "lesson",
            "lesson_title",
            "lesson_order",
            "status",
            "started_at",
            "completed_at",
            "time_spent_seconds",
            "last_position",
            "visits",
            "updated_at",
        ]
        read_only_fields = fields


class LessonActivitySerializer(serializers.Serializer):
    enrollment_id = serializers.IntegerField()
    lesson_id = serializers.IntegerField()
    time_spent_seconds = serializers.IntegerField(min_value=0, required=False, default=0)
    last_position = serializers.IntegerField(min_value=0, required=False, allow_null=True, default=None)


class LessonCompleteSerializer(serializers.Serializer):
    enrollment_id = serializers.IntegerField()
    lesson_id = serializers.IntegerField()


class CascadeResultSerializer(serializers.Serializer):
    """수동 완료 응답."""

    lesson_progress = LessonProgressSerializer()
    enrollment = EnrollmentProgressSerializer()
    lesson_newly_completed = serializers.BooleanField()
    enrollment_newly_completed = serializers.BooleanField()
    completed_lessons = serializers.IntegerField()
    total_lessons = serializers.IntegerField()
    warnings = serializers.SerializerMethodField()

    def get_warnings(self, obj):
        return [w.as_dict() for w in obj.warnings]
