from rest_framework import serializers

from .models import Enrollment


class EnrollmentSerializer(serializers.ModelSerializer):
    """
    진도 필드는 전부 read-only.
    (progress_percentage / status 는 ProgressionCascader 단일 진실)
    """

    course_title = serializers.CharField(source="course.title", read_only=True)

    class Meta:
        model = Enrollment
        fields = [
            "id",
            "user",
            "course",
            "course_title",
            "status",
            "progress_percentage",
            "enrolled_at",
            "started_at",
            "completed_at",
        ]
        read_only_fields = fields


class EnrollmentProgressSerializer(serializers.ModelSerializer):
    """진도 요약 (퀴즈 제출 / 레슨 완료 응답)."""

    class Meta:
        model = Enrollment
        fields = [
            "id",
            "status",
            "progress_percentage",
            "completed_at",
        ]
        read_only_fields = fields
