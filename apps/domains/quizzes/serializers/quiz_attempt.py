# PATH: apps/domains/quizzes/serializers/quiz_attempt.py
from rest_framework import serializers

from apps.domains.quizzes.models import QuizAttempt


class QuizAttemptSerializer(serializers.ModelSerializer):
    """학생 본인 히스토리 (answers 는 본인에게만 노출)."""

    class Meta:
        model = QuizAttempt
        fields = [
            "id",
            "quiz",
            "attempt_number",
            "score_percentage",
            "passed",
            "earned_points",
            "total_points",
            "time_spent_seconds",
            "answers",
            "created_at",
        ]
        read_only_fields = fields


class AdminQuizAttemptSerializer(serializers.ModelSerializer):
    user_name = serializers.CharField(source="user.name", read_only=True)
    quiz_title = serializers.CharField(source="quiz.title", read_only=True)

    class Meta:
        model = QuizAttempt
        fields = "__all__"
        read_only_fields = [f.name for f in QuizAttempt._meta.fields]
