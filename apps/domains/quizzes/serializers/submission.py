# PATH: apps/domains/quizzes/serializers/submission.py
from __future__ import annotations

from dataclasses import asdict

from rest_framework import serializers

from apps.domains.enrollment.serializers import EnrollmentProgressSerializer


class QuizSubmissionSerializer(serializers.Serializer):
    """
    입력: { "answers": { "<question_id>": <answer> }, "time_spent_seconds": 120 }

    - answers 값은 문자열/불리언/숫자/null 허용 (형식이 틀리면 채점에서 미제출 처리)
    - 퀴즈에 없는 question_id 는 무시된다
    """

    answers = serializers.DictField(child=serializers.JSONField(allow_null=True), allow_empty=True)
    time_spent_seconds = serializers.IntegerField(min_value=0, required=False, default=0)


class QuestionResultSerializer(serializers.Serializer):
    question_id = serializers.CharField()
    question_text = serializers.CharField()
    question_type = serializers.CharField()
    user_answer = serializers.CharField(allow_null=True)
    correct_answer = serializers.CharField()
    is_correct = serializers.BooleanField()
    points = serializers.IntegerField()
    earned_points = serializers.IntegerField()
    explanation = serializers.CharField(allow_null=True)


class SubmissionResultSerializer(serializers.Serializer):
    """제출 응답 (제출 이후이므로 정답/해설 포함)."""

    attempt_id = serializers.IntegerField()
    attempt_number = serializers.IntegerField()
    score = serializers.IntegerField()
    passed = serializers.BooleanField()
    passing_score = serializers.IntegerField()
    earned_points = serializers.IntegerField()
    total_points = serializers.IntegerField()
    attempts_remaining = serializers.IntegerField(allow_null=True)
    lesson_completed = serializers.BooleanField()
    enrollment = EnrollmentProgressSerializer()
    per_question_results = QuestionResultSerializer(many=True)
    warnings = serializers.ListField(child=serializers.DictField())
    message = serializers.CharField()

    @classmethod
    def from_outcome(cls, outcome) -> "SubmissionResultSerializer":
        ev = outcome.evaluation
        if ev.passed:
            message = "Congratulations! You passed the quiz!"
        else:
            message = f"You scored {ev.score_percent}%. Keep trying!"

        return cls({
            "attempt_id": outcome.attempt.id,
            "attempt_number": outcome.attempt.attempt_number,
            "score": ev.score_percent,
            "passed": ev.passed,
            "passing_score": ev.passing_score,
            "earned_points": ev.earned_points,
            "total_points": ev.total_points,
            "attempts_remaining": outcome.attempts_remaining,
            "lesson_completed": outcome.lesson_completed,
            "enrollment": outcome.enrollment,
            "per_question_results": [asdict(r) for r in ev.per_question_results],
            "warnings": [w.as_dict() for w in outcome.warnings],
            "message": message,
        })
