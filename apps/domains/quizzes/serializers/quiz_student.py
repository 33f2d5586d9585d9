# PATH: apps/domains/quizzes/serializers/quiz_student.py
from __future__ import annotations

from rest_framework import serializers

from learnhub.domain.assessment.entities import MultipleChoice


class StudentQuestionSerializer(serializers.Serializer):
    """
    ✅ 학생 화면: 풀이용 문항 (QuestionSpec 스냅샷 기준)

    ⚠️ correct_answer / explanation / options.is_correct 는 절대 포함하지 않는다.
    """

    id = serializers.IntegerField()
    question_type = serializers.SerializerMethodField()
    text = serializers.CharField()
    points = serializers.IntegerField()
    order = serializers.IntegerField()
    options = serializers.SerializerMethodField()

    def get_question_type(self, obj) -> str:
        return obj.question_type.value

    def get_options(self, obj):
        if not isinstance(obj.correctness, MultipleChoice):
            return None
        return [{"id": o.id, "text": o.text} for o in obj.correctness.options]


class StudentQuizSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    lesson_id = serializers.IntegerField()
    title = serializers.CharField()
    description = serializers.CharField()
    passing_score = serializers.IntegerField()
    attempts_allowed = serializers.IntegerField(allow_null=True)
    question_count = serializers.SerializerMethodField()
    questions = serializers.SerializerMethodField()

    def get_question_count(self, obj) -> int:
        return len(obj.questions)

    def get_questions(self, obj):
        return StudentQuestionSerializer(obj.ordered_questions(), many=True).data
