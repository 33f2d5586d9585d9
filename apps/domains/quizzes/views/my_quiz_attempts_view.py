# PATH: apps/domains/quizzes/views/my_quiz_attempts_view.py
from __future__ import annotations

from django.shortcuts import get_object_or_404
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.domains.quizzes.models import Quiz
from apps.domains.quizzes.serializers.quiz_attempt import QuizAttemptSerializer
from apps.domains.quizzes.services.attempt_service import QuizAttemptService


class MyQuizAttemptsView(APIView):
    """
    GET /api/v1/quizzes/<quiz_id>/attempts/me/

    - attempt_number ASC
    - 본인 기록만
    """

    permission_classes = [IsAuthenticated]

    def get(self, request, quiz_id: int):
        quiz = get_object_or_404(Quiz, id=int(quiz_id))
        qs = QuizAttemptService.history_for(quiz_id=quiz.id, user_id=request.user.id)
        return Response(QuizAttemptSerializer(qs, many=True).data)
