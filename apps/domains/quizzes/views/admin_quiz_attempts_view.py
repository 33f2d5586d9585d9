# PATH: apps/domains/quizzes/views/admin_quiz_attempts_view.py
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework.filters import OrderingFilter
from rest_framework.permissions import IsAuthenticated
from rest_framework.viewsets import ReadOnlyModelViewSet

from apps.core.permissions import IsAdminOrStaff
from apps.domains.quizzes.filters import QuizAttemptFilter
from apps.domains.quizzes.models import QuizAttempt
from apps.domains.quizzes.serializers.quiz_attempt import AdminQuizAttemptSerializer


class AdminQuizAttemptViewSet(ReadOnlyModelViewSet):
    """
    GET /api/v1/quizzes/admin/attempts/?quiz=&user=&passed=

    감사용 조회 전용 (append-only 원장이므로 쓰기 액션 없음)
    """

    queryset = QuizAttempt.objects.all().select_related("quiz", "user", "enrollment")
    serializer_class = AdminQuizAttemptSerializer
    permission_classes = [IsAuthenticated, IsAdminOrStaff]

    filter_backends = [DjangoFilterBackend, OrderingFilter]
    filterset_class = QuizAttemptFilter
    ordering_fields = ["created_at", "score_percentage", "attempt_number"]
