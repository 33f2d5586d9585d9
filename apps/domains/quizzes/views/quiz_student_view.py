# PATH: apps/domains/quizzes/views/quiz_student_view.py
from __future__ import annotations

import logging

from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.core.permissions import is_staff_user
from apps.domains.quizzes.serializers.quiz_attempt import QuizAttemptSerializer
from apps.domains.quizzes.serializers.quiz_student import StudentQuizSerializer
from apps.domains.quizzes.services.attempt_service import QuizAttemptService
from apps.domains.quizzes.views.errors import assessment_error_response
from learnhub.adapters.db.django.repositories_assessment import DjangoAssessmentReadModel
from learnhub.domain.assessment.errors import NotEnrolled, QuizConfigurationError, QuizNotFound

logger = logging.getLogger(__name__)


class LessonQuizView(APIView):
    """
    GET /api/v1/quizzes/lessons/<lesson_id>/

    풀이 화면용 퀴즈 + 내 시도 현황.
    ⚠️ 정답 / 해설은 제출 전 절대 내려가지 않는다.
    """

    permission_classes = [IsAuthenticated]

    def get(self, request, lesson_id: int):
        read_model = DjangoAssessmentReadModel()
        try:
            quiz = read_model.get_quiz_with_questions(lesson_id)
        except QuizConfigurationError as e:
            logger.error("[quiz_view] lesson=%s quiz misconfigured: %s", lesson_id, e.message)
            return assessment_error_response(e)
        if quiz is None:
            return assessment_error_response(QuizNotFound())

        user = request.user

        # -------------------------------------------------
        # 1️⃣ 수강 여부 (staff 는 미리보기 허용)
        # -------------------------------------------------
        if not is_staff_user(user):
            if read_model.find_enrollment(user.id, quiz.course_id) is None:
                return assessment_error_response(NotEnrolled())

        # -------------------------------------------------
        # 2️⃣ 내 시도 현황 (제출 경로와 같은 QuizSpec 기준)
        # -------------------------------------------------
        attempts = list(QuizAttemptService.history_for(quiz_id=quiz.id, user_id=user.id))
        used = len(attempts)
        remaining = None
        if quiz.attempts_allowed is not None:
            remaining = max(quiz.attempts_allowed - used, 0)

        return Response({
            "quiz": StudentQuizSerializer(quiz).data,
            "attempts": QuizAttemptSerializer(attempts, many=True).data,
            "attempts_used": used,
            "attempts_remaining": remaining,
            "best_score": QuizAttemptService.best_score_for(quiz_id=quiz.id, user_id=user.id),
            "passed": QuizAttemptService.has_passed(quiz_id=quiz.id, user_id=user.id),
        })
