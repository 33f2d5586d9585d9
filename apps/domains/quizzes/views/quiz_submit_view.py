# PATH: apps/domains/quizzes/views/quiz_submit_view.py
from __future__ import annotations

import logging

from drf_yasg.utils import swagger_auto_schema
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.domains.quizzes.serializers.submission import (
    QuizSubmissionSerializer,
    SubmissionResultSerializer,
)
from apps.domains.quizzes.services.submission_service import QuizSubmissionService
from apps.domains.quizzes.views.errors import assessment_error_response
from learnhub.domain.assessment.errors import AssessmentError, QuizConfigurationError

logger = logging.getLogger(__name__)


class QuizSubmitView(APIView):
    """
    POST /api/v1/quizzes/<quiz_id>/submit/

    body: { "answers": {"<question_id>": <answer>}, "time_spent_seconds": 95 }

    ✅ 한 번의 요청 = 한 트랜잭션
    - 수강/시도 횟수 검사 -> 채점 -> attempt 기록 -> (통과 시) 레슨 완료 / 진도 반영
    - 실패 시 아무것도 기록되지 않는다 (attempt 소비 없음)
    """

    permission_classes = [IsAuthenticated]

    @swagger_auto_schema(
        request_body=QuizSubmissionSerializer,
        responses={200: SubmissionResultSerializer},
    )
    def post(self, request, quiz_id: int):
        serializer = QuizSubmissionSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            outcome = QuizSubmissionService().submit(
                user_id=request.user.id,
                quiz_id=int(quiz_id),
                answers=serializer.validated_data["answers"],
                time_spent_seconds=serializer.validated_data.get("time_spent_seconds", 0),
            )
        except QuizConfigurationError as e:
            logger.error("[quiz_submit] quiz=%s misconfigured: %s", quiz_id, e.message)
            return assessment_error_response(e)
        except AssessmentError as e:
            return assessment_error_response(e)

        return Response(SubmissionResultSerializer.from_outcome(outcome).data)
