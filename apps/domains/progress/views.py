# apps/domains/progress/views.py
from __future__ import annotations

from django.db import transaction
from django.shortcuts import get_object_or_404
from django_filters.rest_framework import DjangoFilterBackend
from drf_yasg.utils import swagger_auto_schema
from rest_framework import status
from rest_framework.filters import OrderingFilter
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework.viewsets import ReadOnlyModelViewSet

from apps.core.permissions import IsAdminOrStaff, is_staff_user
from apps.domains.courses.models import Lesson
from apps.domains.enrollment.models import Enrollment
from apps.domains.enrollment.permissions import HasEnrollmentAccess
from apps.domains.enrollment.serializers import EnrollmentProgressSerializer

from .dispatcher import dispatch_completion_events
from .filters import LessonProgressFilter
from .models import LessonProgress
from .serializers import (
    CascadeResultSerializer,
    LessonActivitySerializer,
    LessonCompleteSerializer,
    LessonProgressSerializer,
)
from .services.lesson_activity import LessonActivityService
from .services.progression_cascade import ProgressionCascader


def _load_enrollment_and_lesson(enrollment_id: int, lesson_id: int):
    enrollment = get_object_or_404(Enrollment, id=int(enrollment_id))
    lesson = get_object_or_404(Lesson, id=int(lesson_id))
    if lesson.course_id != enrollment.course_id:
        return enrollment, lesson, Response(
            {"detail": "lesson does not belong to this enrollment's course"},
            status=status.HTTP_400_BAD_REQUEST,
        )
    return enrollment, lesson, None


class MyProgressView(APIView):
    """
    GET /api/v1/progress/me/?enrollment_id=

    강의 전체 레슨 목록 기준 (row 가 없는 레슨은 NOT_STARTED 로 채워서 내려줌)
    """

    permission_classes = [IsAuthenticated, HasEnrollmentAccess]

    def get(self, request):
        enrollment = get_object_or_404(
            Enrollment.objects.select_related("course"),
            id=int(request.query_params["enrollment_id"]),
        )

        rows = {
            lp.lesson_id: lp
            for lp in LessonProgress.objects.filter(enrollment=enrollment).select_related("lesson")
        }

        lessons = []
        for lesson in enrollment.course.lessons.all().order_by("order", "id"):
            lp = rows.get(lesson.id)
            if lp is not None:
                lessons.append(LessonProgressSerializer(lp).data)
                continue
            lessons.append({
                "id": None,
                "enrollment": enrollment.id,
                "lesson": lesson.id,
                "lesson_title": lesson.title,
                "lesson_order": lesson.order,
                "status": LessonProgress.Status.NOT_STARTED,
                "started_at": None,
                "completed_at": None,
                "time_spent_seconds": 0,
                "last_position": None,
                "visits": 0,
                "updated_at": None,
            })

        return Response({
            "enrollment": EnrollmentProgressSerializer(enrollment).data,
            "lessons": lessons,
        })


class LessonActivityView(APIView):
    """
    POST /api/v1/progress/activity/
    body: { enrollment_id, lesson_id, time_spent_seconds, last_position }

    열람/학습시간 기록 (완료 처리 아님)
    """

    permission_classes = [IsAuthenticated, HasEnrollmentAccess]

    @swagger_auto_schema(request_body=LessonActivitySerializer, responses={200: LessonProgressSerializer})
    def post(self, request):
        serializer = LessonActivitySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        enrollment, lesson, error = _load_enrollment_and_lesson(data["enrollment_id"], data["lesson_id"])
        if error is not None:
            return error

        lp, enrollment = LessonActivityService.record(
            enrollment=enrollment,
            lesson=lesson,
            time_spent_seconds=data.get("time_spent_seconds", 0),
            last_position=data.get("last_position"),
        )
        return Response({
            "lesson_progress": LessonProgressSerializer(lp).data,
            "enrollment": EnrollmentProgressSerializer(enrollment).data,
        })


class LessonCompleteView(APIView):
    """
    POST /api/v1/progress/complete/
    body: { enrollment_id, lesson_id }

    - staff: 모든 레슨 수동 완료 가능
    - 학습자: 퀴즈 없는 레슨만 (퀴즈 레슨은 통과 제출로만 완료)
    - 멱등: 이미 완료된 레슨이면 변화 없음
    """

    permission_classes = [IsAuthenticated, HasEnrollmentAccess]

    @swagger_auto_schema(request_body=LessonCompleteSerializer, responses={200: CascadeResultSerializer})
    def post(self, request):
        serializer = LessonCompleteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        enrollment, lesson, error = _load_enrollment_and_lesson(data["enrollment_id"], data["lesson_id"])
        if error is not None:
            return error

        if enrollment.status == Enrollment.Status.DROPPED:
            return Response(
                {"detail": "enrollment is dropped", "code": "not_enrolled"},
                status=status.HTTP_403_FORBIDDEN,
            )

        if not is_staff_user(request.user) and hasattr(lesson, "quiz"):
            return Response(
                {"detail": "This lesson is completed by passing its quiz.", "code": "quiz_required"},
                status=status.HTTP_403_FORBIDDEN,
            )

        with transaction.atomic():
            outcome = ProgressionCascader().cascade(enrollment=enrollment, lesson=lesson)
            dispatch_completion_events(user_id=enrollment.user_id, cascade=outcome)

        return Response(CascadeResultSerializer(outcome).data)


class LessonProgressViewSet(ReadOnlyModelViewSet):
    """staff 조회 전용 (쓰기는 서비스 경유만)"""

    queryset = LessonProgress.objects.select_related("lesson", "enrollment").all()
    serializer_class = LessonProgressSerializer
    permission_classes = [IsAuthenticated, IsAdminOrStaff]

    filter_backends = [DjangoFilterBackend, OrderingFilter]
    filterset_class = LessonProgressFilter
    ordering_fields = ["id", "completed_at", "updated_at"]
    ordering = ["-id"]
