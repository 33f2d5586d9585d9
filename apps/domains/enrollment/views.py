from django_filters.rest_framework import DjangoFilterBackend
from rest_framework.filters import OrderingFilter, SearchFilter
from rest_framework.permissions import IsAuthenticated
from rest_framework.viewsets import ReadOnlyModelViewSet

from apps.core.permissions import IsAdminOrStaff

from .filters import EnrollmentFilter
from .models import Enrollment
from .serializers import EnrollmentSerializer


class EnrollmentViewSet(ReadOnlyModelViewSet):
    """
    수강 등록 조회 (staff 전용)

    ❌ 생성/수정 없음:
    - 등록 CRUD 는 외부 협력자 영역
    - 진도 필드는 ProgressionCascader 만 쓴다
    """

    queryset = Enrollment.objects.all().select_related("user", "course")
    serializer_class = EnrollmentSerializer
    permission_classes = [IsAuthenticated, IsAdminOrStaff]

    filter_backends = [DjangoFilterBackend, SearchFilter, OrderingFilter]
    filterset_class = EnrollmentFilter
    search_fields = ["user__username", "user__name", "course__title"]
    ordering_fields = ["progress_percentage", "enrolled_at", "completed_at"]


class MyEnrollmentViewSet(ReadOnlyModelViewSet):
    """
    GET /api/v1/enrollments/me/
    학습자 본인 수강 목록 + 진도
    """

    serializer_class = EnrollmentSerializer
    permission_classes = [IsAuthenticated]

    def get_queryset(self):
        return (
            Enrollment.objects.filter(user=self.request.user)
            .exclude(status=Enrollment.Status.DROPPED)
            .select_related("course")
        )
