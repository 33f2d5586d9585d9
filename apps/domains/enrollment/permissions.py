from rest_framework.permissions import BasePermission

from apps.domains.enrollment.models import Enrollment


class HasEnrollmentAccess(BasePermission):
    """
    학습자가 요청의 enrollment_id(수강 정보)에 접근 가능한지 검증
    - 본인 enrollment 만
    - DROPPED 는 접근 불가
    """
    message = "You do not have access to this enrollment."

    def has_permission(self, request, view):
        user = request.user

        if not user or not user.is_authenticated:
            return False

        enrollment_id = (
            request.data.get("enrollment_id")
            or request.query_params.get("enrollment_id")
        )
        if not enrollment_id:
            return False

        try:
            enrollment_id = int(enrollment_id)
        except (TypeError, ValueError):
            return False

        if user.is_staff or user.is_superuser:
            return Enrollment.objects.filter(id=enrollment_id).exists()

        return (
            Enrollment.objects.filter(id=enrollment_id, user=user)
            .exclude(status=Enrollment.Status.DROPPED)
            .exists()
        )
