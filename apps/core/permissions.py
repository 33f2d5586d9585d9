# apps/core/permissions.py

from rest_framework.permissions import BasePermission


def is_staff_user(user) -> bool:
    return bool(
        user
        and user.is_authenticated
        and (user.is_superuser or user.is_staff)
    )


class IsAdminOrStaff(BasePermission):
    """
    관리자 / 운영자 전용 Permission
    """
    def has_permission(self, request, view):
        return is_staff_user(request.user)


class IsLearner(BasePermission):
    """
    학습자 전용 Permission
    - 로그인 필수
    - staff/superuser 가 아니면 학습자로 취급
    """
    message = "Learner account required."

    def has_permission(self, request, view):
        user = request.user
        return bool(
            user
            and user.is_authenticated
            and not is_staff_user(user)
        )
