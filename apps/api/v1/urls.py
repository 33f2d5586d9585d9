# apps/api/v1/urls.py
from django.urls import path, include

urlpatterns = [
    # =========================
    # Core
    # =========================
    path("core/", include("apps.core.urls")),

    # =========================
    # Domain APIs
    # =========================
    path("enrollments/", include("apps.domains.enrollment.urls")),
    path("quizzes/", include("apps.domains.quizzes.urls")),
    path("progress/", include("apps.domains.progress.urls")),
]
