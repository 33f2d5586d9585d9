# PATH: apps/domains/quizzes/urls.py

from django.urls import path
from rest_framework.routers import SimpleRouter

# ======================================================
# Student
# ======================================================
from apps.domains.quizzes.views.quiz_student_view import LessonQuizView
from apps.domains.quizzes.views.quiz_submit_view import QuizSubmitView
from apps.domains.quizzes.views.my_quiz_attempts_view import MyQuizAttemptsView

# ======================================================
# Admin / Staff
# ======================================================
from apps.domains.quizzes.views.admin_quiz_attempts_view import AdminQuizAttemptViewSet

router = SimpleRouter()
router.register(r"admin/attempts", AdminQuizAttemptViewSet, basename="admin-quiz-attempt")

urlpatterns = [
    path("lessons/<int:lesson_id>/", LessonQuizView.as_view(), name="lesson-quiz"),
    path("<int:quiz_id>/submit/", QuizSubmitView.as_view(), name="quiz-submit"),
    path("<int:quiz_id>/attempts/me/", MyQuizAttemptsView.as_view(), name="my-quiz-attempts"),
]

urlpatterns += router.urls
