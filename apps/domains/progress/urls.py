# apps/domains/progress/urls.py
from django.urls import path
from rest_framework.routers import SimpleRouter

from .views import (
    LessonActivityView,
    LessonCompleteView,
    LessonProgressViewSet,
    MyProgressView,
)

router = SimpleRouter()
router.register("lesson-progress", LessonProgressViewSet, basename="lesson-progress")

urlpatterns = [
    path("me/", MyProgressView.as_view(), name="my-progress"),
    path("activity/", LessonActivityView.as_view(), name="lesson-activity"),
    path("complete/", LessonCompleteView.as_view(), name="lesson-complete"),
]

urlpatterns += router.urls
