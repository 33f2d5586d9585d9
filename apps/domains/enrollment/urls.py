from rest_framework.routers import SimpleRouter

from .views import EnrollmentViewSet, MyEnrollmentViewSet

router = SimpleRouter()

router.register(
    r"me",
    MyEnrollmentViewSet,
    basename="my-enrollment",
)

router.register(
    r"",
    EnrollmentViewSet,
    basename="enrollment",
)

urlpatterns = router.urls
