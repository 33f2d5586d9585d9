from rest_framework import status
from rest_framework.test import APITestCase

from apps.domains.enrollment.models import Enrollment
from apps.domains.progress.models import LessonProgress
from apps.domains.quizzes.tests.builders import (
    all_correct,
    enroll,
    make_course,
    make_quiz,
    make_user,
)


class FourLessonCourseScenarioTests(APITestCase):
    """레슨 4개 강의: 1번 퀴즈 통과 -> 25%, 4번 퀴즈 통과 -> 100% + COMPLETED"""

    @classmethod
    def setUpTestData(cls):
        cls.user = make_user()
        cls.staff = make_user("staff", is_staff=True)
        cls.course, cls.lessons = make_course(4)
        cls.first_quiz, cls.first_mc, cls.first_tf = make_quiz(cls.lessons[0])
        cls.last_quiz, cls.last_mc, cls.last_tf = make_quiz(cls.lessons[3])
        cls.enrollment = enroll(cls.user, cls.course)

    def _pass(self, quiz, mc, tf):
        self.client.force_authenticate(self.user)
        response = self.client.post(
            f"/api/v1/quizzes/{quiz.id}/submit/",
            {"answers": all_correct(mc, tf)},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        return response.json()

    def _complete(self, user, lesson):
        self.client.force_authenticate(user)
        return self.client.post(
            "/api/v1/progress/complete/",
            {"enrollment_id": self.enrollment.id, "lesson_id": lesson.id},
            format="json",
        )

    def test_course_completion_through_quizzes(self):
        body = self._pass(self.first_quiz, self.first_mc, self.first_tf)
        self.assertEqual(body["enrollment"]["progress_percentage"], 25)

        self.assertEqual(self._complete(self.user, self.lessons[1]).status_code, status.HTTP_200_OK)
        self.assertEqual(self._complete(self.user, self.lessons[2]).status_code, status.HTTP_200_OK)

        body = self._pass(self.last_quiz, self.last_mc, self.last_tf)
        self.assertEqual(body["enrollment"]["progress_percentage"], 100)
        self.assertEqual(body["enrollment"]["status"], Enrollment.Status.COMPLETED)
        self.assertIsNotNone(body["enrollment"]["completed_at"])

        self.enrollment.refresh_from_db()
        self.assertEqual(self.enrollment.status, Enrollment.Status.COMPLETED)
        self.assertIsNotNone(self.enrollment.completed_at)

    def test_learner_cannot_complete_quiz_lesson_manually(self):
        response = self._complete(self.user, self.lessons[0])

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.json()["code"], "quiz_required")
        self.assertFalse(LessonProgress.objects.exists())

    def test_staff_completion_goes_through_cascade(self):
        response = self._complete(self.staff, self.lessons[0])

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        body = response.json()
        self.assertTrue(body["lesson_newly_completed"])
        self.assertEqual(body["enrollment"]["progress_percentage"], 25)
        self.assertEqual(body["completed_lessons"], 1)
        self.assertEqual(body["total_lessons"], 4)

        again = self._complete(self.staff, self.lessons[0]).json()
        self.assertFalse(again["lesson_newly_completed"])
        self.assertEqual(again["lesson_progress"]["completed_at"], body["lesson_progress"]["completed_at"])

    def test_other_learner_cannot_touch_enrollment(self):
        response = self._complete(make_user("intruder"), self.lessons[1])
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_lesson_from_another_course(self):
        _, foreign = make_course(1, slug="foreign")
        response = self._complete(self.staff, foreign[0])
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)


class LessonActivityApiTests(APITestCase):

    @classmethod
    def setUpTestData(cls):
        cls.user = make_user()
        cls.course, cls.lessons = make_course(3)
        cls.enrollment = enroll(cls.user, cls.course)

    def setUp(self):
        self.client.force_authenticate(self.user)

    def test_activity_then_listing(self):
        response = self.client.post(
            "/api/v1/progress/activity/",
            {"enrollment_id": self.enrollment.id, "lesson_id": self.lessons[1].id, "time_spent_seconds": 90},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.json()["enrollment"]["status"], Enrollment.Status.IN_PROGRESS)

        body = self.client.get(f"/api/v1/progress/me/?enrollment_id={self.enrollment.id}").json()
        statuses = [row["status"] for row in body["lessons"]]
        self.assertEqual(statuses, ["NOT_STARTED", "IN_PROGRESS", "NOT_STARTED"])
        self.assertEqual(body["lessons"][1]["time_spent_seconds"], 90)
        self.assertEqual(body["enrollment"]["progress_percentage"], 0)

    def test_listing_requires_own_enrollment(self):
        self.client.force_authenticate(make_user("intruder"))
        response = self.client.get(f"/api/v1/progress/me/?enrollment_id={self.enrollment.id}")
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_negative_time_is_rejected(self):
        response = self.client.post(
            "/api/v1/progress/activity/",
            {"enrollment_id": self.enrollment.id, "lesson_id": self.lessons[0].id, "time_spent_seconds": -1},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(LessonProgress.objects.exists())
