from unittest import mock

from rest_framework import status
from rest_framework.test import APITestCase

from apps.domains.progress.models import LessonProgress
from apps.domains.quizzes.models import Quiz, QuizAttempt
from apps.domains.quizzes.services.attempt_service import QuizAttemptService
from learnhub.domain.assessment.errors import ConcurrencyConflict

from .builders import all_correct, enroll, half_correct, make_course, make_quiz, make_user


class QuizSubmitApiTests(APITestCase):
    """2문항 (MC 5점 / TF 5점), passing 70, attempts 2"""

    @classmethod
    def setUpTestData(cls):
        cls.user = make_user()
        cls.course, cls.lessons = make_course(2)
        cls.quiz, cls.mc, cls.tf = make_quiz(cls.lessons[0], passing_score=70, attempts_allowed=2)
        cls.enrollment = enroll(cls.user, cls.course)

    def setUp(self):
        self.client.force_authenticate(self.user)

    def _submit(self, answers, **extra):
        return self.client.post(
            f"/api/v1/quizzes/{self.quiz.id}/submit/",
            {"answers": answers, "time_spent_seconds": 42, **extra},
            format="json",
        )

    def test_passing_submission(self):
        response = self._submit(all_correct(self.mc, self.tf))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        body = response.json()
        self.assertEqual(body["score"], 100)
        self.assertTrue(body["passed"])
        self.assertEqual(body["attempt_number"], 1)
        self.assertEqual(body["attempts_remaining"], 1)
        self.assertEqual(body["earned_points"], 10)
        self.assertEqual(body["total_points"], 10)
        self.assertEqual(body["passing_score"], 70)
        self.assertTrue(body["lesson_completed"])
        self.assertEqual(body["enrollment"]["progress_percentage"], 50)
        self.assertEqual(body["message"], "Congratulations! You passed the quiz!")
        self.assertEqual(body["warnings"], [])

        self.assertEqual(
            LessonProgress.objects.get(enrollment=self.enrollment, lesson=self.lessons[0]).status,
            LessonProgress.Status.COMPLETED,
        )

    def test_result_reveals_answers_after_submission(self):
        body = self._submit(half_correct(self.mc, self.tf)).json()

        first, second = body["per_question_results"]
        self.assertEqual(first["question_id"], str(self.mc.id))
        self.assertEqual(first["correct_answer"], "a")
        self.assertTrue(first["is_correct"])
        self.assertEqual(first["explanation"], "Because a.")
        self.assertEqual(second["user_answer"], "false")
        self.assertFalse(second["is_correct"])
        self.assertEqual(body["message"], "You scored 50%. Keep trying!")

    def test_second_submission_after_passing_does_not_uncomplete(self):
        self._submit(all_correct(self.mc, self.tf))
        response = self._submit({})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        body = response.json()
        self.assertEqual(body["attempt_number"], 2)
        self.assertFalse(body["passed"])
        self.assertEqual(body["attempts_remaining"], 0)
        self.assertEqual(
            LessonProgress.objects.get(enrollment=self.enrollment, lesson=self.lessons[0]).status,
            LessonProgress.Status.COMPLETED,
        )

    def test_attempts_exhausted(self):
        self.quiz.attempts_allowed = 1
        self.quiz.save()

        self.assertEqual(self._submit({}).status_code, status.HTTP_200_OK)
        response = self._submit(all_correct(self.mc, self.tf))

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        body = response.json()
        self.assertEqual(body["code"], "attempts_exhausted")
        self.assertEqual(body["attempts_remaining"], 0)
        self.assertEqual(body["best_score"], 0)
        self.assertEqual(QuizAttempt.objects.filter(quiz=self.quiz).count(), 1)

    def test_not_enrolled(self):
        self.client.force_authenticate(make_user("outsider"))
        response = self._submit(all_correct(self.mc, self.tf))

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.json()["code"], "not_enrolled")
        self.assertFalse(QuizAttempt.objects.exists())

    def test_malformed_body(self):
        response = self.client.post(
            f"/api/v1/quizzes/{self.quiz.id}/submit/",
            {"answers": "a,true"},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

        response = self._submit({}, time_spent_seconds=-5)
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(QuizAttempt.objects.exists())

    def test_unknown_quiz(self):
        response = self.client.post("/api/v1/quizzes/999999/submit/", {"answers": {}}, format="json")
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.json()["code"], "quiz_not_found")

    def test_misconfigured_quiz(self):
        empty_quiz, _, _ = make_quiz(self.lessons[1], with_questions=False)
        response = self.client.post(f"/api/v1/quizzes/{empty_quiz.id}/submit/", {"answers": {}}, format="json")

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(response.json()["code"], "quiz_misconfigured")

    def test_unresolved_conflict_asks_client_to_retry(self):
        with mock.patch.object(QuizAttemptService, "record_attempt", side_effect=ConcurrencyConflict()):
            response = self._submit(all_correct(self.mc, self.tf))

        self.assertEqual(response.status_code, status.HTTP_503_SERVICE_UNAVAILABLE)
        self.assertEqual(response.json()["code"], "concurrency_conflict")
        self.assertEqual(response["Retry-After"], "1")
        self.assertFalse(QuizAttempt.objects.exists())

    def test_requires_authentication(self):
        self.client.force_authenticate(None)
        response = self._submit({})
        self.assertIn(response.status_code, (status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN))


class SingleAttemptScenarioTests(APITestCase):

    @classmethod
    def setUpTestData(cls):
        cls.user = make_user()
        course, lessons = make_course(1)
        cls.quiz, cls.mc, cls.tf = make_quiz(lessons[0], attempts_allowed=1)
        enroll(cls.user, course)

    def test_only_attempt_is_consumed_even_when_passed(self):
        self.client.force_authenticate(self.user)
        url = f"/api/v1/quizzes/{self.quiz.id}/submit/"

        first = self.client.post(url, {"answers": all_correct(self.mc, self.tf)}, format="json")
        second = self.client.post(url, {"answers": all_correct(self.mc, self.tf)}, format="json")

        self.assertEqual(first.status_code, status.HTTP_200_OK)
        self.assertEqual(first.json()["attempts_remaining"], 0)
        self.assertEqual(second.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(second.json()["attempts_remaining"], 0)
        self.assertEqual(second.json()["best_score"], 100)


class LessonQuizViewTests(APITestCase):

    @classmethod
    def setUpTestData(cls):
        cls.user = make_user()
        cls.course, cls.lessons = make_course(1)
        cls.quiz, cls.mc, cls.tf = make_quiz(cls.lessons[0], attempts_allowed=2)
        cls.enrollment = enroll(cls.user, cls.course)

    def setUp(self):
        self.client.force_authenticate(self.user)
        self.url = f"/api/v1/quizzes/lessons/{self.lessons[0].id}/"

    def test_quiz_view_hides_answer_data(self):
        response = self.client.get(self.url)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        questions = response.json()["quiz"]["questions"]
        self.assertEqual(len(questions), 2)
        for q in questions:
            self.assertNotIn("correct_answer", q)
            self.assertNotIn("explanation", q)
        for option in questions[0]["options"]:
            self.assertEqual(set(option), {"id", "text"})
        self.assertIsNone(questions[1]["options"])

        raw = response.content.decode()
        self.assertNotIn("is_correct", raw)
        self.assertNotIn("Because a.", raw)

    def test_quiz_view_reports_attempt_status(self):
        self.client.post(
            f"/api/v1/quizzes/{self.quiz.id}/submit/",
            {"answers": half_correct(self.mc, self.tf)},
            format="json",
        )
        body = self.client.get(self.url).json()

        self.assertEqual(body["attempts_used"], 1)
        self.assertEqual(body["attempts_remaining"], 1)
        self.assertEqual(body["best_score"], 50)
        self.assertFalse(body["passed"])

    def test_quiz_view_requires_enrollment(self):
        self.client.force_authenticate(make_user("outsider"))
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_staff_can_preview(self):
        self.client.force_authenticate(make_user("instructor", is_staff=True))
        self.assertEqual(self.client.get(self.url).status_code, status.HTTP_200_OK)

    def test_lesson_without_quiz(self):
        _, other_lessons = make_course(1, slug="other")
        response = self.client.get(f"/api/v1/quizzes/lessons/{other_lessons[0].id}/")
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_quiz_view_reports_pass_and_best_score(self):
        submit_url = f"/api/v1/quizzes/{self.quiz.id}/submit/"
        self.client.post(submit_url, {"answers": half_correct(self.mc, self.tf)}, format="json")
        self.client.post(submit_url, {"answers": all_correct(self.mc, self.tf)}, format="json")

        body = self.client.get(self.url).json()

        self.assertEqual(body["attempts_remaining"], 0)
        self.assertEqual(body["best_score"], 100)
        self.assertTrue(body["passed"])

    def test_view_and_submit_agree_when_no_attempts_are_allowed(self):
        # save() 검증을 우회한 레거시 데이터
        Quiz.objects.filter(id=self.quiz.id).update(attempts_allowed=0)

        view = self.client.get(self.url).json()
        response = self.client.post(
            f"/api/v1/quizzes/{self.quiz.id}/submit/",
            {"answers": all_correct(self.mc, self.tf)},
            format="json",
        )

        self.assertEqual(view["attempts_remaining"], 0)
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.json()["code"], "attempts_exhausted")
        self.assertFalse(QuizAttempt.objects.filter(quiz=self.quiz).exists())


class AttemptHistoryApiTests(APITestCase):

    @classmethod
    def setUpTestData(cls):
        cls.user = make_user()
        cls.other = make_user("other")
        course, lessons = make_course(1)
        cls.quiz, cls.mc, cls.tf = make_quiz(lessons[0], attempts_allowed=None)
        enroll(cls.user, course)
        enroll(cls.other, course)

    def _submit_as(self, user, answers):
        self.client.force_authenticate(user)
        self.client.post(f"/api/v1/quizzes/{self.quiz.id}/submit/", {"answers": answers}, format="json")

    def test_history_lists_only_own_attempts_in_order(self):
        self._submit_as(self.user, {})
        self._submit_as(self.other, {})
        self._submit_as(self.user, all_correct(self.mc, self.tf))

        self.client.force_authenticate(self.user)
        body = self.client.get(f"/api/v1/quizzes/{self.quiz.id}/attempts/me/").json()

        self.assertEqual([a["attempt_number"] for a in body], [1, 2])
        self.assertEqual([a["score_percentage"] for a in body], [0, 100])

    def test_admin_attempt_list_is_staff_only(self):
        self._submit_as(self.user, {})

        self.client.force_authenticate(self.user)
        self.assertEqual(self.client.get("/api/v1/quizzes/admin/attempts/").status_code, status.HTTP_403_FORBIDDEN)

        self.client.force_authenticate(make_user("staff", is_staff=True))
        response = self.client.get(f"/api/v1/quizzes/admin/attempts/?quiz={self.quiz.id}&passed=false")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.json()["count"], 1)

    def test_admin_attempts_are_read_only(self):
        self._submit_as(self.user, {})
        attempt = QuizAttempt.objects.get()

        self.client.force_authenticate(make_user("staff", is_staff=True))
        response = self.client.delete(f"/api/v1/quizzes/admin/attempts/{attempt.id}/")

        self.assertEqual(response.status_code, status.HTTP_405_METHOD_NOT_ALLOWED)
        self.assertTrue(QuizAttempt.objects.filter(id=attempt.id).exists())
