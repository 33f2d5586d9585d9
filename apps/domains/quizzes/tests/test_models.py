from django.core.exceptions import ValidationError
from django.test import TestCase

from apps.domains.quizzes.models import Question, Quiz, QuizAttempt

from .builders import enroll, make_course, make_quiz, make_user


class QuestionValidationTests(TestCase):

    @classmethod
    def setUpTestData(cls):
        _, lessons = make_course(1)
        cls.quiz, _, _ = make_quiz(lessons[0], with_questions=False)

    def test_multiple_choice_with_two_correct_options_is_rejected(self):
        with self.assertRaises(ValidationError):
            Question.objects.create(
                quiz=self.quiz,
                question_type=Question.QuestionType.MULTIPLE_CHOICE,
                text="?",
                options=[
                    {"id": "a", "is_correct": True},
                    {"id": "b", "is_correct": True},
                ],
            )

    def test_multiple_choice_without_correct_option_is_rejected(self):
        with self.assertRaises(ValidationError):
            Question.objects.create(
                quiz=self.quiz,
                question_type=Question.QuestionType.MULTIPLE_CHOICE,
                text="?",
                options=[{"id": "a"}, {"id": "b"}],
            )

    def test_short_answer_requires_correct_answer(self):
        with self.assertRaises(ValidationError):
            Question.objects.create(
                quiz=self.quiz,
                question_type=Question.QuestionType.SHORT_ANSWER,
                text="Capital of France?",
            )
        self.assertFalse(Question.objects.filter(quiz=self.quiz).exists())


    def test_string_correct_flag_is_rejected(self):
        with self.assertRaises(ValidationError):
            Question.objects.create(
                quiz=self.quiz,
                question_type=Question.QuestionType.MULTIPLE_CHOICE,
                text="?",
                options=[
                    {"id": "a", "is_correct": "false"},
                    {"id": "b", "is_correct": False},
                ],
            )
        self.assertFalse(Question.objects.filter(quiz=self.quiz).exists())

    def test_zero_points_is_rejected(self):
        with self.assertRaises(ValidationError):
            Question.objects.create(
                quiz=self.quiz,
                question_type=Question.QuestionType.TRUE_FALSE,
                text="?",
                correct_answer="true",
                points=0,
            )


class QuizValidationTests(TestCase):

    @classmethod
    def setUpTestData(cls):
        _, cls.lessons = make_course(3)

    def test_zero_attempts_allowed_is_rejected(self):
        with self.assertRaises(ValidationError):
            Quiz.objects.create(lesson=self.lessons[0], title="Q", attempts_allowed=0)
        self.assertFalse(Quiz.objects.exists())

    def test_passing_score_above_hundred_is_rejected(self):
        with self.assertRaises(ValidationError):
            Quiz.objects.create(lesson=self.lessons[1], title="Q", passing_score=101)

    def test_unlimited_attempts_is_allowed(self):
        quiz = Quiz.objects.create(lesson=self.lessons[2], title="Q", attempts_allowed=None)
        self.assertIsNone(quiz.attempts_allowed)


class QuizAttemptAppendOnlyTests(TestCase):

    @classmethod
    def setUpTestData(cls):
        user = make_user()
        course, lessons = make_course(1)
        quiz, _, _ = make_quiz(lessons[0])
        cls.attempt = QuizAttempt.objects.create(
            quiz=quiz,
            user=user,
            enrollment=enroll(user, course),
            attempt_number=1,
            answers={},
            score_percentage=0,
        )

    def test_attempt_cannot_be_saved_again(self):
        self.attempt.score_percentage = 100
        with self.assertRaises(TypeError):
            self.attempt.save()

    def test_attempt_cannot_be_deleted(self):
        with self.assertRaises(TypeError):
            self.attempt.delete()

    def test_bulk_update_and_delete_are_blocked(self):
        with self.assertRaises(TypeError):
            QuizAttempt.objects.filter(id=self.attempt.id).update(passed=True)
        with self.assertRaises(TypeError):
            QuizAttempt.objects.all().delete()

        self.attempt.refresh_from_db()
        self.assertFalse(self.attempt.passed)
