"""
테스트 공용 데이터 빌더 (quizzes / progress 테스트에서 같이 사용)
"""
from django.contrib.auth import get_user_model

from apps.domains.courses.models import Course, Lesson
from apps.domains.enrollment.models import Enrollment
from apps.domains.quizzes.models import Question, Quiz


def make_user(username="learner", *, is_staff=False):
    return get_user_model().objects.create_user(
        username=username,
        password="pass-1234",
        is_staff=is_staff,
    )


def make_course(lesson_count=1, *, slug="course"):
    course = Course.objects.create(title=f"Course {slug}", slug=slug)
    lessons = [
        Lesson.objects.create(course=course, order=i + 1, title=f"Lesson {i + 1}")
        for i in range(lesson_count)
    ]
    return course, lessons


def enroll(user, course, **fields):
    return Enrollment.objects.create(user=user, course=course, **fields)


def make_quiz(lesson, *, passing_score=70, attempts_allowed=2, with_questions=True):
    """
    q1: MULTIPLE_CHOICE 5점 (정답 "a")
    q2: TRUE_FALSE 5점 (정답 "true")
    """
    quiz = Quiz.objects.create(
        lesson=lesson,
        title=f"Quiz for {lesson.title}",
        passing_score=passing_score,
        attempts_allowed=attempts_allowed,
    )
    if not with_questions:
        return quiz, None, None

    mc = Question.objects.create(
        quiz=quiz,
        question_type=Question.QuestionType.MULTIPLE_CHOICE,
        text="Pick the right one",
        points=5,
        order=1,
        options=[
            {"id": "a", "text": "Right", "is_correct": True},
            {"id": "b", "text": "Wrong", "is_correct": False},
        ],
        explanation="Because a.",
    )
    tf = Question.objects.create(
        quiz=quiz,
        question_type=Question.QuestionType.TRUE_FALSE,
        text="Is this true?",
        points=5,
        order=2,
        correct_answer="true",
        explanation="It is.",
    )
    return quiz, mc, tf


def all_correct(mc, tf):
    return {str(mc.id): "a", str(tf.id): "true"}


def half_correct(mc, tf):
    return {str(mc.id): "a", str(tf.id): "false"}
