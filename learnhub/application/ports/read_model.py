"""
Read model 포트: 엔진이 외부(강의/수강 도메인)에서 읽어오는 것 (Django/ORM 미사용)
"""
from __future__ import annotations

from abc import abstractmethod
from typing import Any, Optional, Protocol

from learnhub.domain.assessment.entities import QuizSpec


class AssessmentReadModel(Protocol):
    """select_for_update/atomic 은 어댑터에서 수행."""

    @abstractmethod
    def find_enrollment(self, learner_id: int, course_id: int, *, for_update: bool = False) -> Optional[Any]:
        """(learner, course) 수강 정보. 없거나 DROPPED 면 None."""
        ...

    @abstractmethod
    def get_quiz_with_questions(self, lesson_id: int) -> Optional[QuizSpec]:
        """lesson 에 달린 퀴즈 + 문항(순서대로). 퀴즈가 없으면 None."""
        ...

    @abstractmethod
    def get_quiz_by_id(self, quiz_id: int) -> Optional[QuizSpec]:
        """quiz id 로 조회. 없으면 None."""
        ...

    @abstractmethod
    def count_lessons(self, course_id: int) -> int:
        """강의(course)의 레슨 수."""
        ...
