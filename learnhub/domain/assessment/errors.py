"""
Assessment 도메인 에러 분류 (외부 라이브러리 없음)

- NotEnrolled / AttemptsExhausted : 권한 에러로 노출, 재시도 없음
- QuizConfigurationError          : 설정 오류 (문항 0개 등)
- ConcurrencyConflict             : attempt insert 직렬화 실패, 내부 1회 재시도 후 노출
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


class AssessmentError(Exception):
    code = "assessment_error"
    default_message = "Assessment error."

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class NotEnrolled(AssessmentError):
    code = "not_enrolled"
    default_message = "You must be enrolled in this course."


class AttemptsExhausted(AssessmentError):
    code = "attempts_exhausted"
    default_message = "No attempts remaining for this quiz."

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        attempts_allowed: Optional[int] = None,
        attempts_used: int = 0,
        best_score: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.attempts_allowed = attempts_allowed
        self.attempts_used = attempts_used
        self.best_score = best_score

    @property
    def attempts_remaining(self) -> int:
        return 0


class QuizNotFound(AssessmentError):
    code = "quiz_not_found"
    default_message = "Quiz not found."


class QuizConfigurationError(AssessmentError):
    code = "quiz_misconfigured"
    default_message = "This quiz is not configured correctly."


class ConcurrencyConflict(AssessmentError):
    code = "concurrency_conflict"
    default_message = "Another submission was processed at the same time. Please try again."


@dataclass(frozen=True)
class ConfigurationWarning:
    """치명적이지 않은 설정 문제: 응답의 warnings 로 내려간다."""
    code: str
    detail: str

    def as_dict(self) -> dict:
        return {"code": self.code, "detail": self.detail}
