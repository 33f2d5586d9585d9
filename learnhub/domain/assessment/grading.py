"""
Question Grader: 순수 함수 (Django/ORM 미사용)

규칙:
- MULTIPLE_CHOICE : 제출값 == 정답 보기 id. 모르는 id / 미제출은 오답 (에러 아님)
- TRUE_FALSE      : 문자열 표현 기준 정확 일치 (대소문자 구분)
- SHORT_ANSWER    : 양쪽 모두 strip + lower 후 일치. 부분점수/유사도 없음
- 미제출은 어떤 유형이든 오답, 0점. 절대 예외를 던지지 않는다.
"""
from __future__ import annotations

from typing import Any, Optional

from learnhub.domain.assessment.entities import (
    GradeResult,
    MultipleChoice,
    QuestionSpec,
    ShortAnswer,
    TrueFalse,
)


def normalize_answer(value: Any) -> Optional[str]:
    """
    제출값 -> 비교용 문자열.
    - None / "" -> None (미제출)
    - bool -> "true" / "false"
    - 숫자 -> str
    - 그 외 (list, dict ...) -> None (형식 오류는 미제출 취급)
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str):
        return value if value != "" else None
    return None


def _short_answer_key(value: str) -> str:
    return value.strip().lower()


def grade(question: QuestionSpec, submitted_answer: Any) -> GradeResult:
    answer = normalize_answer(submitted_answer)
    if answer is None:
        return GradeResult(is_correct=False, earned_points=0)

    correctness = question.correctness

    if isinstance(correctness, MultipleChoice):
        is_correct = answer == correctness.correct_option_id
    elif isinstance(correctness, TrueFalse):
        is_correct = answer == correctness.correct_value
    elif isinstance(correctness, ShortAnswer):
        expected = _short_answer_key(correctness.correct_value)
        is_correct = expected != "" and _short_answer_key(answer) == expected
    else:
        raise TypeError(f"unsupported correctness variant: {type(correctness).__name__}")

    return GradeResult(
        is_correct=is_correct,
        earned_points=int(question.points) if is_correct else 0,
    )
