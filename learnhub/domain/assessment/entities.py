"""
Assessment 도메인 엔티티: 순수 파이썬 (Django/ORM 미사용)

문항 유형별 정답 데이터는 tagged union 으로 표현한다.
- MultipleChoice(options)     : 보기 목록, is_correct 는 정확히 1개
- TrueFalse(correct_value)    : "true" / "false" 문자열
- ShortAnswer(correct_value)  : 정답 문자열 (trim + lower 비교)

ORM 의 JSONField(options) / correct_answer 컬럼은 어댑터에서 이 타입으로 변환된다.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union


class QuestionType(str, Enum):
    """문항 유형 (apps.domains.quizzes.models.Question.QuestionType choices와 동기화)."""
    MULTIPLE_CHOICE = "MULTIPLE_CHOICE"
    TRUE_FALSE = "TRUE_FALSE"
    SHORT_ANSWER = "SHORT_ANSWER"


class InvalidQuestion(ValueError):
    """문항 정의 자체가 규칙 위반 (예: 정답 보기 0개/2개 이상)."""


@dataclass(frozen=True)
class ChoiceOption:
    id: str
    text: str = ""
    is_correct: bool = False


@dataclass(frozen=True)
class MultipleChoice:
    options: tuple[ChoiceOption, ...]

    def __post_init__(self) -> None:
        correct = [o for o in self.options if o.is_correct]
        if len(correct) != 1:
            raise InvalidQuestion(
                f"multiple choice question needs exactly one correct option (got {len(correct)})"
            )
        ids = [o.id for o in self.options]
        if len(ids) != len(set(ids)):
            raise InvalidQuestion("multiple choice option ids must be unique")

    @property
    def correct_option_id(self) -> str:
        return next(o.id for o in self.options if o.is_correct)


@dataclass(frozen=True)
class TrueFalse:
    correct_value: str


@dataclass(frozen=True)
class ShortAnswer:
    correct_value: str


Correctness = Union[MultipleChoice, TrueFalse, ShortAnswer]


def build_correctness(
    question_type: str,
    *,
    options: Optional[list] = None,
    correct_answer: Optional[str] = None,
) -> Correctness:
    """
    저장소의 느슨한 데이터(options JSON / correct_answer) -> Correctness 변환.
    규칙 위반이면 InvalidQuestion.
    """
    qtype = QuestionType(str(question_type))

    if qtype == QuestionType.MULTIPLE_CHOICE:
        if not isinstance(options, list) or not options:
            raise InvalidQuestion("multiple choice question requires options")
        parsed = []
        for raw in options:
            if not isinstance(raw, dict) or raw.get("id") in (None, ""):
                raise InvalidQuestion("each option requires an id")
            flag = raw.get("is_correct")
            if flag is None:
                flag = False
            if not isinstance(flag, bool):
                # "false" 같은 문자열 플래그는 truthy 라서 정답으로 뒤집힌다
                raise InvalidQuestion(f"option {raw['id']!r} is_correct must be a boolean")
            parsed.append(
                ChoiceOption(
                    id=str(raw["id"]),
                    text=str(raw.get("text") or ""),
                    is_correct=flag,
                )
            )
        return MultipleChoice(options=tuple(parsed))

    if correct_answer is None or str(correct_answer).strip() == "":
        raise InvalidQuestion(f"{qtype.value} question requires a correct answer")

    if qtype == QuestionType.TRUE_FALSE:
        return TrueFalse(correct_value=str(correct_answer))
    return ShortAnswer(correct_value=str(correct_answer))


@dataclass(frozen=True)
class QuestionSpec:
    """채점 가능한 문항 1개."""
    id: str
    points: int
    order: int
    correctness: Correctness
    text: str = ""
    explanation: Optional[str] = None

    @property
    def question_type(self) -> QuestionType:
        if isinstance(self.correctness, MultipleChoice):
            return QuestionType.MULTIPLE_CHOICE
        if isinstance(self.correctness, TrueFalse):
            return QuestionType.TRUE_FALSE
        return QuestionType.SHORT_ANSWER

    @property
    def correct_answer(self) -> str:
        if isinstance(self.correctness, MultipleChoice):
            return self.correctness.correct_option_id
        return self.correctness.correct_value


@dataclass(frozen=True)
class QuizSpec:
    """
    채점 단위 퀴즈 스냅샷.
    attempts_allowed=None 이면 무제한.
    """
    id: int
    lesson_id: int
    course_id: int
    passing_score: int
    attempts_allowed: Optional[int]
    questions: tuple[QuestionSpec, ...] = field(default_factory=tuple)
    title: str = ""
    description: str = ""

    def ordered_questions(self) -> list[QuestionSpec]:
        return sorted(self.questions, key=lambda q: (q.order, q.id))

    @property
    def total_points(self) -> int:
        return sum(int(q.points) for q in self.questions)


@dataclass(frozen=True)
class GradeResult:
    is_correct: bool
    earned_points: int


@dataclass(frozen=True)
class QuestionResult:
    """제출 이후에만 노출되는 문항별 결과 (정답/해설 포함)."""
    question_id: str
    question_text: str
    question_type: str
    user_answer: Optional[str]
    correct_answer: str
    is_correct: bool
    points: int
    earned_points: int
    explanation: Optional[str] = None


@dataclass(frozen=True)
class Evaluation:
    score_percent: int
    passed: bool
    earned_points: int
    total_points: int
    passing_score: int
    per_question_results: tuple[QuestionResult, ...] = field(default_factory=tuple)
