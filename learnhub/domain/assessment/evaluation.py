"""
Attempt Evaluator: 퀴즈 전체 채점 (순수 파이썬)

- total_points = 모든 문항 배점 합 (0 이면 QuizConfigurationError)
- earned_points = 퀴즈 정의 순서대로 grade() 합산
- score_percent = round-half-up(100 * earned / total)
- passed = score_percent >= passing_score (동점은 통과)
- 퀴즈에 없는 question id 로 들어온 답안은 조용히 무시
"""
from __future__ import annotations

from typing import Any, Mapping, Optional

from learnhub.domain.assessment.entities import Evaluation, QuestionResult, QuizSpec
from learnhub.domain.assessment.errors import QuizConfigurationError
from learnhub.domain.assessment.grading import grade, normalize_answer
from learnhub.domain.shared.rounding import percent


def evaluate(quiz: QuizSpec, answers: Optional[Mapping[Any, Any]]) -> Evaluation:
    questions = quiz.ordered_questions()
    if not questions:
        raise QuizConfigurationError(f"quiz {quiz.id} has no questions")

    total_points = sum(int(q.points) for q in questions)
    if total_points <= 0:
        raise QuizConfigurationError(f"quiz {quiz.id} has zero total points")

    answer_map = {str(k): v for k, v in (answers or {}).items()}

    earned_points = 0
    results: list[QuestionResult] = []

    for q in questions:
        submitted = answer_map.get(q.id)
        g = grade(q, submitted)
        earned_points += g.earned_points

        results.append(
            QuestionResult(
                question_id=q.id,
                question_text=q.text,
                question_type=q.question_type.value,
                user_answer=normalize_answer(submitted),
                correct_answer=q.correct_answer,
                is_correct=g.is_correct,
                points=int(q.points),
                earned_points=g.earned_points,
                explanation=q.explanation,
            )
        )

    score = percent(earned_points, total_points)

    return Evaluation(
        score_percent=score,
        passed=score >= int(quiz.passing_score),
        earned_points=earned_points,
        total_points=total_points,
        passing_score=int(quiz.passing_score),
        per_question_results=tuple(results),
    )
