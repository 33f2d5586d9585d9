# PATH: apps/domains/quizzes/views/errors.py
from __future__ import annotations

from rest_framework import status
from rest_framework.response import Response

from learnhub.domain.assessment.errors import (
    AssessmentError,
    AttemptsExhausted,
    ConcurrencyConflict,
    NotEnrolled,
    QuizConfigurationError,
    QuizNotFound,
)

_STATUS_BY_ERROR = (
    (NotEnrolled, status.HTTP_403_FORBIDDEN),
    (AttemptsExhausted, status.HTTP_403_FORBIDDEN),
    (QuizNotFound, status.HTTP_404_NOT_FOUND),
    (QuizConfigurationError, status.HTTP_409_CONFLICT),
    (ConcurrencyConflict, status.HTTP_503_SERVICE_UNAVAILABLE),
)


def assessment_error_response(exc: AssessmentError) -> Response:
    """도메인 에러 -> {"detail", "code", ...} 응답."""
    http_status = status.HTTP_400_BAD_REQUEST
    for error_cls, mapped in _STATUS_BY_ERROR:
        if isinstance(exc, error_cls):
            http_status = mapped
            break

    body = {"detail": exc.message, "code": exc.code}
    if isinstance(exc, AttemptsExhausted):
        body.update({
            "attempts_allowed": exc.attempts_allowed,
            "attempts_used": exc.attempts_used,
            "attempts_remaining": exc.attempts_remaining,
            "best_score": exc.best_score,
        })

    headers = {"Retry-After": "1"} if isinstance(exc, ConcurrencyConflict) else None
    return Response(body, status=http_status, headers=headers)
