# apps/domains/progress/dispatcher.py
from __future__ import annotations

import logging
from typing import Optional

from django.conf import settings
from django.db import transaction

from apps.domains.progress.tasks.completion_events_task import (
    handle_enrollment_completed_task,
    notify_lesson_completed_task,
    notify_quiz_attempted_task,
)

logger = logging.getLogger(__name__)


def _enqueue(task, **kwargs) -> None:
    """
    커밋 이후 호출된다. 실패는 로그만 남기고 삼킨다
    (알림/수료증은 채점/진도 결과를 되돌리지 않는다).
    """
    try:
        if getattr(settings, "LEARNHUB_COMPLETION_EVENTS_ASYNC", True):
            task.delay(**kwargs)
        else:
            task.apply(kwargs=kwargs)
    except Exception:
        logger.exception("[completion_events] dispatch failed task=%s kwargs=%s", task.name, kwargs)


def dispatch_quiz_attempted(*, user_id: int, quiz_title: str, score: int, passing_score: int, passed: bool) -> None:
    kwargs = dict(
        user_id=int(user_id),
        quiz_title=quiz_title,
        score=int(score),
        passing_score=int(passing_score),
        passed=bool(passed),
    )
    transaction.on_commit(lambda: _enqueue(notify_quiz_attempted_task, **kwargs))


def dispatch_completion_events(*, user_id: int, cascade: Optional[object]) -> None:
    """
    ✅ Progress -> 알림/수료증 진입점

    - 최초 전이일 때만 이벤트 발생 (재완료/재제출은 조용히 통과)
    - 실제 발송은 transaction.on_commit 이후 (롤백되면 아무것도 안 나감)
    """
    if cascade is None:
        return

    if cascade.lesson_newly_completed:
        lesson_id = int(cascade.lesson_progress.lesson_id)
        transaction.on_commit(
            lambda: _enqueue(notify_lesson_completed_task, user_id=int(user_id), lesson_id=lesson_id)
        )

    if cascade.enrollment_newly_completed:
        enrollment_id = int(cascade.enrollment.id)
        transaction.on_commit(
            lambda: _enqueue(handle_enrollment_completed_task, enrollment_id=enrollment_id)
        )
