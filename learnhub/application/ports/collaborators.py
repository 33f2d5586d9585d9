"""
외부 협력자 포트: 알림 / 수료증 발급 (fire-and-forget)

구현체는 settings 의 dotted path 로 주입된다.
- LEARNHUB_COMPLETION_NOTIFIER
- LEARNHUB_CERTIFICATE_ISSUER
"""
from __future__ import annotations

from typing import Optional, Protocol


class CompletionNotifierPort(Protocol):

    def quiz_attempted(
        self,
        *,
        user_id: int,
        quiz_title: str,
        score: int,
        passing_score: int,
        passed: bool,
    ) -> None:
        ...

    def lesson_completed(self, *, user_id: int, lesson_id: int, lesson_title: str, course_id: int) -> None:
        ...

    def enrollment_completed(self, *, user_id: int, enrollment_id: int, course_id: int, course_title: str) -> None:
        ...


class CertificateIssuerPort(Protocol):

    def issue(self, *, user_id: int, enrollment_id: int, course_id: int) -> Optional[str]:
        """발급된 수료증 식별자 (없으면 None)."""
        ...
