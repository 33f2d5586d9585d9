# apps/support/notifications/services.py
"""
학습 완료 알림 / 수료증 발급: 협력자 구현체

- 실제 구현체는 settings 의 dotted path 로 교체한다.
  LEARNHUB_COMPLETION_NOTIFIER, LEARNHUB_CERTIFICATE_ISSUER
- 기본값은 로그만 남기는 구현 (외부 호출 없음)
"""

import logging
import uuid
from typing import Optional

from django.conf import settings
from django.utils.module_loading import import_string

from learnhub.application.ports.collaborators import CertificateIssuerPort, CompletionNotifierPort

logger = logging.getLogger(__name__)

DEFAULT_COMPLETION_NOTIFIER = "apps.support.notifications.services.LoggingCompletionNotifier"
DEFAULT_CERTIFICATE_ISSUER = "apps.support.notifications.services.LoggingCertificateIssuer"


class LoggingCompletionNotifier(CompletionNotifierPort):
    """알림 발송 대신 로그만 출력."""

    def quiz_attempted(
        self,
        *,
        user_id: int,
        quiz_title: str,
        score: int,
        passing_score: int,
        passed: bool,
    ) -> None:
        logger.info(
            "[notify] quiz_attempted user=%s quiz=%r score=%s/%s passed=%s",
            user_id, quiz_title, score, passing_score, passed,
        )

    def lesson_completed(self, *, user_id: int, lesson_id: int, lesson_title: str, course_id: int) -> None:
        logger.info(
            "[notify] lesson_completed user=%s lesson=%s (%r) course=%s",
            user_id, lesson_id, lesson_title, course_id,
        )

    def enrollment_completed(self, *, user_id: int, enrollment_id: int, course_id: int, course_title: str) -> None:
        logger.info(
            "[notify] enrollment_completed user=%s enrollment=%s course=%s (%r)",
            user_id, enrollment_id, course_id, course_title,
        )


class LoggingCertificateIssuer(CertificateIssuerPort):
    """수료증 번호만 만들어 로그로 남긴다 (저장/발송 없음)."""

    def issue(self, *, user_id: int, enrollment_id: int, course_id: int) -> Optional[str]:
        certificate_id = f"CERT-{course_id}-{enrollment_id}-{uuid.uuid4().hex[:8].upper()}"
        logger.info(
            "[certificate] issued %s user=%s enrollment=%s course=%s",
            certificate_id, user_id, enrollment_id, course_id,
        )
        return certificate_id


def get_completion_notifier() -> CompletionNotifierPort:
    path = getattr(settings, "LEARNHUB_COMPLETION_NOTIFIER", None) or DEFAULT_COMPLETION_NOTIFIER
    return import_string(path)()


def get_certificate_issuer() -> CertificateIssuerPort:
    path = getattr(settings, "LEARNHUB_CERTIFICATE_ISSUER", None) or DEFAULT_CERTIFICATE_ISSUER
    return import_string(path)()
