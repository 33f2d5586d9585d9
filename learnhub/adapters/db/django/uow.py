"""
Django Unit of Work: transaction.atomic 래퍼 (lazy import)
"""
from __future__ import annotations

from learnhub.application.ports.read_model import AssessmentReadModel


class DjangoUnitOfWork:
    """
    제출 1건 = 트랜잭션 1개.
    gate -> evaluate -> attempt insert -> cascade 가 모두 이 경계 안에서 수행된다.
    """

    def __init__(self) -> None:
        self._atomic = None
        self._read_model = None

    @property
    def read_model(self) -> AssessmentReadModel:
        from learnhub.adapters.db.django.repositories_assessment import DjangoAssessmentReadModel
        if self._read_model is None:
            self._read_model = DjangoAssessmentReadModel()
        return self._read_model

    def __enter__(self) -> DjangoUnitOfWork:
        from django.db import transaction
        self._atomic = transaction.atomic()
        self._atomic.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if self._atomic is not None:
            self._atomic.__exit__(exc_type, exc_val, exc_tb)
            self._atomic = None
