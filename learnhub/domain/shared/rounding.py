"""
도메인 공통: 퍼센트 반올림 (외부 라이브러리 없음)

점수/진도율은 모두 round-half-up 으로 통일한다.
(Python 내장 round()는 banker's rounding 이라 12.5 -> 12 가 되므로 사용 금지)
"""
from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP


def percent(part: int, whole: int) -> int:
    """round(100 * part / whole), .5 는 항상 올림. whole <= 0 이면 ValueError."""
    if whole <= 0:
        raise ValueError(f"whole must be positive (got {whole})")
    value = Decimal(100) * Decimal(int(part)) / Decimal(int(whole))
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))
