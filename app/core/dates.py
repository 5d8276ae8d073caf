"""
날짜 파싱 및 기간 계산 유틸리티
"""
import calendar
from datetime import datetime, time, timezone
from typing import Any, Tuple


def parse_iso_datetime(value: Any) -> datetime:
    """
    ISO 8601 문자열을 naive UTC datetime으로 변환합니다.

    - 오프셋이 있는 값은 UTC로 변환 후 tzinfo를 제거합니다.
    - 날짜만 있는 값(YYYY-MM-DD)은 자정으로 해석합니다.

    Raises:
        ValueError: ISO 8601 형식이 아닌 경우
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str) and value.strip():
        parsed = datetime.fromisoformat(value.strip())
    else:
        raise ValueError("유효한 날짜 형식이어야 합니다")

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def month_range(year: int, month: int) -> Tuple[datetime, datetime]:
    """해당 월의 첫 순간과 마지막 날의 마지막 순간 (양 끝 포함)"""
    last_day = calendar.monthrange(year, month)[1]
    start = datetime(year, month, 1)
    end = datetime.combine(datetime(year, month, last_day).date(), time.max)
    return start, end


def local_midnight_utc() -> datetime:
    """서버 로컬 시간 기준 오늘 자정을 naive UTC로 반환"""
    local_now = datetime.now().astimezone()
    midnight = local_now.replace(hour=0, minute=0, second=0, microsecond=0)
    return midnight.astimezone(timezone.utc).replace(tzinfo=None)
