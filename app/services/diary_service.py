"""
일기 서비스 - 일기 생성, 목록/월별 조회, 수정, 소프트 삭제
"""
import logging
import math
from typing import Any, Dict, List, Optional, Tuple

from app.api.schemas import DiaryCreateRequest, DiaryUpdateRequest
from app.core.dates import month_range, parse_iso_datetime
from app.core.exceptions import NotFoundError, ValidationError
from app.models.diary_entry import ENTRY_TYPES, DiaryEntry
from app.repositories.diary_repository import DiaryRepository

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 20
MAX_LIMIT = 100
MIN_YEAR, MAX_YEAR = 2020, 2030

# JSON 컬럼으로 저장하는 중첩 필드
_JSON_FIELDS = ("images", "weather", "location", "reminder")
# null로 지울 수 없는 필드
_NOT_NULL_FIELDS = ("title", "content", "type", "date", "emotion", "images", "tags", "is_private")


def _field_error(field: str, message: str) -> Dict[str, str]:
    return {"field": field, "message": message}


class DiaryService:
    """사용자별 일기 서비스"""

    def __init__(self, diary_repo: DiaryRepository):
        self.diary_repo = diary_repo

    @staticmethod
    def _to_columns(payload, exclude_unset: bool = False) -> Dict[str, Any]:
        """
        요청 모델을 DiaryEntry 컬럼 값으로 변환

        exclude_unset은 최상위 필드에만 적용하고, 중첩 모델은 기본값까지 채워서 저장합니다.
        """
        values = payload.model_dump()
        json_values = payload.model_dump(mode="json", by_alias=True)
        for name in _JSON_FIELDS:
            values[name] = json_values[name]
        if exclude_unset:
            values = {name: value for name, value in values.items() if name in payload.model_fields_set}
        return values

    def create(self, user_id: int, payload: DiaryCreateRequest) -> DiaryEntry:
        """
        일기를 생성합니다.

        Args:
            user_id: 작성자 ID
            payload: 검증된 생성 요청

        Returns:
            저장된 일기
        """
        entry = self.diary_repo.create_entry(user_id, **self._to_columns(payload))
        logger.info(f"일기 생성: entry_id={entry.id}, user_id={user_id}")
        return entry

    def list(
        self,
        user_id: int,
        page: int = 1,
        limit: int = DEFAULT_LIMIT,
        entry_type: Optional[str] = None,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
    ) -> Tuple[List[DiaryEntry], Dict[str, int]]:
        """
        일기 목록을 페이지 단위로 조회합니다.

        삭제된 일기는 필터와 무관하게 항상 제외됩니다.

        Args:
            user_id: 작성자 ID
            page: 페이지 번호 (1 이상)
            limit: 페이지 크기 (1-100)
            entry_type: 'memo' | 'diary'
            start_date: 시작 날짜 ISO 8601 (포함)
            end_date: 종료 날짜 ISO 8601 (포함)

        Returns:
            (일기 목록, {page, limit, total, pages})

        Raises:
            ValidationError: 쿼리 파라미터가 올바르지 않은 경우
        """
        errors = []
        if page < 1:
            errors.append(_field_error("page", "페이지는 1 이상이어야 합니다"))
        if not 1 <= limit <= MAX_LIMIT:
            errors.append(_field_error("limit", "리미트는 1-100 사이여야 합니다"))
        if entry_type is not None and entry_type not in ENTRY_TYPES:
            errors.append(_field_error("type", "타입은 memo 또는 diary여야 합니다"))

        start = end = None
        try:
            start = parse_iso_datetime(start_date) if start_date is not None else None
        except ValueError:
            errors.append(_field_error("startDate", "시작 날짜 형식이 올바르지 않습니다"))
        try:
            end = parse_iso_datetime(end_date) if end_date is not None else None
        except ValueError:
            errors.append(_field_error("endDate", "종료 날짜 형식이 올바르지 않습니다"))

        if errors:
            raise ValidationError("쿼리 파라미터가 올바르지 않습니다", errors)

        entries, total = self.diary_repo.list_entries(
            user_id,
            offset=(page - 1) * limit,
            limit=limit,
            entry_type=entry_type,
            start_date=start,
            end_date=end,
        )
        pagination = {
            "page": page,
            "limit": limit,
            "total": total,
            "pages": math.ceil(total / limit),
        }
        return entries, pagination

    def list_by_month(self, user_id: int, year: int, month: int) -> List[DiaryEntry]:
        """
        특정 달의 일기를 date 내림차순으로 조회합니다.

        Raises:
            ValidationError: 연도가 2020-2030, 월이 1-12 범위를 벗어난 경우
        """
        errors = []
        if not MIN_YEAR <= year <= MAX_YEAR:
            errors.append(_field_error("year", "연도는 2020-2030 사이여야 합니다"))
        if not 1 <= month <= 12:
            errors.append(_field_error("month", "월은 1-12 사이여야 합니다"))
        if errors:
            raise ValidationError("입력값이 올바르지 않습니다", errors)

        start, end = month_range(year, month)
        return self.diary_repo.list_by_date_range(user_id, start, end)

    def get(self, user_id: int, entry_id: int) -> DiaryEntry:
        """
        Raises:
            NotFoundError: 없거나, 삭제되었거나, 다른 사용자의 일기인 경우
        """
        entry = self.diary_repo.get_entry(user_id, entry_id)
        if not entry:
            raise NotFoundError("일기를 찾을 수 없습니다")
        return entry

    def update(self, user_id: int, entry_id: int, payload: DiaryUpdateRequest) -> DiaryEntry:
        """전달된 필드만 수정합니다."""
        entry = self.get(user_id, entry_id)
        for name, value in self._to_columns(payload, exclude_unset=True).items():
            if value is None and name in _NOT_NULL_FIELDS:
                continue
            setattr(entry, name, value)
        return self.diary_repo.save(entry)

    def delete(self, user_id: int, entry_id: int) -> None:
        """일기를 소프트 삭제합니다."""
        entry = self.get(user_id, entry_id)
        self.diary_repo.soft_delete(entry)
        logger.info(f"일기 삭제: entry_id={entry_id}, user_id={user_id}")
