"""
Diary 리포지토리 - 일기 항목 CRUD

소프트 삭제 규칙: 이름이 `including_deleted`로 끝나지 않는 모든 조회 메서드는
is_deleted = True인 항목을 명시적으로 제외합니다.
"""
from datetime import datetime
from typing import List, Optional, Tuple

from sqlalchemy import Select, desc, func, select
from sqlalchemy.orm import Session, joinedload

from app.models.diary_entry import DiaryEntry


class DiaryRepository:
    """일기 데이터 리포지토리"""

    def __init__(self, db: Session):
        self.db = db

    @staticmethod
    def _not_deleted(stmt: Select) -> Select:
        return stmt.where(DiaryEntry.is_deleted.is_(False))

    def _user_filter(
        self,
        stmt: Select,
        user_id: int,
        entry_type: Optional[str] = None,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
    ) -> Select:
        stmt = self._not_deleted(stmt.where(DiaryEntry.user_id == user_id))
        if entry_type:
            stmt = stmt.where(DiaryEntry.type == entry_type)
        if start_date is not None:
            stmt = stmt.where(DiaryEntry.date >= start_date)
        if end_date is not None:
            stmt = stmt.where(DiaryEntry.date <= end_date)
        return stmt

    def create_entry(self, user_id: int, **fields) -> DiaryEntry:
        """
        새 일기 항목을 저장합니다.

        Args:
            user_id: 작성자 ID
            **fields: DiaryEntry 컬럼 값

        Returns:
            저장된 일기
        """
        entry = DiaryEntry(user_id=user_id, **fields)
        self.db.add(entry)
        self.db.commit()
        self.db.refresh(entry)
        return entry

    def get_entry(self, user_id: int, entry_id: int) -> Optional[DiaryEntry]:
        """
        사용자의 일기를 ID로 조회합니다 (삭제된 항목 제외).

        Args:
            user_id: 작성자 ID
            entry_id: 일기 ID

        Returns:
            일기 또는 None
        """
        stmt = self._not_deleted(
            select(DiaryEntry).where(
                DiaryEntry.id == entry_id,
                DiaryEntry.user_id == user_id,
            )
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def list_entries(
        self,
        user_id: int,
        offset: int,
        limit: int,
        entry_type: Optional[str] = None,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
    ) -> Tuple[List[DiaryEntry], int]:
        """
        필터 조건에 맞는 일기 한 페이지와 전체 개수를 조회합니다 (삭제된 항목 제외).

        날짜 범위는 양 끝을 포함하며, 결과는 date 내림차순입니다.

        Returns:
            (일기 목록, 전체 개수)
        """
        stmt = self._user_filter(select(DiaryEntry), user_id, entry_type, start_date, end_date)
        stmt = stmt.order_by(desc(DiaryEntry.date), desc(DiaryEntry.id)).offset(offset).limit(limit)
        entries = list(self.db.execute(stmt).scalars().all())

        count_stmt = self._user_filter(
            select(func.count()).select_from(DiaryEntry), user_id, entry_type, start_date, end_date
        )
        total = self.db.execute(count_stmt).scalar_one()
        return entries, total

    def list_by_date_range(
        self,
        user_id: int,
        start_date: datetime,
        end_date: datetime,
    ) -> List[DiaryEntry]:
        """
        기간 내 일기 전체를 date 내림차순으로 조회합니다 (양 끝 포함, 삭제된 항목 제외).
        """
        stmt = self._user_filter(select(DiaryEntry), user_id, None, start_date, end_date)
        stmt = stmt.order_by(desc(DiaryEntry.date), desc(DiaryEntry.id))
        return list(self.db.execute(stmt).scalars().all())

    def save(self, entry: DiaryEntry) -> DiaryEntry:
        """변경된 일기를 커밋합니다."""
        self.db.add(entry)
        self.db.commit()
        self.db.refresh(entry)
        return entry

    def soft_delete(self, entry: DiaryEntry) -> DiaryEntry:
        """일기를 삭제 상태로 표시합니다. 행은 물리적으로 지우지 않습니다."""
        entry.is_deleted = True
        return self.save(entry)

    # ---- 관리자용: 삭제된 항목까지 포함하는 원본 테이블 조회 ----

    def count_entries_including_deleted(self, created_since: Optional[datetime] = None) -> int:
        """전체 일기 수 (created_since가 있으면 그 이후 작성분만)"""
        stmt = select(func.count()).select_from(DiaryEntry)
        if created_since is not None:
            stmt = stmt.where(DiaryEntry.created_at >= created_since)
        return self.db.execute(stmt).scalar_one()

    def list_recent_including_deleted(self, limit: int = 100) -> List[DiaryEntry]:
        """최근 작성된 일기 목록 (작성자 정보 포함, 최신순)"""
        stmt = (
            select(DiaryEntry)
            .options(joinedload(DiaryEntry.user))
            .order_by(desc(DiaryEntry.created_at), desc(DiaryEntry.id))
            .limit(limit)
        )
        return list(self.db.execute(stmt).scalars().all())
