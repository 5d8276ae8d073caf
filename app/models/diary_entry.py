"""
DiaryEntry 모델 - 일기/메모 항목
"""
from datetime import datetime
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from sqlalchemy import Boolean, CheckConstraint, DateTime, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base import Base, JSONType, isoformat, utcnow

if TYPE_CHECKING:
    from app.models.user import User


ENTRY_TYPES = ("memo", "diary")
EMOTIONS = ("very-good", "good", "neutral", "bad", "very-bad")
REPEAT_CADENCES = ("none", "daily", "weekly", "monthly")


class DiaryEntry(Base):
    """
    일기 항목 테이블

    Attributes:
        id: 일기 ID (PK)
        user_id: 작성자 ID (FK -> users.id)
        title: 제목 (1-100자)
        content: 내용 (1-10000자)
        type: 'memo' | 'diary'
        emotion: 'very-good' | 'good' | 'neutral' | 'bad' | 'very-bad'
        date: 사용자가 지정한 일기 날짜 (작성 시각과 별개)
        images: 첨부 이미지 목록 (JSON)
        tags: 태그 목록 (JSON)
        weather: 날씨 스냅샷 (JSON)
        location: 위치 (JSON)
        reminder: 알림 설정 (JSON)
        is_private: 비공개 여부
        is_deleted: 소프트 삭제 여부
    """
    __tablename__ = "diary_entries"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False, index=True)
    title: Mapped[str] = mapped_column(String(100), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    type: Mapped[str] = mapped_column(String(10), nullable=False, default="memo")
    emotion: Mapped[str] = mapped_column(String(10), nullable=False, default="neutral")
    date: Mapped[datetime] = mapped_column(DateTime, nullable=False, index=True)
    images: Mapped[List[Dict[str, Any]]] = mapped_column(JSONType, nullable=False, default=list)
    tags: Mapped[List[str]] = mapped_column(JSONType, nullable=False, default=list)
    weather: Mapped[Optional[Dict[str, Any]]] = mapped_column(JSONType, nullable=True)
    location: Mapped[Optional[Dict[str, Any]]] = mapped_column(JSONType, nullable=True)
    reminder: Mapped[Optional[Dict[str, Any]]] = mapped_column(JSONType, nullable=True)
    is_private: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_deleted: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=utcnow, onupdate=utcnow
    )

    user: Mapped["User"] = relationship(back_populates="diaries")

    __table_args__ = (
        Index("ix_diary_entries_user_date", "user_id", "date"),
        Index("ix_diary_entries_user_type", "user_id", "type"),
        Index("ix_diary_entries_user_deleted", "user_id", "is_deleted"),
        CheckConstraint("type IN ('memo', 'diary')", name="check_entry_type"),
        CheckConstraint(
            "emotion IN ('very-good', 'good', 'neutral', 'bad', 'very-bad')",
            name="check_emotion",
        ),
    )

    def __repr__(self) -> str:
        return f"<DiaryEntry(id={self.id}, user_id={self.user_id}, date={self.date})>"

    @property
    def date_only(self) -> str:
        """날짜별 그룹핑용 YYYY-MM-DD"""
        return self.date.date().isoformat()

    def to_dict(self) -> Dict[str, Any]:
        """일기를 응답용 딕셔너리로 변환"""
        return {
            "id": self.id,
            "userId": self.user_id,
            "title": self.title,
            "content": self.content,
            "type": self.type,
            "emotion": self.emotion,
            "date": isoformat(self.date),
            "dateOnly": self.date_only,
            "images": self.images or [],
            "tags": self.tags or [],
            "weather": self.weather,
            "location": self.location,
            "reminder": self.reminder,
            "isPrivate": self.is_private,
            "isDeleted": self.is_deleted,
            "createdAt": isoformat(self.created_at),
            "updatedAt": isoformat(self.updated_at),
        }

    def to_admin_dict(self) -> Dict[str, Any]:
        """관리자 목록용: userId 대신 작성자 요약 정보를 포함"""
        data = self.to_dict()
        if self.user is not None:
            data["userId"] = {
                "id": self.user.id,
                "username": self.user.username,
                "email": self.user.email,
            }
        return data
