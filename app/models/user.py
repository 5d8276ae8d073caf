"""
User 모델 - 사용자 계정, 자격 증명, 개인 설정
"""
from datetime import datetime
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from sqlalchemy import Boolean, CheckConstraint, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base import Base, isoformat, utcnow

if TYPE_CHECKING:
    from app.models.diary_entry import DiaryEntry


SOCIAL_PROVIDERS = ("google", "kakao")
THEMES = ("blue", "green", "purple", "orange", "teal")


class User(Base):
    """
    사용자 테이블

    Attributes:
        id: 사용자 ID (PK)
        username: 사용자명 (3-20자, 고유)
        email: 이메일 (소문자, 고유)
        password: bcrypt 해시 (소셜 전용 계정은 NULL)
        avatar: 프로필 이미지 경로
        social_provider: 소셜 로그인 제공자 ('google' | 'kakao' | NULL)
        social_id: 제공자가 발급한 사용자 ID
        theme, notify_*: 개인 설정
        diary_password: 일기 잠금 비밀번호 해시
        require_password: 일기 열람 시 비밀번호 요구 여부
        is_active: 활성 여부
        last_login: 마지막 로그인 시간
    """
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(20), nullable=False, unique=True, index=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    password: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    avatar: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    social_provider: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    social_id: Mapped[Optional[str]] = mapped_column(String(255), nullable=True, index=True)

    # 설정
    theme: Mapped[str] = mapped_column(String(20), nullable=False, default="blue")
    notify_enabled: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    notify_reminders: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    notify_email: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    diary_password: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    require_password: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    last_login: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=utcnow, onupdate=utcnow
    )

    diaries: Mapped[List["DiaryEntry"]] = relationship(back_populates="user")

    __table_args__ = (
        CheckConstraint(
            "social_provider IS NULL OR social_provider IN ('google', 'kakao')",
            name="check_social_provider",
        ),
        CheckConstraint(
            "theme IN ('blue', 'green', 'purple', 'orange', 'teal')",
            name="check_theme",
        ),
        CheckConstraint(
            "password IS NOT NULL OR social_provider IS NOT NULL",
            name="check_credential_present",
        ),
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username={self.username})>"

    def settings_dict(self) -> Dict[str, Any]:
        """설정을 중첩 딕셔너리로 변환 (일기 비밀번호 해시는 제외)"""
        return {
            "theme": self.theme,
            "notifications": {
                "enabled": self.notify_enabled,
                "reminders": self.notify_reminders,
                "email": self.notify_email,
            },
            "privacy": {
                "requirePassword": self.require_password,
            },
        }

    def to_dict(self) -> Dict[str, Any]:
        """사용자를 응답용 딕셔너리로 변환 (자격 증명 제외)"""
        return {
            "id": self.id,
            "username": self.username,
            "email": self.email,
            "avatar": self.avatar,
            "socialProvider": self.social_provider,
            "socialId": self.social_id,
            "settings": self.settings_dict(),
            "isActive": self.is_active,
            "lastLogin": isoformat(self.last_login),
            "createdAt": isoformat(self.created_at),
            "updatedAt": isoformat(self.updated_at),
        }
