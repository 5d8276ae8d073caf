"""
사용자 서비스 - 프로필, 설정, 일기 비밀번호
"""
import logging
from typing import Optional

from app.config.settings import Settings, get_settings
from app.core.exceptions import NotFoundError
from app.core.security import hash_password, verify_password
from app.models.user import User
from app.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)

NOTIFICATION_KEYS = ("enabled", "reminders", "email")


class UserService:
    """사용자 프로필 및 설정 관리"""

    def __init__(self, user_repo: UserRepository, settings: Optional[Settings] = None):
        self.user_repo = user_repo
        self.settings = settings or get_settings()

    def get_profile(self, user_id: int) -> User:
        user = self.user_repo.get_user_by_id(user_id)
        if not user:
            raise NotFoundError("사용자를 찾을 수 없습니다")
        return user

    def update_settings(
        self,
        user_id: int,
        theme: Optional[str] = None,
        notifications: Optional[dict] = None,
        require_password: Optional[bool] = None,
    ) -> User:
        """
        전달된 설정 항목만 반영합니다.

        일기 비밀번호 해시는 이 경로로 변경할 수 없습니다.

        Args:
            user_id: 사용자 ID
            theme: 테마
            notifications: {"enabled", "reminders", "email"} 중 변경할 항목
            require_password: 일기 열람 시 비밀번호 요구 여부
        """
        user = self.get_profile(user_id)

        if theme is not None:
            user.theme = theme
        for key, value in (notifications or {}).items():
            if key in NOTIFICATION_KEYS and value is not None:
                setattr(user, f"notify_{key}", value)
        if require_password is not None:
            user.require_password = require_password

        return self.user_repo.save(user)

    def set_diary_password(self, user_id: int, password: str) -> User:
        """일기 비밀번호를 설정하고 비밀번호 요구를 켭니다."""
        user = self.get_profile(user_id)
        user.diary_password = hash_password(password, rounds=self.settings.BCRYPT_ROUNDS)
        user.require_password = True
        logger.info(f"일기 비밀번호 설정: user_id={user_id}")
        return self.user_repo.save(user)

    def verify_diary_password(self, user_id: int, password: str) -> bool:
        """일기 비밀번호 확인 (설정되지 않았으면 False)"""
        user = self.get_profile(user_id)
        return verify_password(password, user.diary_password)
