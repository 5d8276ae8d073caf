"""
User 리포지토리 - 사용자 계정 조회 및 저장
"""
from datetime import datetime
from typing import List, Optional

from sqlalchemy import and_, case, desc, func, or_, select
from sqlalchemy.orm import Session

from app.models.user import User


class UserRepository:
    """사용자 데이터 리포지토리"""

    def __init__(self, db: Session):
        self.db = db

    def get_user_by_id(self, user_id: int) -> Optional[User]:
        """
        사용자 ID로 사용자를 조회합니다.

        Args:
            user_id: 사용자 ID

        Returns:
            사용자 또는 None
        """
        return self.db.get(User, user_id)

    def get_user_by_email(self, email: str, active_only: bool = False) -> Optional[User]:
        """
        이메일로 사용자를 조회합니다.

        Args:
            email: 소문자로 정규화된 이메일
            active_only: True면 활성 사용자만

        Returns:
            사용자 또는 None
        """
        stmt = select(User).where(User.email == email)
        if active_only:
            stmt = stmt.where(User.is_active.is_(True))
        return self.db.execute(stmt).scalar_one_or_none()

    def find_by_email_or_username(self, email: str, username: str) -> Optional[User]:
        """이메일 또는 사용자명이 일치하는 첫 번째 사용자"""
        stmt = select(User).where(
            or_(User.email == email, User.username == username)
        ).limit(1)
        return self.db.execute(stmt).scalar_one_or_none()

    def find_by_social_or_email(self, provider: str, social_id: str, email: str) -> Optional[User]:
        """
        소셜 계정(제공자 + 소셜 ID) 또는 이메일로 사용자를 찾습니다.

        소셜 계정이 일치하는 사용자를 이메일 일치보다 우선합니다.
        """
        social_match = and_(User.social_provider == provider, User.social_id == social_id)
        stmt = select(User).where(
            or_(social_match, User.email == email)
        ).order_by(
            case((social_match, 0), else_=1), User.id
        ).limit(1)
        return self.db.execute(stmt).scalar_one_or_none()

    def create_user(self, **fields) -> User:
        """
        새 사용자를 저장합니다.

        Raises:
            sqlalchemy.exc.IntegrityError: 고유 제약 조건 위반 시
        """
        user = User(**fields)
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user

    def save(self, user: User) -> User:
        """변경된 사용자 정보를 커밋합니다."""
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user

    def rollback(self) -> None:
        self.db.rollback()

    def count_users(self) -> int:
        """전체 사용자 수"""
        return self.db.execute(select(func.count()).select_from(User)).scalar_one()

    def list_users(self) -> List[User]:
        """전체 사용자 목록 (최신 가입순)"""
        stmt = select(User).order_by(desc(User.created_at), desc(User.id))
        return list(self.db.execute(stmt).scalars().all())

    def touch_last_login(self, user: User, when: datetime) -> User:
        """마지막 로그인 시간을 갱신합니다."""
        user.last_login = when
        return self.save(user)
