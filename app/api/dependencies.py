"""
FastAPI 의존성 - 인증 및 서비스 주입
"""
from typing import Optional

from fastapi import Depends, Header
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.config.database import get_db
from app.config.settings import Settings, get_settings
from app.models.user import User
from app.repositories import DiaryRepository, UserRepository
from app.services import AdminService, AuthService, DiaryService, UploadService, UserService


# HTTP Bearer 토큰 스키마 (토큰이 없을 때의 응답은 AuthService가 결정)
security = HTTPBearer(auto_error=False)


def get_user_repository(db: Session = Depends(get_db)) -> UserRepository:
    """UserRepository 의존성"""
    return UserRepository(db)


def get_diary_repository(db: Session = Depends(get_db)) -> DiaryRepository:
    """DiaryRepository 의존성"""
    return DiaryRepository(db)


def get_auth_service(
    user_repo: UserRepository = Depends(get_user_repository),
    settings: Settings = Depends(get_settings),
) -> AuthService:
    return AuthService(user_repo, settings)


def get_user_service(
    user_repo: UserRepository = Depends(get_user_repository),
    settings: Settings = Depends(get_settings),
) -> UserService:
    return UserService(user_repo, settings)


def get_diary_service(diary_repo: DiaryRepository = Depends(get_diary_repository)) -> DiaryService:
    return DiaryService(diary_repo)


def get_upload_service(settings: Settings = Depends(get_settings)) -> UploadService:
    return UploadService(settings)


def get_admin_service(
    user_repo: UserRepository = Depends(get_user_repository),
    diary_repo: DiaryRepository = Depends(get_diary_repository),
    settings: Settings = Depends(get_settings),
) -> AdminService:
    return AdminService(user_repo, diary_repo, settings)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    auth: AuthService = Depends(get_auth_service),
) -> User:
    """
    현재 인증된 사용자를 가져옵니다.

    Args:
        credentials: HTTP Authorization 헤더의 Bearer 토큰
        auth: 인증 서비스

    Returns:
        인증된 사용자

    Raises:
        AuthError: 토큰이 없거나 유효하지 않은 경우 (401)
    """
    token = credentials.credentials if credentials else None
    return auth.verify_token(token)


async def require_admin(
    admin_key: Optional[str] = Header(None, alias="Admin-Key"),
    admin: AdminService = Depends(get_admin_service),
) -> AdminService:
    """
    Admin-Key 헤더를 검증하고 관리자 서비스를 반환합니다.

    Raises:
        ForbiddenError: 키가 일치하지 않는 경우 (403)
    """
    admin.check_key(admin_key)
    return admin
