"""
인증 서비스 - 회원가입, 로그인, 소셜 로그인, 토큰 검증
"""
import logging
from typing import Optional, Tuple

from sqlalchemy.exc import IntegrityError

from app.config.settings import Settings, get_settings
from app.core.exceptions import AuthError, ConflictError
from app.core.security import (
    TokenError,
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)
from app.models.base import utcnow
from app.models.user import User
from app.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "이메일 또는 비밀번호가 올바르지 않습니다"
DUPLICATE_ACCOUNT = "이미 존재하는 이메일 또는 사용자명입니다"


class AuthService:
    """회원 인증 서비스"""

    def __init__(self, user_repo: UserRepository, settings: Optional[Settings] = None):
        self.user_repo = user_repo
        self.settings = settings or get_settings()

    def issue_token(self, user: User) -> str:
        """사용자 ID를 담은 액세스 토큰을 발급합니다."""
        return create_access_token(
            user.id,
            self.settings.get_jwt_secret(),
            algorithm=self.settings.JWT_ALGORITHM,
            expires_days=self.settings.JWT_EXPIRE_DAYS,
        )

    def register(self, username: str, email: str, password: str) -> Tuple[User, str]:
        """
        새 계정을 생성합니다.

        Args:
            username: 사용자명 (검증 완료)
            email: 소문자 이메일 (검증 완료)
            password: 평문 비밀번호

        Returns:
            (생성된 사용자, 토큰)

        Raises:
            ConflictError: 이메일 또는 사용자명이 이미 존재하는 경우
        """
        if self.user_repo.find_by_email_or_username(email, username):
            raise ConflictError(DUPLICATE_ACCOUNT)

        try:
            user = self.user_repo.create_user(
                username=username,
                email=email,
                password=hash_password(password, rounds=self.settings.BCRYPT_ROUNDS),
            )
        except IntegrityError:
            # 중복 확인 이후 동시에 가입된 경우
            self.user_repo.rollback()
            raise ConflictError(DUPLICATE_ACCOUNT)

        logger.info(f"회원가입 완료: user_id={user.id}")
        return user, self.issue_token(user)

    def login(self, email: str, password: str) -> Tuple[User, str]:
        """
        이메일/비밀번호로 로그인합니다.

        사용자가 없을 때와 비밀번호가 틀릴 때 같은 에러를 반환합니다.

        Raises:
            AuthError: 자격 증명이 올바르지 않은 경우
        """
        user = self.user_repo.get_user_by_email(email, active_only=True)
        if not user or not verify_password(password, user.password):
            logger.info("로그인 실패: 자격 증명 불일치")
            raise AuthError(INVALID_CREDENTIALS)

        user = self.user_repo.touch_last_login(user, utcnow())
        return user, self.issue_token(user)

    def social_login(
        self,
        provider: str,
        social_id: str,
        email: str,
        username: str,
        avatar: Optional[str] = None,
    ) -> Tuple[User, str]:
        """
        소셜 계정으로 로그인하거나 가입합니다.

        (제공자, 소셜 ID) 또는 이메일이 일치하는 기존 계정이 있으면 그 계정으로
        로그인하며, 소셜 정보가 없는 계정이면 소셜 정보를 연결합니다.
        없으면 비밀번호 없는 새 계정을 생성합니다.

        Raises:
            ConflictError: 새 계정의 사용자명이 이미 사용 중인 경우
        """
        now = utcnow()
        user = self.user_repo.find_by_social_or_email(provider, social_id, email)

        if user:
            user.last_login = now
            if not user.social_provider:
                # NOTE: 이메일만 같은 기존 계정에도 연결된다 (DESIGN.md 참고)
                user.social_provider = provider
                user.social_id = social_id
                logger.info(f"소셜 계정 연결: user_id={user.id}, provider={provider}")
            if avatar:
                user.avatar = avatar
            user = self.user_repo.save(user)
        else:
            try:
                user = self.user_repo.create_user(
                    username=username,
                    email=email,
                    social_provider=provider,
                    social_id=social_id,
                    avatar=avatar,
                    last_login=now,
                )
            except IntegrityError:
                self.user_repo.rollback()
                raise ConflictError(DUPLICATE_ACCOUNT)
            logger.info(f"소셜 회원가입 완료: user_id={user.id}, provider={provider}")

        return user, self.issue_token(user)

    def verify_token(self, token: Optional[str]) -> User:
        """
        액세스 토큰을 검증하고 해당 사용자를 반환합니다.

        Raises:
            AuthError: 토큰이 없거나, 형식/서명/만료 검증에 실패했거나,
                사용자가 없거나 비활성인 경우
        """
        if not token:
            raise AuthError("토큰이 필요합니다")

        try:
            payload = decode_access_token(
                token,
                self.settings.get_jwt_secret(),
                algorithm=self.settings.JWT_ALGORITHM,
            )
        except TokenError as e:
            logger.debug(f"토큰 검증 실패: {e}")
            raise AuthError("토큰 인증에 실패했습니다")

        user_id = payload.get("userId")
        if not isinstance(user_id, int):
            raise AuthError("토큰 인증에 실패했습니다")

        user = self.user_repo.get_user_by_id(user_id)
        if not user or not user.is_active:
            raise AuthError("유효하지 않은 토큰입니다")
        return user
