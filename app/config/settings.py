"""
애플리케이션 설정 모듈
환경 변수를 관리하고, 필요 시 AWS Secrets Manager에서 시크릿을 가져옵니다.
"""
import logging
from functools import lru_cache
from typing import List, Optional

from pydantic_settings import BaseSettings

from app.config.secrets import get_secrets_manager

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """애플리케이션 설정"""

    # 앱 설정
    APP_NAME: str = "jjoa-diary"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["*"]
    TRACING_ENABLED: bool = False

    # AWS 설정
    AWS_REGION: str = "us-east-1"
    USE_SECRETS_MANAGER: bool = False
    DB_SECRET_NAME: str = "jjoa-diary/db-password"
    APP_CONFIG_SECRET_NAME: str = "jjoa-diary/app-config"

    # 데이터베이스 설정 (DATABASE_URL이 없으면 DB_HOST 기준으로 PostgreSQL, 그마저 없으면 SQLite)
    DATABASE_URL: Optional[str] = None
    DB_HOST: Optional[str] = None
    DB_PORT: int = 5432
    DB_NAME: Optional[str] = None
    DB_USER: Optional[str] = None
    DB_PASSWORD: Optional[str] = None

    # 인증 설정
    JWT_SECRET: Optional[str] = None
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRE_DAYS: int = 30
    BCRYPT_ROUNDS: int = 12

    # 관리자 설정
    ADMIN_SECRET_KEY: Optional[str] = None

    # 업로드 설정
    UPLOAD_DIR: str = "uploads"
    MAX_UPLOAD_SIZE: int = 10 * 1024 * 1024

    # 캐시된 설정
    _app_config: Optional[dict] = None

    class Config:
        env_file = ".env"
        case_sensitive = True

    def _get_app_config(self) -> dict:
        """애플리케이션 시크릿을 Secrets Manager에서 가져옵니다."""
        if self._app_config is not None:
            return self._app_config

        config = {}
        if self.USE_SECRETS_MANAGER:
            secret = get_secrets_manager(self.AWS_REGION).get_secret(self.APP_CONFIG_SECRET_NAME)
            if secret:
                config = secret
                logger.info(f"Loaded app config from Secrets Manager: {self.APP_CONFIG_SECRET_NAME}")
            else:
                logger.warning(f"Failed to load app config from Secrets Manager: {self.APP_CONFIG_SECRET_NAME}")

        self._app_config = config
        return config

    def get_jwt_secret(self) -> str:
        """JWT 서명 키를 반환합니다. 환경 변수가 우선합니다."""
        if self.JWT_SECRET:
            return self.JWT_SECRET
        secret = self._get_app_config().get("JWT_SECRET")
        if not secret:
            raise RuntimeError("JWT_SECRET이 설정되지 않았습니다")
        return secret

    def get_admin_secret_key(self) -> str:
        """관리자 키를 반환합니다. 설정되지 않은 경우 빈 문자열."""
        if self.ADMIN_SECRET_KEY:
            return self.ADMIN_SECRET_KEY
        return self._get_app_config().get("ADMIN_SECRET_KEY", "")

    def _get_db_password(self) -> Optional[str]:
        """DB 비밀번호 (환경 변수 또는 Secrets Manager)"""
        password = self.DB_PASSWORD
        if self.USE_SECRETS_MANAGER and not password:
            password = get_secrets_manager(self.AWS_REGION).get_secret_value(
                self.DB_SECRET_NAME, "password", ""
            )
        return password

    def get_database_url(self) -> str:
        """SQLAlchemy 데이터베이스 URL을 반환합니다."""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        if self.DB_HOST:
            password = self._get_db_password()
            return f"postgresql://{self.DB_USER}:{password}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        return "sqlite:///./jjoa_diary.db"


@lru_cache()
def get_settings() -> Settings:
    """설정 싱글톤 인스턴스를 반환합니다."""
    return Settings()
