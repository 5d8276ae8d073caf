"""
Application Startup Handler
로깅 구성 및 시작 시 점검
"""
import logging

from sqlalchemy import text

from app.config.settings import get_settings

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = None) -> None:
    """루트 로거 구성 (LOG_LEVEL 환경 변수 기준)"""
    level = (level or get_settings().LOG_LEVEL).upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger().setLevel(level)


async def startup_handler():
    """애플리케이션 시작 시 설정 요약과 데이터베이스 연결을 확인합니다."""
    settings = get_settings()

    logger.info("=" * 60)
    logger.info("FastAPI 초기화 중...")
    logger.info(f"   - App Name: {settings.APP_NAME}")
    logger.info(f"   - Version: {settings.APP_VERSION}")
    logger.info(f"   - Debug Mode: {settings.DEBUG}")
    logger.info(f"   - Upload Dir: {settings.UPLOAD_DIR}")
    logger.info(f"   - Tracing: {settings.TRACING_ENABLED}")

    if not settings.get_admin_secret_key():
        logger.warning("ADMIN_SECRET_KEY가 설정되지 않아 관리자 API가 모두 거부됩니다")

    from app.config.database import engine

    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        logger.info(f"데이터베이스 연결 확인 완료: {engine.url.get_backend_name()}")
    except Exception as e:
        logger.error(f"데이터베이스 연결 실패: {str(e)}")
        raise

    logger.info("초기화 완료")
    logger.info("=" * 60)
