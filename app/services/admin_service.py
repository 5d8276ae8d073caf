"""
관리자 서비스 - 공유 비밀 키 검증, 통계, 원본 목록 조회
"""
import hmac
import logging
from typing import Any, Dict, List, Optional

from app.config.settings import Settings, get_settings
from app.core.dates import local_midnight_utc
from app.core.exceptions import ForbiddenError
from app.repositories.diary_repository import DiaryRepository
from app.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)

RECENT_DIARY_LIMIT = 100


class AdminService:
    """관리자 패널용 서비스"""

    def __init__(
        self,
        user_repo: UserRepository,
        diary_repo: DiaryRepository,
        settings: Optional[Settings] = None,
    ):
        self.user_repo = user_repo
        self.diary_repo = diary_repo
        self.settings = settings or get_settings()

    def check_key(self, admin_key: Optional[str]) -> None:
        """
        Admin-Key 헤더 값을 설정된 관리자 키와 비교합니다.

        Raises:
            ForbiddenError: 헤더가 없거나 비어 있거나 일치하지 않는 경우,
                또는 관리자 키가 설정되지 않은 경우
        """
        expected = self.settings.get_admin_secret_key()
        if not expected or not admin_key:
            logger.warning("관리자 인증 실패: 키 없음")
            raise ForbiddenError()
        if not hmac.compare_digest(admin_key.encode("utf-8"), expected.encode("utf-8")):
            logger.warning("관리자 인증 실패: 키 불일치")
            raise ForbiddenError()

    def dashboard_stats(self) -> Dict[str, Any]:
        """
        전체 사용자 수, 전체 일기 수, 오늘(로컬 자정 이후) 작성된 일기 수.

        일기 수는 삭제된 항목을 포함한 원본 테이블 기준입니다.
        """
        return {
            "totalUsers": self.user_repo.count_users(),
            "totalDiaries": self.diary_repo.count_entries_including_deleted(),
            "todayDiaries": self.diary_repo.count_entries_including_deleted(
                created_since=local_midnight_utc()
            ),
            "serverStatus": "healthy",
        }

    def list_users(self) -> List[Dict[str, Any]]:
        """전체 사용자 목록 (자격 증명 제외, 최신 가입순)"""
        return [user.to_dict() for user in self.user_repo.list_users()]

    def list_diaries(self) -> List[Dict[str, Any]]:
        """최근 일기 100개 (삭제된 항목 포함, 작성자 정보 포함, 최신순)"""
        entries = self.diary_repo.list_recent_including_deleted(limit=RECENT_DIARY_LIMIT)
        return [entry.to_admin_dict() for entry in entries]
