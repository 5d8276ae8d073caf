"""
AdminService 테스트
"""
from datetime import timedelta

import pytest

from app.core.exceptions import ForbiddenError
from app.models.base import utcnow
from app.services.admin_service import AdminService


class TestAdminService:
    """AdminService 테스트"""

    @pytest.fixture
    def service(self, user_repo, diary_repo, test_settings):
        return AdminService(user_repo, diary_repo, test_settings)

    def test_check_key(self, service, test_settings):
        service.check_key(test_settings.ADMIN_SECRET_KEY)

        for bad in (None, "", "wrong-key"):
            with pytest.raises(ForbiddenError):
                service.check_key(bad)

    def test_unconfigured_key_rejects_everything(self, user_repo, diary_repo, test_settings):
        """관리자 키가 설정되지 않으면 모든 요청 거부"""
        settings = test_settings.model_copy(update={"ADMIN_SECRET_KEY": None})
        service = AdminService(user_repo, diary_repo, settings)

        with pytest.raises(ForbiddenError):
            service.check_key("")

    def test_dashboard_stats(self, service, diary_repo, make_user, make_entry):
        user = make_user()
        make_user()
        make_entry(user.id, created_at=utcnow() - timedelta(days=3))
        diary_repo.soft_delete(make_entry(user.id))

        stats = service.dashboard_stats()

        assert stats["totalUsers"] == 2
        assert stats["totalDiaries"] == 2
        assert stats["todayDiaries"] == 1
        assert stats["serverStatus"] == "healthy"

    def test_list_users_hides_credentials(self, service, make_user):
        make_user()

        users = service.list_users()

        assert len(users) == 1
        assert "password" not in users[0]
        assert "diaryPassword" not in users[0]["settings"]

    def test_list_diaries_includes_author(self, service, diary_repo, make_user, make_entry):
        user = make_user(username="writer")
        diary_repo.soft_delete(make_entry(user.id))

        diaries = service.list_diaries()

        assert len(diaries) == 1
        assert diaries[0]["isDeleted"] is True
        assert diaries[0]["userId"]["username"] == "writer"
