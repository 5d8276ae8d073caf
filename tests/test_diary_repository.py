"""
DiaryRepository / UserRepository 테스트
"""
from datetime import datetime, timedelta

from app.models.base import utcnow


class TestDiaryRepository:
    """DiaryRepository 테스트"""

    def test_create_entry_defaults(self, make_user, make_entry):
        """기본값으로 일기 생성"""
        user = make_user()
        entry = make_entry(user.id)

        assert entry.id is not None
        assert entry.emotion == "neutral"
        assert entry.images == []
        assert entry.tags == []
        assert entry.is_private is False
        assert entry.is_deleted is False
        assert entry.created_at is not None

    def test_get_entry_scoped_to_owner(self, diary_repo, make_user, make_entry):
        """다른 사용자의 일기는 조회되지 않음"""
        owner = make_user()
        other = make_user()
        entry = make_entry(owner.id)

        assert diary_repo.get_entry(owner.id, entry.id).id == entry.id
        assert diary_repo.get_entry(other.id, entry.id) is None

    def test_get_entry_excludes_deleted(self, diary_repo, make_user, make_entry):
        """삭제된 일기는 조회되지 않음"""
        user = make_user()
        entry = make_entry(user.id)
        diary_repo.soft_delete(entry)

        assert diary_repo.get_entry(user.id, entry.id) is None

    def test_list_entries_orders_by_date_desc(self, diary_repo, make_user, make_entry):
        """date 내림차순 정렬 및 전체 개수"""
        user = make_user()
        for day in (3, 10, 7):
            make_entry(user.id, title=f"{day}일", date=datetime(2024, 3, day))

        entries, total = diary_repo.list_entries(user.id, offset=0, limit=10)

        assert total == 3
        assert [e.title for e in entries] == ["10일", "7일", "3일"]

    def test_list_entries_filters(self, diary_repo, make_user, make_entry):
        """타입 및 날짜 범위 필터 (양 끝 포함)"""
        user = make_user()
        make_entry(user.id, type="memo", date=datetime(2024, 3, 1))
        make_entry(user.id, type="diary", date=datetime(2024, 3, 5))
        make_entry(user.id, type="diary", date=datetime(2024, 3, 10))

        memos, memo_total = diary_repo.list_entries(user.id, 0, 10, entry_type="memo")
        assert memo_total == 1
        assert memos[0].type == "memo"

        ranged, ranged_total = diary_repo.list_entries(
            user.id, 0, 10,
            start_date=datetime(2024, 3, 5),
            end_date=datetime(2024, 3, 10),
        )
        assert ranged_total == 2

    def test_list_entries_excludes_deleted(self, diary_repo, make_user, make_entry):
        """삭제된 일기는 목록과 개수에서 제외"""
        user = make_user()
        kept = make_entry(user.id)
        removed = make_entry(user.id)
        diary_repo.soft_delete(removed)

        entries, total = diary_repo.list_entries(user.id, 0, 10)

        assert total == 1
        assert entries[0].id == kept.id

    def test_admin_queries_include_deleted(self, diary_repo, make_user, make_entry):
        """관리자용 조회는 삭제된 일기도 포함"""
        user = make_user()
        make_entry(user.id)
        diary_repo.soft_delete(make_entry(user.id))

        assert diary_repo.count_entries_including_deleted() == 2
        recent = diary_repo.list_recent_including_deleted()
        assert len(recent) == 2
        assert recent[0].user.username == user.username

    def test_count_created_since(self, diary_repo, make_user, make_entry):
        """작성 시각 기준 개수"""
        user = make_user()
        make_entry(user.id, created_at=utcnow() - timedelta(days=2))
        make_entry(user.id)

        assert diary_repo.count_entries_including_deleted(
            created_since=utcnow() - timedelta(hours=1)
        ) == 1


class TestUserRepository:
    """UserRepository 테스트"""

    def test_find_by_email_or_username(self, user_repo, make_user):
        user = make_user(username="alice", email="alice@example.com")

        assert user_repo.find_by_email_or_username("alice@example.com", "nobody").id == user.id
        assert user_repo.find_by_email_or_username("x@example.com", "alice").id == user.id
        assert user_repo.find_by_email_or_username("x@example.com", "nobody") is None

    def test_find_by_social_prefers_social_match(self, user_repo, make_user):
        """소셜 ID 일치가 이메일 일치보다 우선"""
        by_email = make_user(email="shared@example.com")
        by_social = make_user(password=None, social_provider="google", social_id="g-1")

        found = user_repo.find_by_social_or_email("google", "g-1", "shared@example.com")

        assert found.id == by_social.id
        assert found.id != by_email.id

    def test_get_user_by_email_active_only(self, user_repo, make_user):
        user = make_user(email="gone@example.com", is_active=False)

        assert user_repo.get_user_by_email("gone@example.com").id == user.id
        assert user_repo.get_user_by_email("gone@example.com", active_only=True) is None
