"""
AuthService / UserService 테스트
"""
from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from app.core.exceptions import AuthError, ConflictError
from app.core.security import create_access_token, hash_password, verify_password
from app.services.auth_service import INVALID_CREDENTIALS, AuthService
from app.services.user_service import UserService


class TestPasswordHashing:
    """bcrypt 해싱 테스트"""

    def test_hash_and_verify(self):
        hashed = hash_password("secret1", rounds=4)
        assert hashed != "secret1"
        assert verify_password("secret1", hashed)
        assert not verify_password("secret2", hashed)

    def test_verify_without_hash(self):
        """해시가 없거나 형식이 다르면 실패"""
        assert not verify_password("secret1", None)
        assert not verify_password("secret1", "plain-text")


class TestAuthService:
    """AuthService 테스트"""

    @pytest.fixture
    def service(self, user_repo, test_settings):
        return AuthService(user_repo, test_settings)

    def test_register_issues_token(self, service, test_settings):
        """회원가입 시 해시 저장 및 토큰 발급"""
        user, token = service.register("alice", "alice@example.com", "secret1")

        assert user.password != "secret1"
        assert user.to_dict()["settings"]["theme"] == "blue"
        payload = jwt.decode(token, test_settings.JWT_SECRET, algorithms=["HS256"])
        assert payload["userId"] == user.id
        assert service.verify_token(token).id == user.id

    def test_register_duplicate_email(self, service):
        service.register("alice", "alice@example.com", "secret1")
        with pytest.raises(ConflictError):
            service.register("alice2", "alice@example.com", "secret1")

    def test_register_duplicate_username(self, service):
        service.register("alice", "alice@example.com", "secret1")
        with pytest.raises(ConflictError):
            service.register("alice", "other@example.com", "secret1")

    def test_login_success_updates_last_login(self, service):
        service.register("alice", "alice@example.com", "secret1")

        user, token = service.login("alice@example.com", "secret1")

        assert user.last_login is not None
        assert token

    def test_login_same_error_for_unknown_email_and_wrong_password(self, service):
        """존재하지 않는 이메일과 틀린 비밀번호는 같은 에러"""
        service.register("alice", "alice@example.com", "secret1")

        with pytest.raises(AuthError) as unknown:
            service.login("nobody@example.com", "secret1")
        with pytest.raises(AuthError) as wrong:
            service.login("alice@example.com", "wrong-pass")

        assert unknown.value.message == wrong.value.message == INVALID_CREDENTIALS

    def test_login_inactive_user(self, service, user_repo):
        user, _ = service.register("alice", "alice@example.com", "secret1")
        user.is_active = False
        user_repo.save(user)

        with pytest.raises(AuthError):
            service.login("alice@example.com", "secret1")

    def test_social_login_creates_user(self, service):
        user, token = service.social_login("kakao", "k-1", "bob@example.com", "bob")

        assert user.password is None
        assert user.social_provider == "kakao"
        assert user.last_login is not None
        assert service.verify_token(token).id == user.id

    def test_social_login_existing_social_user(self, service):
        """같은 소셜 계정으로 다시 로그인하면 같은 사용자"""
        first, _ = service.social_login("kakao", "k-1", "bob@example.com", "bob")
        again, _ = service.social_login("kakao", "k-1", "bob@example.com", "bob", avatar="/a.png")

        assert again.id == first.id
        assert again.avatar == "/a.png"

    def test_social_login_links_existing_email_account(self, service):
        """이메일이 같은 일반 계정에 소셜 정보 연결"""
        local, _ = service.register("alice", "alice@example.com", "secret1")

        linked, _ = service.social_login("google", "g-9", "alice@example.com", "alice_g")

        assert linked.id == local.id
        assert linked.social_provider == "google"
        assert linked.social_id == "g-9"
        # 기존 비밀번호 로그인은 계속 가능
        service.login("alice@example.com", "secret1")

    def test_social_user_cannot_password_login(self, service):
        service.social_login("kakao", "k-1", "bob@example.com", "bob")
        with pytest.raises(AuthError):
            service.login("bob@example.com", "anything")

    def test_social_login_username_conflict(self, service):
        service.register("bob", "bob@example.com", "secret1")
        with pytest.raises(ConflictError):
            service.social_login("kakao", "k-2", "new@example.com", "bob")

    def test_verify_token_missing(self, service):
        with pytest.raises(AuthError) as exc:
            service.verify_token(None)
        assert exc.value.message == "토큰이 필요합니다"

    def test_verify_token_bad_signature(self, service, make_user):
        user = make_user()
        token = create_access_token(user.id, "wrong-secret")

        with pytest.raises(AuthError) as exc:
            service.verify_token(token)
        assert exc.value.message == "토큰 인증에 실패했습니다"

    def test_verify_token_expired(self, service, make_user, test_settings):
        user = make_user()
        past = datetime.now(timezone.utc) - timedelta(days=31)
        token = jwt.encode(
            {"userId": user.id, "iat": past, "exp": past + timedelta(days=30)},
            test_settings.JWT_SECRET,
            algorithm="HS256",
        )

        with pytest.raises(AuthError):
            service.verify_token(token)

    def test_verify_token_unknown_user(self, service, test_settings):
        token = create_access_token(9999, test_settings.JWT_SECRET)

        with pytest.raises(AuthError) as exc:
            service.verify_token(token)
        assert exc.value.message == "유효하지 않은 토큰입니다"


class TestUserService:
    """UserService 테스트"""

    @pytest.fixture
    def service(self, user_repo, test_settings):
        return UserService(user_repo, test_settings)

    def test_update_settings_partial(self, service, make_user):
        """전달된 항목만 변경"""
        user = make_user()

        updated = service.update_settings(user.id, notifications={"email": True, "enabled": None})

        settings = updated.settings_dict()
        assert settings["theme"] == "blue"
        assert settings["notifications"] == {"enabled": True, "reminders": True, "email": True}

        updated = service.update_settings(user.id, theme="teal", require_password=True)
        assert updated.theme == "teal"
        assert updated.require_password is True
        assert updated.notify_email is True

    def test_update_settings_keeps_diary_password(self, service, make_user):
        user = make_user()
        service.set_diary_password(user.id, "1234")

        service.update_settings(user.id, theme="green")

        assert service.verify_diary_password(user.id, "1234")

    def test_diary_password(self, service, make_user):
        user = make_user()
        assert not service.verify_diary_password(user.id, "1234")

        updated = service.set_diary_password(user.id, "1234")

        assert updated.require_password is True
        assert updated.diary_password != "1234"
        assert service.verify_diary_password(user.id, "1234")
        assert not service.verify_diary_password(user.id, "4321")
