"""
pytest 설정 및 공통 fixture
"""
from datetime import datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.config.database import get_db
from app.config.settings import Settings, get_settings
from app.models.base import Base
from app.models.user import User
from app.repositories import DiaryRepository, UserRepository

TEST_JWT_SECRET = "test-jwt-secret"
TEST_ADMIN_KEY = "admin-key"


@pytest.fixture(scope="function")
def test_db():
    """테스트용 인메모리 SQLite 데이터베이스"""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    db = TestSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def test_settings(tmp_path):
    """테스트용 설정 (낮은 bcrypt 비용, 임시 업로드 디렉터리)"""
    return Settings(
        JWT_SECRET=TEST_JWT_SECRET,
        ADMIN_SECRET_KEY=TEST_ADMIN_KEY,
        BCRYPT_ROUNDS=4,
        UPLOAD_DIR=str(tmp_path / "uploads"),
        USE_SECRETS_MANAGER=False,
    )


@pytest.fixture
def user_repo(test_db):
    return UserRepository(test_db)


@pytest.fixture
def diary_repo(test_db):
    return DiaryRepository(test_db)


@pytest.fixture
def make_user(user_repo):
    """비밀번호 해시 없이 빠르게 사용자를 만드는 헬퍼"""
    counter = {"n": 0}

    def _make(**fields) -> User:
        counter["n"] += 1
        n = counter["n"]
        values = {
            "username": f"user{n}",
            "email": f"user{n}@example.com",
            "password": "not-a-real-hash",
        }
        values.update(fields)
        return user_repo.create_user(**values)

    return _make


@pytest.fixture
def make_entry(diary_repo):
    """일기 항목 생성 헬퍼"""

    def _make(user_id: int, **fields):
        values = {
            "title": "제목",
            "content": "내용",
            "type": "diary",
            "date": datetime(2024, 1, 15, 9, 0),
        }
        values.update(fields)
        return diary_repo.create_entry(user_id, **values)

    return _make


@pytest.fixture
def client(test_db, test_settings):
    """의존성을 테스트 DB/설정으로 교체한 TestClient (lifespan 미실행)"""
    from app.main import app

    app.dependency_overrides[get_db] = lambda: test_db
    app.dependency_overrides[get_settings] = lambda: test_settings
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
