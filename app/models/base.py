"""
SQLAlchemy 선언적 Base 및 공용 컬럼 타입
"""
from datetime import datetime, timezone

from sqlalchemy import JSON
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import DeclarativeBase

# PostgreSQL에서는 JSONB, 그 외(SQLite 테스트 등)에서는 JSON
JSONType = JSON().with_variant(JSONB(), "postgresql")


def utcnow() -> datetime:
    """naive UTC 현재 시각"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def isoformat(value):
    return value.isoformat() if value else None


class Base(DeclarativeBase):
    pass
