"""
API 스키마 정의
"""
from datetime import datetime
from typing import Annotated, Any, Dict, List, Literal, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, EmailStr, Field, StringConstraints, field_validator

from app.core.dates import parse_iso_datetime
from app.models.base import utcnow

Username = Annotated[str, StringConstraints(strip_whitespace=True, min_length=3, max_length=20)]
Tag = Annotated[str, StringConstraints(strip_whitespace=True, max_length=20)]
EntryType = Literal["memo", "diary"]
Emotion = Literal["very-good", "good", "neutral", "bad", "very-bad"]
Theme = Literal["blue", "green", "purple", "orange", "teal"]


def _lower_email(value: Any) -> Any:
    return value.strip().lower() if isinstance(value, str) else value


Email = Annotated[EmailStr, BeforeValidator(_lower_email)]


class CamelModel(BaseModel):
    """camelCase 별칭과 필드명 둘 다 허용"""
    model_config = ConfigDict(populate_by_name=True)


# ============ 인증 ============

class RegisterRequest(BaseModel):
    """회원가입 요청"""
    username: Username
    email: Email
    password: str = Field(..., min_length=6, max_length=72)


class LoginRequest(BaseModel):
    """로그인 요청"""
    email: Email
    password: str = Field(..., min_length=1)


class SocialLoginRequest(CamelModel):
    """소셜 로그인 요청"""
    provider: Literal["google", "kakao"]
    social_id: str = Field(..., alias="socialId", min_length=1, max_length=255)
    email: Email
    username: Username
    avatar: Optional[str] = Field(None, max_length=500)


# ============ 일기 메타데이터 ============

class ImageAttachment(CamelModel):
    """첨부 이미지"""
    filename: str
    original_name: Optional[str] = Field(None, alias="originalName")
    path: str
    size: int = Field(..., ge=0)
    upload_date: datetime = Field(default_factory=utcnow, alias="uploadDate")


class Weather(BaseModel):
    """날씨 스냅샷"""
    condition: Optional[str] = None
    temperature: Optional[float] = None
    location: Optional[str] = None


class Coordinates(BaseModel):
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)


class Location(BaseModel):
    """위치"""
    name: Optional[str] = None
    coordinates: Optional[Coordinates] = None


class Reminder(CamelModel):
    """알림 설정"""
    enabled: bool = False
    time: Optional[datetime] = None
    before_minutes: int = Field(10, alias="beforeMinutes", ge=0)
    repeat: Literal["none", "daily", "weekly", "monthly"] = "none"

    @field_validator("time", mode="before")
    @classmethod
    def _parse_time(cls, value: Any) -> Any:
        return None if value is None else parse_iso_datetime(value)


# ============ 일기 ============

class DiaryCreateRequest(CamelModel):
    """일기 생성 요청"""
    title: str = Field(..., min_length=1, max_length=100)
    content: str = Field(..., min_length=1, max_length=10000)
    type: EntryType
    date: datetime
    emotion: Emotion = "neutral"
    images: List[ImageAttachment] = Field(default_factory=list)
    tags: List[Tag] = Field(default_factory=list)
    weather: Optional[Weather] = None
    location: Optional[Location] = None
    reminder: Optional[Reminder] = None
    is_private: bool = Field(False, alias="isPrivate")

    @field_validator("title", mode="before")
    @classmethod
    def _strip_title(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value

    @field_validator("date", mode="before")
    @classmethod
    def _parse_date(cls, value: Any) -> datetime:
        return parse_iso_datetime(value)


class DiaryUpdateRequest(CamelModel):
    """일기 수정 요청 (부분 수정)"""
    title: Optional[str] = Field(None, min_length=1, max_length=100)
    content: Optional[str] = Field(None, min_length=1, max_length=10000)
    type: Optional[EntryType] = None
    date: Optional[datetime] = None
    emotion: Optional[Emotion] = None
    images: Optional[List[ImageAttachment]] = None
    tags: Optional[List[Tag]] = None
    weather: Optional[Weather] = None
    location: Optional[Location] = None
    reminder: Optional[Reminder] = None
    is_private: Optional[bool] = Field(None, alias="isPrivate")

    @field_validator("title", mode="before")
    @classmethod
    def _strip_title(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value

    @field_validator("date", mode="before")
    @classmethod
    def _parse_date(cls, value: Any) -> Optional[datetime]:
        return None if value is None else parse_iso_datetime(value)


# ============ 사용자 설정 ============

class NotificationSettings(BaseModel):
    enabled: Optional[bool] = None
    reminders: Optional[bool] = None
    email: Optional[bool] = None


class PrivacySettings(CamelModel):
    require_password: Optional[bool] = Field(None, alias="requirePassword")


class SettingsUpdateRequest(BaseModel):
    """설정 수정 요청 (전달된 항목만 반영)"""
    theme: Optional[Theme] = None
    notifications: Optional[NotificationSettings] = None
    privacy: Optional[PrivacySettings] = None


class DiaryPasswordRequest(BaseModel):
    """일기 비밀번호 설정/확인 요청"""
    password: str = Field(..., min_length=4, max_length=50)


# ============ 응답 ============

class HealthResponse(BaseModel):
    """헬스 체크 응답"""
    status: str
    service: str
